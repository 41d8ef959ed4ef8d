"""
tilemap/connectivity.py
-----------------------
Reachability analysis and repair.

  - ensure_zone_connectivity   : punches a door for rooms with no way out
  - repair_global_connectivity : BFS from the entry point, then carves the
                                 shortest wall-piercing path for every
                                 unreachable component

Neighbour order is always up, down, left, right so repairs are
reproducible for a given seed.
"""

from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from common.io_utils import log
from .context import MapContext
from .errors import ConnectivityRepairError
from .grid_classes import DIRECTIONS, Point, TileGrid, Zone, ZoneGrid, neighbors4
from .symbols import OPEN_ZONES, TileSymbol, ZoneSymbol


WALKWAY_PRIORITY = 150
ROOM_PRIORITY = 100


# -------------------------------------------------------------
# Reachability helpers
# -------------------------------------------------------------
def _first_zone_cell(tiles: TileGrid, zone_grid: ZoneGrid, symbol: ZoneSymbol) -> Optional[Point]:
    for p in zone_grid.cells():
        if zone_grid.symbol_at(p.x, p.y) == symbol and tiles.is_passable(p.x, p.y):
            return p
    return None


def find_entry_point(tiles: TileGrid, zone_grid: ZoneGrid) -> Optional[Point]:
    """
    Where characters arrive on this floor, in priority order:
    entrance tile, entrance zone, stairs tile, stairs zone, any passable cell.
    """
    start = tiles.find_first(TileSymbol.ENTRANCE)
    if start is None:
        start = _first_zone_cell(tiles, zone_grid, ZoneSymbol.ENTRANCE)
    if start is None:
        start = tiles.find_first(TileSymbol.STAIRS)
    if start is None:
        start = _first_zone_cell(tiles, zone_grid, ZoneSymbol.STAIRS)
    if start is None:
        for p in zone_grid.cells():
            if tiles.is_passable(p.x, p.y):
                return p
    return start


def find_reachable(tiles: TileGrid, start: Point) -> Set[Point]:
    """All passable cells 4-connected to start."""
    reachable = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for n in neighbors4(cur):
            if n in reachable or not tiles.is_passable(n.x, n.y):
                continue
            reachable.add(n)
            queue.append(n)
    return reachable


def find_orphan_components(tiles: TileGrid, reachable: Set[Point]) -> List[List[Point]]:
    """Connected groups of passable cells outside `reachable`, discovered row-major."""
    seen: Set[Point] = set()
    groups: List[List[Point]] = []
    for y in range(tiles.height):
        for x in range(tiles.width):
            p = Point(x, y)
            if p in seen or p in reachable or not tiles.is_passable(x, y):
                continue

            group: List[Point] = []
            queue = deque([p])
            seen.add(p)
            while queue:
                cur = queue.popleft()
                group.append(cur)
                for n in neighbors4(cur):
                    if n in seen or n in reachable or not tiles.is_passable(n.x, n.y):
                        continue
                    seen.add(n)
                    queue.append(n)
            groups.append(group)
    return groups


def find_bridge_path(tiles: TileGrid, group: List[Point], reachable: Set[Point]) -> Optional[List[Point]]:
    """
    Multi-source BFS from every cell of `group`, walking through walls,
    until the first reachable cell. Returns the path from the group to that
    cell (both ends included), or None if the search is exhausted.
    """
    parents: Dict[Point, Optional[Point]] = {p: None for p in group}
    queue = deque(group)
    while queue:
        cur = queue.popleft()
        if cur in reachable:
            path = []
            node: Optional[Point] = cur
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path

        for n in neighbors4(cur):
            if n in parents or not tiles.in_bounds(n.x, n.y):
                continue
            parents[n] = cur
            queue.append(n)
    return None


# -------------------------------------------------------------
# Global repair
# -------------------------------------------------------------
def repair_global_connectivity(ctx: MapContext) -> List[Point]:
    """
    Connect every passable component to the entry point.
    Carved wall cells become floor and are reserved.
    Returns the carved cells (empty if the map was already connected).
    """
    tiles = ctx.tiles
    start = find_entry_point(tiles, ctx.zone_grid)
    if start is None:
        log("🔍 No passable cell on this floor, nothing to connect", "WARNING")
        return []

    reachable = find_reachable(tiles, start)
    orphans = find_orphan_components(tiles, reachable)
    carved: List[Point] = []

    for group in orphans:
        path = find_bridge_path(tiles, group, reachable)
        if path is None:
            raise ConnectivityRepairError(
                f"Component of {len(group)} cells near {tuple(group[0])} cannot reach the entry point",
                unreachable=group,
            )
        for p in path:
            if tiles.is_blocking(p.x, p.y):
                tiles.set(p.x, p.y, TileSymbol.FLOOR)
                ctx.reserve(p)
                carved.append(p)
        reachable.update(group)
        reachable.update(path)

    if orphans:
        log(f"🔗 Connected {len(orphans)} isolated areas, carved {len(carved)} wall cells", "INFO")
    return carved


# -------------------------------------------------------------
# Per-zone repair
# -------------------------------------------------------------
def has_egress(ctx: MapContext, zone: Zone) -> bool:
    """True if some passable zone cell touches a passable cell outside the zone."""
    tiles = ctx.tiles
    for cell in zone:
        if tiles.is_blocking(cell.x, cell.y):
            continue
        for n in neighbors4(cell):
            if zone.contains(n) or not tiles.in_bounds(n.x, n.y):
                continue
            if not tiles.is_blocking(n.x, n.y):
                return True
    return False


def _beyond_priority(ctx: MapContext, zone: Zone, beyond: Point) -> int:
    tiles = ctx.tiles
    if not tiles.in_bounds(beyond.x, beyond.y) or tiles.is_blocking(beyond.x, beyond.y):
        return 0
    if zone.contains(beyond):
        return 0
    sym = ctx.zone_grid.symbol_at(beyond.x, beyond.y)
    if sym == ZoneSymbol.WALKWAY:
        return WALKWAY_PRIORITY
    if sym in (ZoneSymbol.DINING, ZoneSymbol.LOUNGE, ZoneSymbol.ENTRANCE):
        return ROOM_PRIORITY
    return 0


def find_breakout(ctx: MapContext, zone: Zone) -> Optional[Tuple[int, Point, Point]]:
    """Best (priority, interior cell, wall cell) to open; first found wins ties."""
    tiles = ctx.tiles
    best: Optional[Tuple[int, Point, Point]] = None
    for cell in zone:
        if tiles.is_blocking(cell.x, cell.y):
            continue
        for dx, dy in DIRECTIONS:
            wall = Point(cell.x + dx, cell.y + dy)
            if not tiles.in_bounds(wall.x, wall.y) or not tiles.is_blocking(wall.x, wall.y):
                continue
            beyond = Point(cell.x + 2 * dx, cell.y + 2 * dy)
            priority = _beyond_priority(ctx, zone, beyond)
            if best is None or priority > best[0]:
                best = (priority, cell, wall)
    return best


def ensure_zone_connectivity(ctx: MapContext) -> List[Point]:
    """
    Give every room (kitchen, dining, lounge, bedroom, restroom) at least one
    opening. Walkways, entrances, stairs and generic floor are skipped.
    Returns the opened wall cells.
    """
    opened: List[Point] = []
    for zone in ctx.zones:
        if zone.symbol in OPEN_ZONES:
            continue
        if has_egress(ctx, zone):
            continue

        breakout = find_breakout(ctx, zone)
        if breakout is None:
            log(f"⚠️ {zone!r} is sealed and has no wall to open", "WARNING")
            continue

        priority, cell, wall = breakout
        ctx.tiles.set(wall.x, wall.y, TileSymbol.FLOOR)
        ctx.reserve(wall, cell)
        opened.append(wall)
        log(f"🔨 Opened {zone!r} at {tuple(wall)} (priority {priority})", "DEBUG")
    return opened
