"""
tilemap/walls.py
----------------
Structural wall stages of the populator.

  - synthesize_walls   : encloses bedrooms / restrooms / lounges, one door each
  - fix_diagonal_walls : closes 2x2 diagonal gaps between wall tiles
  - decorate_walls     : stamps windows into long exterior wall runs
"""

from typing import Dict, List, Optional, Sequence, Set

from common.io_utils import log
from .context import MapContext
from .grid_classes import Point, Zone, ZoneGrid, neighbors4
from .symbols import PRIVATE_ZONES, TileSymbol, ZoneSymbol


# -------------------------------------------------------------
# Internal walls + doors
# -------------------------------------------------------------
def is_boundary_cell(zone_grid: ZoneGrid, zone: Zone, cell: Point) -> bool:
    """A zone cell touching a different, non-wall zone symbol."""
    for n in neighbors4(cell):
        if not zone_grid.in_bounds(n.x, n.y):
            continue
        sym = zone_grid.symbol_at(n.x, n.y)
        if sym != zone.symbol and sym != ZoneSymbol.WALL:
            return True
    return False


def boundary_cells(zone_grid: ZoneGrid, zone: Zone) -> List[Point]:
    return [c for c in zone if is_boundary_cell(zone_grid, zone, c)]


def _door_priority(zone_grid: ZoneGrid, cell: Point) -> int:
    """2 = faces a walkway, 1 = faces a lounge or dining room, 0 = anything else."""
    neighbor_symbols = {
        zone_grid.symbol_at(n.x, n.y)
        for n in neighbors4(cell)
        if zone_grid.in_bounds(n.x, n.y)
    }
    if ZoneSymbol.WALKWAY in neighbor_symbols:
        return 2
    if ZoneSymbol.LOUNGE in neighbor_symbols or ZoneSymbol.DINING in neighbor_symbols:
        return 1
    return 0


def _opens_into_room(zone: Zone, cell: Point, boundary: set) -> bool:
    # A door in a room corner only touches other wall cells of the same room
    return any(zone.contains(n) and n not in boundary for n in neighbors4(cell))


def choose_door(ctx: MapContext, zone: Zone, boundary: Sequence[Point]) -> Point:
    boundary_set = set(boundary)
    usable = [c for c in boundary if _opens_into_room(zone, c, boundary_set)]
    pool = usable or list(boundary)

    best = max(_door_priority(ctx.zone_grid, c) for c in pool)
    candidates = [c for c in pool if _door_priority(ctx.zone_grid, c) == best]
    return ctx.rng.choice(candidates)


def synthesize_walls(ctx: MapContext) -> Dict[int, Point]:
    """
    Turn the boundary of every private zone into wall, except one door.
    The door and its in-zone neighbours are reserved for the rest of the run.
    Returns {zone index: door cell}.
    """
    doors: Dict[int, Point] = {}
    for idx, zone in enumerate(ctx.zones):
        if zone.symbol not in PRIVATE_ZONES:
            continue

        boundary = boundary_cells(ctx.zone_grid, zone)
        if not boundary:
            log(f"🧱 {zone!r} has no shared boundary, leaving it to connectivity repair", "DEBUG")
            continue

        door = choose_door(ctx, zone, boundary)
        for cell in boundary:
            if cell == door:
                ctx.tiles.set(cell.x, cell.y, TileSymbol.FLOOR)
            else:
                ctx.tiles.set(cell.x, cell.y, TileSymbol.WALL)

        ctx.reserve(door)
        ctx.reserve(*[n for n in neighbors4(door) if zone.contains(n)])
        doors[idx] = door
        log(f"🚪 {zone!r}: {len(boundary) - 1} wall cells, door at {tuple(door)}", "DEBUG")

    ctx.doors.update(doors)
    return doors


# -------------------------------------------------------------
# Diagonal leaks
# -------------------------------------------------------------
def _on_edge(ctx: MapContext, p: Point) -> bool:
    return p.x in (0, ctx.tiles.width - 1) or p.y in (0, ctx.tiles.height - 1)


def _private_boundary(ctx: MapContext) -> Set[Point]:
    cells: Set[Point] = set()
    for zone in ctx.zones:
        if zone.symbol in PRIVATE_ZONES:
            cells.update(boundary_cells(ctx.zone_grid, zone))
    return cells


def _seal_window(
    ctx: MapContext,
    open_cells: Sequence[Point],
    wall_cells: Sequence[Point],
    room_walls: Set[Point],
) -> Optional[Point]:
    """
    Wall the first unprotected open cell; if none, open one of the walls instead.
    Walls enclosing a private room are never opened, so the window is left as is.
    """
    for p in open_cells:
        if not ctx.is_protected(p):
            ctx.tiles.set(p.x, p.y, TileSymbol.WALL)
            return p

    openable = [p for p in wall_cells if p not in room_walls]
    if not openable:
        log(f"⚠️ Diagonal gap at {tuple(wall_cells[0])} borders a private room, left in place", "WARNING")
        return None

    target = sorted(openable, key=lambda p: _on_edge(ctx, p))[0]
    ctx.tiles.set(target.x, target.y, TileSymbol.FLOOR)
    ctx.reserve(target)
    log(f"⚠️ Diagonal gap at {tuple(target)} is between protected cells, opened the wall instead", "WARNING")
    return target


def fix_diagonal_walls(ctx: MapContext) -> List[Point]:
    """
    Close every 2x2 window whose walls sit on exactly one diagonal:

        # .        . #
        . #        # .

    The top-right (resp. top-left) cell is walled; protected cells are
    skipped in favour of the other open cell of the window. When both are
    protected a wall is opened, unless it encloses a private room.
    Returns the cells that changed.
    """
    tiles = ctx.tiles
    room_walls = _private_boundary(ctx)
    changed: List[Point] = []
    for y in range(tiles.height - 1):
        for x in range(tiles.width - 1):
            tl, tr = Point(x, y), Point(x + 1, y)
            bl, br = Point(x, y + 1), Point(x + 1, y + 1)
            b_tl = tiles.is_blocking(tl.x, tl.y)
            b_tr = tiles.is_blocking(tr.x, tr.y)
            b_bl = tiles.is_blocking(bl.x, bl.y)
            b_br = tiles.is_blocking(br.x, br.y)

            if b_tl and b_br and not b_tr and not b_bl:
                fixed = _seal_window(ctx, (tr, bl), (tl, br), room_walls)
            elif b_tr and b_bl and not b_tl and not b_br:
                fixed = _seal_window(ctx, (tl, br), (tr, bl), room_walls)
            else:
                continue
            if fixed is not None:
                changed.append(fixed)
    return changed


# -------------------------------------------------------------
# Windows
# -------------------------------------------------------------
def _exterior_lines(ctx: MapContext) -> List[List[Point]]:
    w, h = ctx.tiles.width, ctx.tiles.height
    return [
        [Point(x, 0) for x in range(w)],
        [Point(x, h - 1) for x in range(w)],
        [Point(0, y) for y in range(h)],
        [Point(w - 1, y) for y in range(h)],
    ]


def _wall_runs(ctx: MapContext, line: List[Point]) -> List[List[Point]]:
    runs, current = [], []
    for p in line:
        if ctx.tiles.get(p.x, p.y) == TileSymbol.WALL:
            current.append(p)
        elif current:
            runs.append(current)
            current = []
    if current:
        runs.append(current)
    return runs


def place_window_on_run(ctx: MapContext, run: List[Point]) -> bool:
    cfg = ctx.config
    if len(run) < cfg.min_window_run or len(run) < cfg.window_size:
        return False
    if ctx.rng.random() < cfg.window_skip_probability:
        return False

    offset = ctx.rng.randint(0, len(run) - cfg.window_size)
    for p in run[offset:offset + cfg.window_size]:
        ctx.tiles.set(p.x, p.y, TileSymbol.WINDOW)
    return True


def decorate_walls(ctx: MapContext) -> int:
    """Top, bottom, left and right edges: at most one window per wall run."""
    placed = 0
    for line in _exterior_lines(ctx):
        for run in _wall_runs(ctx, line):
            if place_window_on_run(ctx, run):
                placed += 1
    log(f"🪟 Placed {placed} window segments", "DEBUG")
    return placed
