"""
tilemap/stairs.py
-----------------
Stairs normalisation and the ground-floor exit guarantee.
"""

from typing import List, Optional

from common.io_utils import log
from .context import MapContext
from .grid_classes import Point
from .symbols import TileSymbol, ZoneSymbol
from .zones import zones_of


def _clear_landings(ctx: MapContext, stairs_cells: List[Point]) -> List[Point]:
    """Force the cell under the lowest stairs cell of each column to floor."""
    landings = []
    for x in sorted({c.x for c in stairs_cells}):
        bottom = max(c.y for c in stairs_cells if c.x == x)
        landing = Point(x, bottom + 1)
        if not ctx.tiles.in_bounds(landing.x, landing.y):
            continue
        ctx.tiles.set(landing.x, landing.y, TileSymbol.FLOOR)
        ctx.reserve(landing)
        landings.append(landing)
    return landings


def process_stairs(ctx: MapContext) -> List[Point]:
    """
    Stamp stairs zones, stretching flat ones downwards to the minimum height,
    and clear a landing below every stairs column.
    Maps without a stairs zone fall back to walkway cells on the top row.
    Returns the landing cells.
    """
    tiles = ctx.tiles
    min_height = ctx.config.min_stairs_height
    stairs_zones = zones_of(ctx.zones, ZoneSymbol.STAIRS)
    landings: List[Point] = []

    if stairs_zones:
        for zone in stairs_zones:
            cells = list(zone.cells)
            _, min_y, _, max_y = zone.bounds()
            bottom_row = [c for c in zone if c.y == max_y]
            while max_y - min_y + 1 < min_height and max_y + 1 < tiles.height:
                max_y += 1
                cells.extend(Point(c.x, max_y) for c in bottom_row)
            if len(cells) > len(zone):
                log(f"🪜 Stretched {zone!r} down to row {max_y}", "DEBUG")

            for c in cells:
                tiles.set(c.x, c.y, TileSymbol.STAIRS)
            landings.extend(_clear_landings(ctx, cells))
        return landings

    # Single-floor maps: stairs on top-row walkways
    for x in range(ctx.zone_grid.width):
        if ctx.zone_grid.symbol_at(x, 0) != ZoneSymbol.WALKWAY:
            continue
        tiles.set(x, 0, TileSymbol.STAIRS)
        if tiles.height > 1:
            tiles.set(x, 1, TileSymbol.FLOOR)
            ctx.reserve(Point(x, 1))
            landings.append(Point(x, 1))
    return landings


def ensure_exits(ctx: MapContext) -> Optional[Point]:
    """
    Ground floor only: make sure an entrance sits on the bottom row.
    Returns the new entrance cell, or None if one already existed.
    """
    tiles = ctx.tiles
    bottom = tiles.height - 1
    if any(tiles.get(x, bottom) == TileSymbol.ENTRANCE for x in range(tiles.width)):
        return None

    mid = tiles.width // 2
    candidates = [
        x for x in range(tiles.width)
        if bottom > 0 and tiles.is_passable(x, bottom - 1)
    ]
    x = min(candidates, key=lambda cx: (abs(cx - mid), cx)) if candidates else mid

    exit_cell = Point(x, bottom)
    tiles.set(exit_cell.x, exit_cell.y, TileSymbol.ENTRANCE)
    ctx.reserve(exit_cell)
    log(f"🚪 No entrance on the bottom row, added one at {tuple(exit_cell)}", "WARNING")
    return exit_cell
