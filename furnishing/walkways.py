"""
furnishing/walkways.py
----------------------
Walkways and entrances stay clear: every cell is plain floor, and each
entrance zone gets one ENTRANCE tile on the bottom row of the map.
"""

from typing import List

from common.io_utils import log
from tilemap.context import MapContext
from tilemap.grid_classes import Point, Zone
from tilemap.symbols import TileSymbol, ZoneSymbol


def clear_walkway(ctx: MapContext, zone: Zone) -> None:
    for c in zone:
        ctx.tiles.set(c.x, c.y, TileSymbol.FLOOR)


def place_entrance(ctx: MapContext, zone: Zone) -> Point:
    """
    Drop the zone's southmost cell straight down to the bottom row, carving
    a reserved corridor on the way, and mark the bottom cell as ENTRANCE.
    """
    bottom = ctx.tiles.height - 1
    max_y = max(c.y for c in zone)
    south = next(c for c in zone if c.y == max_y)

    corridor = [Point(south.x, y) for y in range(south.y, bottom + 1)]
    for p in corridor:
        ctx.tiles.set(p.x, p.y, TileSymbol.FLOOR)
    ctx.reserve(*corridor)

    exit_cell = Point(south.x, bottom)
    ctx.tiles.set(exit_cell.x, exit_cell.y, TileSymbol.ENTRANCE)
    if len(corridor) > 1:
        log(f"🚪 Entrance moved from row {south.y} down to {tuple(exit_cell)}", "DEBUG")
    return exit_cell


def furnish_walkway(ctx: MapContext, zone: Zone) -> List[Point]:
    clear_walkway(ctx, zone)
    if zone.symbol == ZoneSymbol.ENTRANCE:
        return [place_entrance(ctx, zone)]
    return []
