"""
furnishing/dining.py
--------------------
Random packing of chair / table / chair strips.

Each strip is horizontal or vertical. After a strip is placed its cells and
their neighbours leave the free set, so no two strips touch.
"""

from typing import List, Set

from common.io_utils import log
from tilemap.context import MapContext
from tilemap.grid_classes import Point, Zone
from tilemap.symbols import TileSymbol
from .placement_utils import discard_with_neighbors, free_set, stamp


HORIZONTAL = ((-1, 0), (0, 0), (1, 0))
VERTICAL = ((0, -1), (0, 0), (0, 1))


def _try_strip(ctx: MapContext, free: Set[Point], center: Point) -> List[Point]:
    offsets = HORIZONTAL if ctx.rng.random() < 0.5 else VERTICAL
    cells = [Point(center.x + dx, center.y + dy) for dx, dy in offsets]
    if all(c in free for c in cells):
        return cells
    return []


def furnish_dining(ctx: MapContext, zone: Zone) -> int:
    """Returns the number of tables placed."""
    ctx.paint(zone, TileSymbol.FLOOR)
    free = free_set(ctx, zone)
    attempts = ctx.config.dining_attempt_factor * len(zone)

    tables = 0
    for _ in range(attempts):
        if len(free) < 3:
            break
        center = ctx.rng.choice(sorted(free))
        strip = _try_strip(ctx, free, center)
        if not strip:
            continue

        left, middle, right = strip
        stamp(ctx, TileSymbol.CHAIR, left)
        stamp(ctx, TileSymbol.TABLE, middle)
        stamp(ctx, TileSymbol.CHAIR, right)
        discard_with_neighbors(free, strip)
        tables += 1

    log(f"🍶 {zone!r}: {tables} tables", "DEBUG")
    return tables
