"""
furnishing/placement_utils.py
-----------------------------
Utility functions for furniture placement on the tile grid.

Used by:
  - dining.py   (chair / table / chair strips)
  - living.py   (beds, sofas, lamps, bookshelves)
  - restroom.py (toilet + sink)

All footprints are axis-aligned offset lists relative to an anchor cell.
Multi-cell items write their symbol on the anchor only; every other
footprint cell stays floor but is reserved.
"""

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from tilemap.context import MapContext
from tilemap.grid_classes import Placement, Point, Zone
from tilemap.symbols import TileSymbol


Offsets = Sequence[Tuple[int, int]]

# Footprints (dx, dy) relative to the anchor
SINGLE: Offsets = ((0, 0),)
BED_FOOTPRINT: Offsets = tuple((dx, dy) for dy in range(3) for dx in range(2))
SOFA_FOOTPRINT: Offsets = ((0, 0), (1, 0))
VERTICAL_PAIR: Offsets = ((0, 0), (0, 1))


# -------------------------------------------------------------
# Geometry helpers
# -------------------------------------------------------------
def footprint_cells(anchor: Point, offsets: Offsets) -> List[Point]:
    return [Point(anchor.x + dx, anchor.y + dy) for dx, dy in offsets]


def fits(ctx: MapContext, zone: Zone, anchor: Point, offsets: Offsets) -> bool:
    """Every footprint cell inside the zone, free and not reserved."""
    for c in footprint_cells(anchor, offsets):
        if not zone.contains(c):
            return False
        if ctx.tiles.is_blocking(c.x, c.y) or ctx.is_reserved(c):
            return False
        if ctx.tiles.get(c.x, c.y) not in (TileSymbol.FLOOR, TileSymbol.KITCHEN_FLOOR):
            return False
    return True


def find_anchors(ctx: MapContext, zone: Zone, offsets: Offsets) -> List[Point]:
    """Anchors (in zone order) where the whole footprint fits."""
    return [c for c in zone if fits(ctx, zone, c, offsets)]


# -------------------------------------------------------------
# Placement utilities
# -------------------------------------------------------------
def stamp(ctx: MapContext, kind: TileSymbol, anchor: Point, offsets: Offsets = SINGLE) -> Placement:
    """Write `kind` on the anchor, reserve the footprint and record the placement."""
    cells = footprint_cells(anchor, offsets)
    ctx.tiles.set(anchor.x, anchor.y, kind)
    ctx.reserve(*cells)
    placement = Placement(kind, anchor, cells)
    ctx.placements.append(placement)
    return placement


def place_random(ctx: MapContext, zone: Zone, kind: TileSymbol, offsets: Offsets = SINGLE) -> Optional[Placement]:
    """Stamp `kind` at a uniformly chosen feasible anchor, or return None."""
    anchors = find_anchors(ctx, zone, offsets)
    if not anchors:
        return None
    return stamp(ctx, kind, ctx.rng.choice(anchors), offsets)


def free_set(ctx: MapContext, zone: Zone) -> Set[Point]:
    return set(ctx.free_cells(zone))


def discard_with_neighbors(free: Set[Point], cells: Iterable[Point]) -> None:
    """Remove `cells` and their 4-neighbours from a free-cell set."""
    for c in cells:
        free.discard(c)
        free.discard(Point(c.x, c.y - 1))
        free.discard(Point(c.x, c.y + 1))
        free.discard(Point(c.x - 1, c.y))
        free.discard(Point(c.x + 1, c.y))
