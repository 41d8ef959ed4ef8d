"""
furnishing/restroom.py
----------------------
Toilet in the deepest wall-adjacent spot, a sink, and a mirror on the wall
next to the sink.
"""

from typing import Optional

from shapely.geometry import MultiPoint
from shapely.geometry import Point as ShapelyPoint

from common.io_utils import log
from tilemap.context import MapContext
from tilemap.grid_classes import Point, Zone, neighbors4
from tilemap.symbols import TileSymbol
from .placement_utils import place_random, stamp


def zone_centroid(zone: Zone) -> ShapelyPoint:
    return MultiPoint([(c.x, c.y) for c in zone]).centroid


def blocking_neighbor_count(ctx: MapContext, cell: Point) -> int:
    return sum(1 for n in neighbors4(cell) if ctx.tiles.is_blocking(n.x, n.y))


def pick_toilet_cell(ctx: MapContext, zone: Zone) -> Optional[Point]:
    """
    Free cell against a wall, furthest from the centroid; corners get a
    bonus of 2 per touching wall. Ties go to the first cell in zone order.
    """
    centroid = zone_centroid(zone)
    best, best_score = None, None
    for cell in ctx.free_cells(zone):
        walls = blocking_neighbor_count(ctx, cell)
        if walls == 0:
            continue
        score = centroid.distance(ShapelyPoint(cell.x, cell.y)) + 2 * walls
        if best_score is None or score > best_score:
            best, best_score = cell, score
    return best


def place_mirror(ctx: MapContext, sink: Point) -> Optional[Point]:
    """Above the sink if that is a wall, else the left, else the right wall."""
    for n in (Point(sink.x, sink.y - 1), Point(sink.x - 1, sink.y), Point(sink.x + 1, sink.y)):
        if ctx.tiles.get(n.x, n.y) == TileSymbol.WALL and ctx.tiles.in_bounds(n.x, n.y):
            ctx.tiles.set(n.x, n.y, TileSymbol.MIRROR)
            return n
    return None


def furnish_restroom(ctx: MapContext, zone: Zone) -> None:
    ctx.paint(zone, TileSymbol.FLOOR)

    toilet = pick_toilet_cell(ctx, zone)
    if toilet is None:
        log(f"🚽 {zone!r} has no free cell against a wall", "WARNING")
    else:
        stamp(ctx, TileSymbol.TOILET, toilet)

    sink = place_random(ctx, zone, TileSymbol.SINK)
    mirror = place_mirror(ctx, sink.anchor) if sink is not None else None
    log(f"🚽 {zone!r}: toilet={toilet} sink={sink} mirror={mirror}", "DEBUG")
