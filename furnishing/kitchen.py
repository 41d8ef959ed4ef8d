"""
furnishing/kitchen.py
---------------------
Kitchen layout:
  • bar counter along the side facing customers, with one service gap
  • appliances against the back walls first, then in the aisle
  • cabinets on most remaining back cells
  • one player spawn on kitchen floor
"""

from typing import List, Optional, Tuple

from common.io_utils import log
from tilemap.context import MapContext
from tilemap.grid_classes import Point, Zone, neighbors4
from tilemap.symbols import TileSymbol, ZoneSymbol
from .placement_utils import stamp


# Neighbouring zones a bar counter faces
FRONT_ZONES = frozenset({ZoneSymbol.DINING, ZoneSymbol.WALKWAY, ZoneSymbol.LOUNGE})


def classify_cells(ctx: MapContext, zone: Zone) -> Tuple[List[Point], List[Point], List[Point]]:
    """Split free kitchen cells into (front, back, other)."""
    front, back, other = [], [], []
    for cell in ctx.free_cells(zone):
        is_front = is_back = False
        for n in neighbors4(cell):
            if not ctx.zone_grid.in_bounds(n.x, n.y):
                is_back = True
                continue
            sym = ctx.zone_grid.symbol_at(n.x, n.y)
            if sym in FRONT_ZONES:
                is_front = True
            elif sym != ZoneSymbol.KITCHEN:
                is_back = True

        if is_front:
            front.append(cell)
        elif is_back:
            back.append(cell)
        else:
            other.append(cell)
    return front, back, other


def place_counter(ctx: MapContext, front: List[Point]) -> Optional[Point]:
    """Counter on every front cell except the middle one, which stays open."""
    if not front:
        return None
    ordered = sorted(front)
    service = ordered[len(ordered) // 2]
    for p in ordered:
        if p != service:
            stamp(ctx, TileSymbol.COUNTER, p)
    return service


def place_spawn(ctx: MapContext, zone: Zone, service: Optional[Point]) -> Optional[Point]:
    floor = [
        c for c in zone
        if ctx.tiles.get(c.x, c.y) == TileSymbol.KITCHEN_FLOOR and not ctx.is_reserved(c)
    ]
    if not floor:
        floor = [c for c in zone if ctx.tiles.get(c.x, c.y) == TileSymbol.KITCHEN_FLOOR]
    if not floor:
        log(f"🍳 {zone!r} has no kitchen floor left for the player spawn", "WARNING")
        return None

    spawn = next((c for c in floor if c != service), floor[0])
    stamp(ctx, TileSymbol.PLAYER_SPAWN, spawn)
    return spawn


def furnish_kitchen(ctx: MapContext, zone: Zone) -> None:
    ctx.paint(zone, TileSymbol.KITCHEN_FLOOR)
    front, back, other = classify_cells(ctx, zone)
    service = place_counter(ctx, front)

    back_pool = list(back)
    other_pool = list(other)
    ctx.rng.shuffle(back_pool)
    ctx.rng.shuffle(other_pool)

    for item in ctx.config.kitchen_appliances:
        pool = back_pool or other_pool
        if not pool:
            log(f"🍳 No room left in {zone!r} for appliance {item}", "DEBUG")
            break
        stamp(ctx, TileSymbol(item), pool.pop())

    for p in back_pool:
        if ctx.rng.random() < ctx.config.cabinet_probability:
            stamp(ctx, TileSymbol.COUNTER, p)

    spawn = place_spawn(ctx, zone, service)
    log(f"🍳 {zone!r}: front={len(front)} back={len(back)} service={service} spawn={spawn}", "DEBUG")
