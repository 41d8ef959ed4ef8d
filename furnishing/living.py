"""
furnishing/living.py
--------------------
Bedrooms and lounges.

  Bedroom : one 2x3 bed, one 1x2 lamp
  Lounge  : sofas (1x2 horizontal) and bookshelves (1x2 vertical), density
            scaled by the free floor area
"""

import math

from common.io_utils import log
from tilemap.context import MapContext
from tilemap.grid_classes import Zone
from tilemap.symbols import TileSymbol
from .placement_utils import BED_FOOTPRINT, SOFA_FOOTPRINT, VERTICAL_PAIR, place_random


def _place_up_to(ctx: MapContext, zone: Zone, kind: TileSymbol, offsets, target: int) -> int:
    placed = 0
    for _ in range(target):
        if place_random(ctx, zone, kind, offsets) is None:
            break
        placed += 1
    return placed


def furnish_bedroom(ctx: MapContext, zone: Zone) -> None:
    ctx.paint(zone, TileSymbol.FLOOR)
    beds = _place_up_to(ctx, zone, TileSymbol.BED, BED_FOOTPRINT, ctx.config.bed_count)
    if beds < ctx.config.bed_count:
        log(f"🛏️ {zone!r} is too small for a 2x3 bed", "WARNING")
    lamps = _place_up_to(ctx, zone, TileSymbol.LAMP, VERTICAL_PAIR, ctx.config.lamp_count)
    log(f"🛏️ {zone!r}: {beds} beds, {lamps} lamps", "DEBUG")


def furnish_lounge(ctx: MapContext, zone: Zone) -> None:
    ctx.paint(zone, TileSymbol.FLOOR)
    cfg = ctx.config
    initial_free = len(ctx.free_cells(zone))
    sofa_target = min(cfg.max_sofas, math.ceil(cfg.sofa_ratio * initial_free))
    shelf_target = min(cfg.max_bookshelves, math.ceil(cfg.bookshelf_ratio * initial_free))

    sofas = _place_up_to(ctx, zone, TileSymbol.SOFA, SOFA_FOOTPRINT, sofa_target)
    shelves = _place_up_to(ctx, zone, TileSymbol.BOOKSHELF, VERTICAL_PAIR, shelf_target)
    log(f"🛋️ {zone!r}: {sofas}/{sofa_target} sofas, {shelves}/{shelf_target} bookshelves", "DEBUG")
