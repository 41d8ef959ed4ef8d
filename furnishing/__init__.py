"""
furnishing
----------
Per-zone furniture placers. `furnish_rooms` walks the zones in a fixed
order (circulation first, then kitchen, dining, living areas, restrooms)
so that earlier placers keep their cells clear of later ones.
"""

from typing import Callable, Dict, Optional

from common.io_utils import log
from tilemap.context import MapContext
from tilemap.grid_classes import Zone
from tilemap.symbols import ZoneSymbol
from .dining import furnish_dining
from .kitchen import furnish_kitchen
from .living import furnish_bedroom, furnish_lounge
from .restroom import furnish_restroom
from .walkways import furnish_walkway


Placer = Callable[[MapContext, Zone], object]

# None = the zone is handled by a structural stage (walls, stairs) or stays bare floor
PLACERS: Dict[ZoneSymbol, Optional[Placer]] = {
    ZoneSymbol.WALL: None,
    ZoneSymbol.FLOOR: None,
    ZoneSymbol.STAIRS: None,
    ZoneSymbol.WALKWAY: furnish_walkway,
    ZoneSymbol.ENTRANCE: furnish_walkway,
    ZoneSymbol.KITCHEN: furnish_kitchen,
    ZoneSymbol.DINING: furnish_dining,
    ZoneSymbol.BEDROOM: furnish_bedroom,
    ZoneSymbol.LOUNGE: furnish_lounge,
    ZoneSymbol.RESTROOM: furnish_restroom,
}

FURNISH_ORDER = (
    (ZoneSymbol.WALKWAY, ZoneSymbol.ENTRANCE),
    (ZoneSymbol.KITCHEN,),
    (ZoneSymbol.DINING,),
    (ZoneSymbol.BEDROOM, ZoneSymbol.LOUNGE),
    (ZoneSymbol.RESTROOM,),
)

_missing = set(ZoneSymbol) - set(PLACERS)
if _missing:
    raise RuntimeError(f"No placer registered for zone symbols: {sorted(s.value for s in _missing)}")


def furnish_rooms(ctx: MapContext) -> int:
    """Run every placer in order; returns the number of placements recorded."""
    before = len(ctx.placements)
    for group in FURNISH_ORDER:
        for zone in ctx.zones:
            if zone.symbol not in group:
                continue
            placer = PLACERS[zone.symbol]
            if placer is not None:
                placer(ctx, zone)

    added = len(ctx.placements) - before
    log(f"🪑 Furnished {len(ctx.zones)} zones with {added} items", "INFO")
    return added


__all__ = ["PLACERS", "FURNISH_ORDER", "furnish_rooms"]
