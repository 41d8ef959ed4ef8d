"""
floor_generator.py
------------------
Populates every floor of a map document.

Steps:
1. Ground floor layout, populated with an exit guarantee.
2. Each upper floor, populated independently without one.
3. On any structural failure, the pre-authored fallback map.

Output: a MapData whose layout / floors hold tile rows instead of zones.
"""

import random
from typing import Dict, List, Optional

from common.config import DEFAULT_CONFIG, PopulatorConfig
from common.io_utils import format_grid, log
from tilemap.errors import ZoneMapError
from tilemap.populator import populate_zone_grid
from .map_data import FALLBACK_MAP, MapData


def derive_floor_seeds(seed: Optional[int], floor_keys: List[str]) -> Dict[str, Optional[int]]:
    """One seed per floor, all drawn from the map seed so reruns match."""
    if seed is None:
        return {key: None for key in floor_keys}
    master = random.Random(seed)
    return {key: master.randrange(2 ** 32) for key in floor_keys}


def populate_map(
    map_data: MapData,
    seed: Optional[int] = None,
    config: Optional[PopulatorConfig] = None,
    fallback: bool = True,
) -> MapData:
    """Replace every zone layout in `map_data` by its furnished tile grid."""
    config = config or DEFAULT_CONFIG
    if seed is None:
        seed = config.seed
    upper_keys = list(map_data.floors or {})
    seeds = derive_floor_seeds(seed, ["ground", *upper_keys])

    try:
        log(f"🏠 Populating ground floor ({map_data.theme})")
        ground = populate_zone_grid(map_data.layout, True, seeds["ground"], config)

        floors = None
        if map_data.floors is not None:
            floors = {}
            for key in upper_keys:
                log(f"🏠 Populating floor {key}")
                floors[key] = populate_zone_grid(map_data.floors[key], False, seeds[key], config).rows

    except ZoneMapError as e:
        log(f"❌ Failed to populate map: {e}", "ERROR")
        if not fallback:
            raise
        log("Using fallback map due to error.", "WARNING")
        return FALLBACK_MAP.model_copy(deep=True)

    log("Ground floor:\n" + format_grid(ground.rows), "DEBUG")
    log("✅ Map populated successfully.")
    return MapData(
        layout=ground.rows,
        floors=floors,
        theme=map_data.theme,
        description=map_data.description,
    )
