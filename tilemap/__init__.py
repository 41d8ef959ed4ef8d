"""
Tilemap package for the izakaya map pipeline
Turns zone grids into furnished, navigable tile grids
"""
from .errors import (
    ZoneMapError,
    MalformedZoneGridError,
    ConnectivityRepairError,
    MisplacedEntranceError,
    MapParseError,
)
from .symbols import ZoneSymbol, TileSymbol, BLOCKING_TILES, PRIVATE_ZONES
from .grid_classes import Point, Zone, ZoneGrid, TileGrid, Placement
from .zones import identify_zones
from .constraints import (
    ValidationReport,
    check_connectivity,
    find_diagonal_seals,
    check_private_doors,
    check_entrance_row,
    validate_tile_grid,
)
from .populator import ZonePopulator, PopulationResult, populate_zone_grid

__all__ = [
    "ZoneMapError",
    "MalformedZoneGridError",
    "ConnectivityRepairError",
    "MisplacedEntranceError",
    "MapParseError",
    "ZoneSymbol",
    "TileSymbol",
    "BLOCKING_TILES",
    "PRIVATE_ZONES",
    "Point",
    "Zone",
    "ZoneGrid",
    "TileGrid",
    "Placement",
    "identify_zones",
    "ValidationReport",
    "check_connectivity",
    "find_diagonal_seals",
    "check_private_doors",
    "check_entrance_row",
    "validate_tile_grid",
    "ZonePopulator",
    "PopulationResult",
    "populate_zone_grid",
]
