"""
tilemap/context.py
------------------
State owned by one populator run: the input zone grid, the mutable tile
grid, the reserved-cell set, the zone list, the RNG and the config.

Stages receive the context explicitly; nothing here is global, so two
floors can be populated side by side with separate contexts.
"""

import random
from typing import Dict, Iterable, List, Optional, Set

from common.config import PopulatorConfig
from .grid_classes import Placement, Point, TileGrid, Zone, ZoneGrid
from .symbols import CIRCULATION_ZONES, TileSymbol
from .zones import zone_lookup


# Tiles the diagonal fixer may turn into walls
_SEALABLE_TILES = frozenset({TileSymbol.FLOOR, TileSymbol.KITCHEN_FLOOR})


class MapContext:
    def __init__(
        self,
        zone_grid: ZoneGrid,
        tiles: TileGrid,
        zones: List[Zone],
        rng: random.Random,
        config: PopulatorConfig,
        is_ground_floor: bool = True,
    ):
        self.zone_grid = zone_grid
        self.tiles = tiles
        self.zones = zones
        self.rng = rng
        self.config = config
        self.is_ground_floor = is_ground_floor
        self.reserved: Set[Point] = set()
        self.placements: List[Placement] = []
        self.doors: Dict[int, Point] = {}
        self._zone_index = zone_lookup(zones)

    # ---------------------------------------------------------
    # Reservations
    # ---------------------------------------------------------
    def reserve(self, *cells: Point) -> None:
        for c in cells:
            if self.tiles.in_bounds(c.x, c.y):
                self.reserved.add(Point(c.x, c.y))

    def is_reserved(self, p: Point) -> bool:
        return p in self.reserved

    def is_protected(self, p: Point) -> bool:
        """Cells that must not be turned into walls after the structural stages."""
        if p in self.reserved:
            return True
        if self.zone_grid.symbol_at(p.x, p.y) in CIRCULATION_ZONES:
            return True
        return self.tiles.get(p.x, p.y) not in _SEALABLE_TILES

    # ---------------------------------------------------------
    # Zone helpers
    # ---------------------------------------------------------
    def zone_at(self, p: Point) -> Optional[Zone]:
        idx = self._zone_index.get(p)
        return self.zones[idx] if idx is not None else None

    def free_cells(self, zone: Zone) -> List[Point]:
        """Zone cells available for furniture: not blocking, not reserved."""
        return [
            c for c in zone
            if not self.tiles.is_blocking(c.x, c.y) and c not in self.reserved
        ]

    def paint(self, cells: Iterable[Point], tile: TileSymbol) -> None:
        """Set every passable cell of `cells` to `tile`, leaving walls alone."""
        for c in cells:
            if not self.tiles.is_blocking(c.x, c.y):
                self.tiles.set(c.x, c.y, tile)
