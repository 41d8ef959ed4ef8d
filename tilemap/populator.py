"""
tilemap/populator.py
--------------------
High-level populator that orchestrates one floor of the tilemap stage.

Responsibilities:
  • Validate the zone grid and label its zones
  • Build walls and doors, repair connectivity
  • Furnish every room, decorate walls, place stairs and exits
  • Settle diagonal gaps against connectivity, then validate the result
"""

import random
from typing import Any, Dict, List, Optional, Sequence

from common.config import DEFAULT_CONFIG, PopulatorConfig
from common.io_utils import log
import furnishing
from .connectivity import ensure_zone_connectivity, repair_global_connectivity
from .constraints import ValidationReport, validate_tile_grid
from .context import MapContext
from .errors import ConnectivityRepairError, MisplacedEntranceError
from .grid_classes import Placement, Point, TileGrid, Zone, ZoneGrid
from .stairs import ensure_exits, process_stairs
from .walls import decorate_walls, fix_diagonal_walls, synthesize_walls
from .zones import identify_zones


# -------------------------------------------------------------
# Result
# -------------------------------------------------------------
class PopulationResult:
    def __init__(
        self,
        tiles: TileGrid,
        zones: List[Zone],
        placements: List[Placement],
        reserved: set,
        doors: Dict[int, Point],
        report: ValidationReport,
    ):
        self.tiles = tiles
        self.zones = zones
        self.placements = placements
        self.reserved = reserved
        self.doors = doors
        self.report = report

    @property
    def rows(self) -> List[str]:
        return self.tiles.to_rows()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "placements": [p.as_dict() for p in self.placements],
            "doors": {str(i): list(p) for i, p in self.doors.items()},
            "report": self.report.model_dump(),
        }


# -------------------------------------------------------------
# Populator
# -------------------------------------------------------------
class ZonePopulator:
    """
    Owns the tile grid, reserved set and RNG of a single run.
    Instances share nothing, so several floors can be populated side by side.
    """

    def __init__(
        self,
        zone_rows: Sequence[str],
        is_ground_floor: bool = True,
        rng: Optional[random.Random] = None,
        config: Optional[PopulatorConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.zone_grid = ZoneGrid(zone_rows)
        self.is_ground_floor = is_ground_floor
        self.rng = rng or random.Random(self.config.seed)
        self.zones = identify_zones(self.zone_grid)
        self.ctx = MapContext(
            self.zone_grid,
            TileGrid.from_zone_grid(self.zone_grid),
            self.zones,
            self.rng,
            self.config,
            is_ground_floor=is_ground_floor,
        )

    def _settle(self) -> int:
        """
        Alternate diagonal fixing and global repair until neither changes
        the grid. Repairs reserve what they carve, so each pass protects
        more cells and the loop winds down.
        """
        for n in range(1, self.config.max_settle_passes + 1):
            sealed = fix_diagonal_walls(self.ctx)
            carved = repair_global_connectivity(self.ctx)
            if not sealed and not carved:
                return n
        log(f"⚠️ Grid did not settle after {self.config.max_settle_passes} passes", "WARNING")
        return self.config.max_settle_passes

    def generate(self) -> PopulationResult:
        ctx = self.ctx
        log(f"🏗 Populating {self.zone_grid!r} with {len(self.zones)} zones "
            f"({'ground' if self.is_ground_floor else 'upper'} floor)")

        synthesize_walls(ctx)
        ensure_zone_connectivity(ctx)
        repair_global_connectivity(ctx)
        self._settle()

        furnishing.furnish_rooms(ctx)
        decorate_walls(ctx)
        process_stairs(ctx)
        if self.is_ground_floor:
            ensure_exits(ctx)
        self._settle()

        report = validate_tile_grid(ctx.tiles, self.zone_grid, self.zones)
        if not report.is_connected:
            raise ConnectivityRepairError(
                f"{len(report.unreachable)} passable cells are unreachable from {report.entry_point}",
                unreachable=[Point(*p) for p in report.unreachable],
            )
        if report.misplaced_entrances:
            raise MisplacedEntranceError(
                f"Entrances off the bottom row: {report.misplaced_entrances}",
                entrances=[Point(*p) for p in report.misplaced_entrances],
            )
        if report.diagonal_seals:
            log(f"⚠️ {len(report.diagonal_seals)} diagonal wall gaps remain", "WARNING")
        if not report.doors_ok:
            log(f"⚠️ Private rooms without exactly one door: {report.door_counts}", "WARNING")

        log(f"✅ Floor populated: {len(ctx.placements)} items, {len(ctx.reserved)} reserved cells")
        return PopulationResult(ctx.tiles, self.zones, ctx.placements, ctx.reserved, ctx.doors, report)


# -------------------------------------------------------------
# Convenience function (for the map pipeline)
# -------------------------------------------------------------
def populate_zone_grid(
    zone_rows: Sequence[str],
    is_ground_floor: bool = True,
    seed: Optional[int] = None,
    config: Optional[PopulatorConfig] = None,
) -> PopulationResult:
    """Zone grid in, furnished tile grid (plus diagnostics) out."""
    config = config or DEFAULT_CONFIG
    if seed is None:
        seed = config.seed
    return ZonePopulator(zone_rows, is_ground_floor, random.Random(seed), config).generate()
