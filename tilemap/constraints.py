"""
tilemap/constraints.py
----------------------
Invariant checks for a finished tile grid.

Used for:
  • Final validation inside the populator
  • Tests and debugging of generated floors

Checks:
  - every passable cell reachable from the entry point
  - no 2x2 window with walls on exactly one diagonal
  - exactly one door per enclosed private room
  - entrances only on the bottom row
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .connectivity import find_entry_point, find_orphan_components, find_reachable
from .grid_classes import Point, TileGrid, Zone, ZoneGrid
from .symbols import PRIVATE_ZONES, TileSymbol
from .walls import boundary_cells


class ValidationReport(BaseModel):
    entry_point: Optional[Tuple[int, int]] = None
    unreachable: List[Tuple[int, int]] = Field(default_factory=list)
    diagonal_seals: List[Tuple[int, int]] = Field(default_factory=list)
    door_counts: Dict[str, int] = Field(default_factory=dict)
    misplaced_entrances: List[Tuple[int, int]] = Field(default_factory=list)

    @property
    def is_connected(self) -> bool:
        return not self.unreachable

    @property
    def doors_ok(self) -> bool:
        return all(n == 1 for n in self.door_counts.values())

    @property
    def ok(self) -> bool:
        return (
            self.is_connected
            and not self.diagonal_seals
            and self.doors_ok
            and not self.misplaced_entrances
        )


# -------------------------------------------------------------
# Individual checks
# -------------------------------------------------------------
def check_connectivity(tiles: TileGrid, zone_grid: ZoneGrid) -> Tuple[Optional[Point], List[Point]]:
    """Return (entry point, unreachable passable cells)."""
    start = find_entry_point(tiles, zone_grid)
    if start is None:
        return None, []
    reachable = find_reachable(tiles, start)
    unreachable = [p for group in find_orphan_components(tiles, reachable) for p in group]
    return start, unreachable


def find_diagonal_seals(tiles: TileGrid) -> List[Point]:
    """Top-left corners of every 2x2 window with walls on exactly one diagonal."""
    blocking = tiles.blocking_mask()
    seals = []
    for y in range(tiles.height - 1):
        for x in range(tiles.width - 1):
            tl, tr = blocking[y, x], blocking[y, x + 1]
            bl, br = blocking[y + 1, x], blocking[y + 1, x + 1]
            if (tl and br and not tr and not bl) or (tr and bl and not tl and not br):
                seals.append(Point(x, y))
    return seals


def check_private_doors(zone_grid: ZoneGrid, zones: List[Zone], tiles: TileGrid) -> Dict[int, List[Point]]:
    """
    For every private zone with a shared boundary, the boundary cells that are
    still passable. A correctly enclosed room has exactly one.
    """
    doors: Dict[int, List[Point]] = {}
    for idx, zone in enumerate(zones):
        if zone.symbol not in PRIVATE_ZONES:
            continue
        boundary = boundary_cells(zone_grid, zone)
        if not boundary:
            continue
        doors[idx] = [c for c in boundary if tiles.is_passable(c.x, c.y)]
    return doors


def check_entrance_row(tiles: TileGrid) -> List[Point]:
    """Entrance tiles that are not on the bottom row."""
    return [p for p in tiles.cells_of(TileSymbol.ENTRANCE) if p.y != tiles.height - 1]


# -------------------------------------------------------------
# Combined report
# -------------------------------------------------------------
def validate_tile_grid(tiles: TileGrid, zone_grid: ZoneGrid, zones: List[Zone]) -> ValidationReport:
    start, unreachable = check_connectivity(tiles, zone_grid)
    doors = check_private_doors(zone_grid, zones, tiles)
    return ValidationReport(
        entry_point=tuple(start) if start is not None else None,
        unreachable=[tuple(p) for p in unreachable],
        diagonal_seals=[tuple(p) for p in find_diagonal_seals(tiles)],
        door_counts={f"{zones[i].symbol.value}{i}": len(cells) for i, cells in doors.items()},
        misplaced_entrances=[tuple(p) for p in check_entrance_row(tiles)],
    )
