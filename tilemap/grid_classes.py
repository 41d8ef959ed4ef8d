"""
tilemap/grid_classes.py
-----------------------
Lightweight grid representations for the tilemap pipeline.

Classes:
  - Point     : integer (x, y) grid coordinate (x = column, y = row)
  - Zone      : maximal 4-connected region of one zone symbol
  - ZoneGrid  : validated, read-only input zone grid
  - TileGrid  : mutable output grid (numpy character array)
  - Placement : one stamped furniture item and its footprint
"""

from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .errors import MalformedZoneGridError
from .symbols import BLOCKING_TILES, TileSymbol, ZoneSymbol


class Point(NamedTuple):
    x: int
    y: int


# Fixed neighbour order: up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def neighbors4(p: Point) -> List[Point]:
    """4-neighbours of p in the fixed up/down/left/right order (unclipped)."""
    return [Point(p.x + dx, p.y + dy) for dx, dy in DIRECTIONS]


# -------------------------------------------------------------
# Zone
# -------------------------------------------------------------
class Zone:
    """
    A connected region of one room-purpose symbol.
    Attributes:
      symbol : ZoneSymbol of every member cell
      cells  : member cells in discovery order
    """

    def __init__(self, symbol: ZoneSymbol, cells: Sequence[Point]):
        self.symbol = symbol
        self.cells: Tuple[Point, ...] = tuple(cells)
        self._members = frozenset(self.cells)

    def contains(self, p: Point) -> bool:
        return p in self._members

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return (min_x, min_y, max_x, max_y)."""
        xs = [c.x for c in self.cells]
        ys = [c.y for c in self.cells]
        return min(xs), min(ys), max(xs), max(ys)

    def as_dict(self):
        return {"symbol": self.symbol.value, "cells": [list(c) for c in self.cells]}

    def __len__(self):
        return len(self.cells)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.cells)

    def __repr__(self):
        return f"<Zone {self.symbol.value} cells={len(self.cells)}>"


# -------------------------------------------------------------
# Input grid
# -------------------------------------------------------------
class ZoneGrid:
    """
    The immutable zone map authored upstream.
    Reads outside the grid behave like walls.
    """

    def __init__(self, rows: Sequence[str]):
        self.rows = validate_zone_rows(rows)
        self.height = len(self.rows)
        self.width = len(self.rows[0])
        self._symbols = [[ZoneSymbol(ch) for ch in row] for row in self.rows]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def symbol_at(self, x: int, y: int) -> ZoneSymbol:
        if self.in_bounds(x, y):
            return self._symbols[y][x]
        return ZoneSymbol.WALL

    def cells(self) -> Iterator[Point]:
        """All coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def __repr__(self):
        return f"<ZoneGrid {self.width}x{self.height}>"


def validate_zone_rows(rows: Sequence[str]) -> List[str]:
    """
    Fail fast on malformed zone grids: empty, ragged, or unknown symbols.
    Returns the rows as a plain list of strings.
    """
    if rows is None or isinstance(rows, str):
        raise MalformedZoneGridError("Zone grid must be a list of row strings.")
    rows = list(rows)
    if not rows:
        raise MalformedZoneGridError("Zone grid is empty.")
    for y, row in enumerate(rows):
        if not isinstance(row, str):
            raise MalformedZoneGridError(f"Row {y} is not a string: {row!r}")

    width = len(rows[0])
    if width == 0:
        raise MalformedZoneGridError("Zone grid rows are empty.")

    allowed = {s.value for s in ZoneSymbol}
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MalformedZoneGridError(
                f"Zone grid is not rectangular: row {y} has {len(row)} cells, expected {width}."
            )
        unknown = sorted(set(row) - allowed)
        if unknown:
            raise MalformedZoneGridError(f"Row {y} contains unknown zone symbols: {unknown}")
    return rows


# -------------------------------------------------------------
# Output grid
# -------------------------------------------------------------
class TileGrid:
    """
    Mutable tile map shared by all pipeline stages of one run.
    Reads outside the grid return WALL, writes outside the grid are ignored.
    """

    def __init__(self, data: np.ndarray):
        self.data = data
        self.height, self.width = data.shape

    @classmethod
    def from_zone_grid(cls, zone_grid: ZoneGrid) -> "TileGrid":
        """Walls stay walls, every other zone starts as plain floor."""
        data = np.full((zone_grid.height, zone_grid.width), TileSymbol.FLOOR.value, dtype="<U1")
        for y, row in enumerate(zone_grid.rows):
            for x, ch in enumerate(row):
                if ch == ZoneSymbol.WALL.value:
                    data[y, x] = TileSymbol.WALL.value
        return cls(data)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "TileGrid":
        data = np.array([list(row) for row in rows], dtype="<U1")
        return cls(data)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> TileSymbol:
        if self.in_bounds(x, y):
            return TileSymbol(str(self.data[y, x]))
        return TileSymbol.WALL

    def set(self, x: int, y: int, tile: TileSymbol) -> None:
        if self.in_bounds(x, y):
            self.data[y, x] = TileSymbol(tile).value

    def is_blocking(self, x: int, y: int) -> bool:
        return self.get(x, y) in BLOCKING_TILES

    def is_passable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self.is_blocking(x, y)

    def find_first(self, tile: TileSymbol) -> Optional[Point]:
        """First cell holding `tile` in row-major order."""
        hits = np.argwhere(self.data == TileSymbol(tile).value)
        if len(hits) == 0:
            return None
        row, col = hits[0]
        return Point(int(col), int(row))

    def cells_of(self, tile: TileSymbol) -> List[Point]:
        return [Point(int(c), int(r)) for r, c in np.argwhere(self.data == TileSymbol(tile).value)]

    def count(self, tile: TileSymbol) -> int:
        return int(np.count_nonzero(self.data == TileSymbol(tile).value))

    def blocking_mask(self) -> np.ndarray:
        return np.isin(self.data, [t.value for t in BLOCKING_TILES])

    def to_rows(self) -> List[str]:
        return ["".join(row) for row in self.data.tolist()]

    def __repr__(self):
        return f"<TileGrid {self.width}x{self.height}>"


# -------------------------------------------------------------
# Furniture placement record
# -------------------------------------------------------------
class Placement:
    """
    A placed item: its tile symbol, anchor (where the symbol is written)
    and every cell the item occupies.
    """

    def __init__(self, kind: TileSymbol, anchor: Point, footprint: Iterable[Point]):
        self.kind = kind
        self.anchor = anchor
        self.footprint: Tuple[Point, ...] = tuple(footprint)

    def as_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind.value,
            "anchor": list(self.anchor),
            "footprint": [list(p) for p in self.footprint],
        }

    def __repr__(self):
        return f"<Placement {self.kind.name} at {tuple(self.anchor)} size={len(self.footprint)}>"
