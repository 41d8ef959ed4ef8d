"""
tilemap/zones.py
----------------
Zone labeling: splits the zone grid into connected same-symbol regions.

Every later stage reads the zone list, nothing mutates it.
"""

from collections import deque
from typing import Dict, List

from .grid_classes import Point, Zone, ZoneGrid, neighbors4
from .symbols import ZoneSymbol


def identify_zones(zone_grid: ZoneGrid) -> List[Zone]:
    """
    Flood-fill the zone grid into 4-connected regions of identical symbol.
    Walls are skipped and never merged. Seeds are taken in row-major order,
    so the result is reproducible for a given grid.
    """
    visited = set()
    zones: List[Zone] = []

    for seed in zone_grid.cells():
        if seed in visited:
            continue
        symbol = zone_grid.symbol_at(seed.x, seed.y)
        if symbol == ZoneSymbol.WALL:
            continue

        cells: List[Point] = []
        queue = deque([seed])
        visited.add(seed)
        while queue:
            cur = queue.popleft()
            cells.append(cur)
            for n in neighbors4(cur):
                if n in visited or not zone_grid.in_bounds(n.x, n.y):
                    continue
                if zone_grid.symbol_at(n.x, n.y) == symbol:
                    visited.add(n)
                    queue.append(n)

        zones.append(Zone(symbol, cells))
    return zones


def zone_lookup(zones: List[Zone]) -> Dict[Point, int]:
    """Index every labelled cell to the position of its zone in `zones`."""
    index: Dict[Point, int] = {}
    for i, zone in enumerate(zones):
        for cell in zone:
            index[cell] = i
    return index


def zones_of(zones: List[Zone], *symbols: ZoneSymbol) -> List[Zone]:
    wanted = set(symbols)
    return [z for z in zones if z.symbol in wanted]
