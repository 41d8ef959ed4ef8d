"""
Floor population module for the izakaya map pipeline.

This package handles:
  • Parsing LLM map answers into `MapData` documents
  • Populating the ground floor and every upper floor
  • Falling back to a pre-authored map when a layout cannot be used

Usage:
    from floors import parse_map_response, populate_map

    map_data = parse_map_response(llm_answer)
    tiles = populate_map(map_data, seed=7)
"""

from .map_data import MapData, FALLBACK_MAP, extract_json_block, parse_map_response
from .floor_generator import derive_floor_seeds, populate_map

__all__ = [
    "MapData",
    "FALLBACK_MAP",
    "extract_json_block",
    "parse_map_response",
    "derive_floor_seeds",
    "populate_map",
]
