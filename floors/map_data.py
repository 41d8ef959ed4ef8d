"""
map_data.py
-----------
Map document schema and parsing of LLM map answers.

A map document carries the ground floor zone layout, optional upper floors
keyed by floor number, and the theme text the layout was authored for:

{
  "layout": ["####", "#KD#", ...],
  "floors": {"2": ["####", ...]},
  "theme": "...",
  "description": "..."
}
"""

import json
import re
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from tilemap.errors import MapParseError


class MapData(BaseModel):
    layout: List[str]
    floors: Optional[Dict[str, List[str]]] = None
    theme: str = "default"
    description: str = ""


# Pre-authored tile map used when generation fails
FALLBACK_MAP = MapData(
    theme="default",
    description="Fallback Map",
    layout=[
        "####################",
        "#,,,,S,O,B,,,,,,,,,#",
        "#,,,,,,,,P,,,,,,,,,#",
        "#CCCCCCCCCC........#",
        "#..........T..T....#",
        "#..........h..h....#",
        "#..................#",
        "#...T..T...........#",
        "#...h..h...........#",
        "#..................#",
        "#..................#",
        "#..................#",
        "#..................#",
        "#..................#",
        "##########E#########",
    ],
)


# ----------------------------
# LLM JSON cleanup
# ----------------------------
_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
_FENCED_ANY = re.compile(r"```\s*([\s\S]*?)\s*```")
_THINKING = re.compile(r"<thinking>[\s\S]*?</thinking>", re.IGNORECASE)
_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")


def extract_json_block(text: str) -> str:
    """Pull the JSON object out of an LLM answer (fenced block first, then braces)."""
    match = _FENCED_JSON.search(text) or _FENCED_ANY.search(text)
    if match:
        return match.group(1)

    t = _THINKING.sub("", text).strip()
    first, last = t.find("{"), t.rfind("}")
    if first != -1 and last != -1:
        return t[first:last + 1]
    return t


def clean_json_text(text: str) -> str:
    """Drop // and /* */ comments and trailing commas the model likes to add."""
    text = _LINE_COMMENT.sub("", text)
    text = _BLOCK_COMMENT.sub("", text)
    return _TRAILING_COMMA.sub(r"\1", text)


def parse_map_response(text: str) -> MapData:
    """Parse a raw LLM answer (or plain JSON) into a MapData document."""
    if not text or not text.strip():
        raise MapParseError("Empty map response.")

    block = extract_json_block(text)
    if len(block) < 10:
        raise MapParseError(f"No JSON object found in map response: {text[:80]!r}")

    try:
        data = json.loads(clean_json_text(block))
    except json.JSONDecodeError as e:
        raise MapParseError(f"Map response is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("layout"), list):
        raise MapParseError("Invalid map data: missing layout.")

    try:
        return MapData(**data)
    except ValidationError as e:
        raise MapParseError(f"Invalid map data: {e}") from e
