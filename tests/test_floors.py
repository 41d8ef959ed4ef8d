import pytest

from floors import FALLBACK_MAP, MapData, derive_floor_seeds, extract_json_block, parse_map_response, populate_map
from floors.map_data import clean_json_text
from tilemap.errors import MalformedZoneGridError, MapParseError, ZoneMapError

from .grids import RESTAURANT, UPPER_FLOOR


# -------------------------------------------------------------
# Parsing LLM answers
# -------------------------------------------------------------
def test_parse_fenced_json_with_trailing_comma():
    text = 'Here is the map:\n```json\n{"layout": ["###", "#E#"], "theme": "ramen",}\n```\nEnjoy!'
    data = parse_map_response(text)
    assert data.layout == ["###", "#E#"]
    assert data.theme == "ramen"
    assert data.floors is None


def test_parse_skips_thinking_block():
    text = '<thinking>maybe {"layout": []} works</thinking>\n{"layout": ["#E#"], "description": "tiny"}'
    data = parse_map_response(text)
    assert data.layout == ["#E#"]
    assert data.description == "tiny"


def test_parse_strips_comments():
    text = '{\n  "layout": ["####"], // ground\n  /* upper */ "floors": {"2": ["####"]}\n}'
    data = parse_map_response(text)
    assert data.floors == {"2": ["####"]}


def test_extract_and_clean_helpers():
    assert extract_json_block('noise {"a": 1} more noise') == '{"a": 1}'
    assert clean_json_text('{"a": [1, 2,], }') == '{"a": [1, 2]}'


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "no map",
        "{this is not json at all}",
        '{"theme": "no layout here"}',
        '{"layout": "####"}',
        '{"layout": [1, 2, 3]}',
    ],
)
def test_parse_failures(text):
    with pytest.raises(MapParseError):
        parse_map_response(text)


def test_parse_error_is_catchable_as_zone_map_error():
    with pytest.raises(ZoneMapError):
        parse_map_response("")


# -------------------------------------------------------------
# Seeds
# -------------------------------------------------------------
def test_floor_seeds_without_master_seed():
    assert derive_floor_seeds(None, ["ground", "2"]) == {"ground": None, "2": None}


def test_floor_seeds_are_reproducible():
    a = derive_floor_seeds(5, ["ground", "2", "3"])
    b = derive_floor_seeds(5, ["ground", "2", "3"])
    assert a == b
    assert all(0 <= s < 2 ** 32 for s in a.values())
    assert a["ground"] != a["2"]


# -------------------------------------------------------------
# Multi-floor population
# -------------------------------------------------------------
def test_populate_map_ground_and_upper_floor():
    doc = MapData(layout=list(RESTAURANT), floors={"2": list(UPPER_FLOOR)}, theme="ramen bar")
    out = populate_map(doc, seed=8)

    assert out.theme == "ramen bar"
    assert len(out.layout) == len(RESTAURANT)
    assert "E" in out.layout[-1]
    assert set(out.floors) == {"2"}
    assert len(out.floors["2"]) == len(UPPER_FLOOR)
    assert not any("E" in row for row in out.floors["2"])
    assert "H" in "".join(out.floors["2"])
    # zone input untouched
    assert doc.layout == RESTAURANT


def test_populate_map_is_deterministic():
    doc = MapData(layout=list(RESTAURANT), floors={"2": list(UPPER_FLOOR)})
    assert populate_map(doc, seed=21) == populate_map(doc, seed=21)


def test_populate_map_uses_fallback_on_bad_layout():
    out = populate_map(MapData(layout=["#X#"]))
    assert out == FALLBACK_MAP
    assert out is not FALLBACK_MAP
    assert out.description == "Fallback Map"


def test_populate_map_bad_upper_floor_also_falls_back():
    out = populate_map(MapData(layout=list(RESTAURANT), floors={"2": ["###", "##"]}), seed=1)
    assert out.description == "Fallback Map"


def test_populate_map_without_fallback_raises():
    with pytest.raises(MalformedZoneGridError):
        populate_map(MapData(layout=["#X#"]), fallback=False)


def test_fallback_map_is_well_formed():
    widths = {len(row) for row in FALLBACK_MAP.layout}
    assert widths == {20}
    assert len(FALLBACK_MAP.layout) == 15
    assert FALLBACK_MAP.layout[-1].count("E") == 1
