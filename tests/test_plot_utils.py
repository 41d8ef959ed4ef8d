import pytest

from common.colors import from_hex, tile_color, to_hex
from common.plot_utils import tile_grid_to_image, visualize_tile_grid, zone_grid_to_image


def test_hex_round_trip():
    assert from_hex("#e53935") == [229, 57, 53]
    assert to_hex([229, 57, 53]) == "#e53935"


def test_unknown_tile_is_magenta():
    assert tile_color("?") == [255, 0, 255]
    assert tile_color("?", "0-1") == pytest.approx([1.0, 0.0, 1.0])


def test_tile_image_shape():
    img = tile_grid_to_image(["###", "#E#"])
    assert img.shape == (2, 3, 3)
    assert img[1, 1].tolist() == pytest.approx(tile_color("E", "0-1"))


def test_zone_image_legend():
    img, legend = zone_grid_to_image(["#K#", "#W#"])
    assert set(legend) == {"#", "K", "W"}
    assert img[0, 1].tolist() == pytest.approx(legend["K"])


def test_visualize_writes_png(tmp_path):
    out = visualize_tile_grid(["####", "#Th#", "##E#"], str(tmp_path / "sub" / "p.png"), zone_rows=["####", "#DD#", "##E#"])
    assert out.endswith("p.png")
    assert (tmp_path / "sub" / "p.png").stat().st_size > 0
