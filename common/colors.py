"""
common/colors.py
----------------
Color utilities for the tilemap pipeline.

Includes:
- Range conversions (0–1 ↔ 0–255)
- Tile symbol → RGB palette for previews
- Category colors for zone overlays (tab10 / tab20)
- HEX conversions

Used by visualization (plot_utils).
"""

import matplotlib.pyplot as plt
from typing import Dict, List, Tuple, Union

# -------------------------------------------------------
# Range conversions
# -------------------------------------------------------

def convert_color_range(
    color: Union[List[float], Tuple[float, ...]],
    from_range: str = "0-1",
    to_range: str = "0-255"
) -> List[float]:
    """Convert color values between normalized (0–1) and integer (0–255) ranges."""
    if from_range == "0-1" and to_range == "0-255":
        return [int(c * 255) for c in color]
    elif from_range == "0-255" and to_range == "0-1":
        return [c / 255 for c in color]
    elif from_range == to_range:
        return list(color)
    else:
        raise ValueError(f"Unsupported conversion {from_range} → {to_range}")


def to_hex(color: Union[List[int], List[float]], from_range: str = "0-255") -> str:
    """Convert RGB color to HEX string."""
    if from_range == "0-1":
        color = convert_color_range(color, "0-1", "0-255")
    return "#{:02x}{:02x}{:02x}".format(int(color[0]), int(color[1]), int(color[2]))


def from_hex(hex_str: str) -> List[int]:
    """Convert HEX string to RGB (0–255)."""
    hex_str = hex_str.strip("#")
    return [int(hex_str[i:i + 2], 16) for i in (0, 2, 4)]


# -------------------------------------------------------
# Tile palette
# -------------------------------------------------------

TILE_PALETTE_HEX: Dict[str, str] = {
    "#": "#3b3b3b",  # wall
    ".": "#e8dcc4",  # floor
    ",": "#cfd8dc",  # kitchen floor
    "C": "#8d6e63",  # counter
    "O": "#d84315",  # oven
    "B": "#90a4ae",  # bowl stack
    "S": "#a1887f",  # storage
    "P": "#43a047",  # player spawn
    "T": "#6d4c41",  # table
    "h": "#bcaaa4",  # chair
    "b": "#7986cb",  # bed
    "s": "#ba68c8",  # sofa
    "l": "#fdd835",  # lamp
    "k": "#5d4037",  # bookshelf
    "t": "#eceff1",  # toilet
    "w": "#4fc3f7",  # sink
    "M": "#b3e5fc",  # mirror
    "H": "#ffb74d",  # stairs
    "W": "#81d4fa",  # window
    "E": "#e53935",  # entrance
}

UNKNOWN_TILE_HEX = "#ff00ff"


def tile_color(symbol: str, color_range: str = "0-255") -> List[float]:
    """RGB color for one tile character; unknown characters are magenta."""
    rgb = from_hex(TILE_PALETTE_HEX.get(symbol, UNKNOWN_TILE_HEX))
    return convert_color_range(rgb, "0-255", color_range)


# -------------------------------------------------------
# Palette sampling
# -------------------------------------------------------

def get_categorical_colors(
    num_categories: int,
    colormap_name: str = "tab10",
    color_range: str = "0-255"
) -> List[List[float]]:
    """Return N visually distinct RGB colors from a matplotlib colormap."""
    if colormap_name == "tab10":
        cmap = plt.cm.tab10
    elif colormap_name == "tab20":
        cmap = plt.cm.tab20
    else:
        raise ValueError(f"Unsupported colormap: {colormap_name}")

    norm = plt.Normalize(0, max(num_categories - 1, 1))
    colors = [list(cmap(norm(i)))[:3] for i in range(num_categories)]
    return [convert_color_range(c, "0-1", color_range) for c in colors]
