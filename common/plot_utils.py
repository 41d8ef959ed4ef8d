"""
common/plot_utils.py
--------------------
Visualization helpers for the tilemap pipeline:
- Render a tile grid as an RGB image
- Save a labelled preview of a furnished floor
- Overlay zone outlines from the source zone grid
Uses numpy for the pixel grid and Matplotlib for plotting.
"""

import os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Sequence, Tuple

from .colors import get_categorical_colors, tile_color
from .io_utils import log


# -------------------------------------------------------
# Pixel grids
# -------------------------------------------------------

def tile_grid_to_image(rows: Sequence[str]) -> np.ndarray:
    """(H, W, 3) float image in 0–1, one pixel per tile."""
    height, width = len(rows), len(rows[0]) if rows else 0
    img = np.zeros((height, width, 3), dtype=float)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            img[y, x] = tile_color(ch, "0-1")
    return img


def zone_grid_to_image(rows: Sequence[str]) -> Tuple[np.ndarray, Dict[str, List[float]]]:
    """Categorical image of a zone grid plus the legend it was drawn with."""
    symbols = sorted({ch for row in rows for ch in row})
    colors = get_categorical_colors(len(symbols), "tab10" if len(symbols) <= 10 else "tab20", "0-1")
    legend = dict(zip(symbols, colors))
    img = np.array([[legend[ch] for ch in row] for row in rows], dtype=float)
    return img, legend


# -------------------------------------------------------
# Geometry visualizations (Matplotlib)
# -------------------------------------------------------

def visualize_tile_grid(
    rows: Sequence[str],
    output_path: str,
    title: Optional[str] = None,
    show_glyphs: bool = True,
    zone_rows: Optional[Sequence[str]] = None,
    dpi: int = 150,
) -> str:
    """
    Plot a furnished floor. Each tile is a colored square; furniture glyphs
    are printed on top when `show_glyphs` is set. With `zone_rows`, the
    source zone grid is drawn beside the result.
    """
    img = tile_grid_to_image(rows)
    height, width = img.shape[:2]
    panels = 2 if zone_rows is not None else 1
    fig, axes = plt.subplots(1, panels, figsize=(max(4, width * 0.4) * panels, max(3, height * 0.4)), dpi=dpi)
    axes = np.atleast_1d(axes)

    ax = axes[0]
    ax.imshow(img, interpolation="nearest")
    if show_glyphs:
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch not in ("#", ".", ","):
                    ax.text(x, y, ch, ha="center", va="center", fontsize=7, color="black")
    ax.set_title(title or "Tile map")
    ax.set_xticks([])
    ax.set_yticks([])

    if zone_rows is not None:
        zone_img, legend = zone_grid_to_image(zone_rows)
        axes[1].imshow(zone_img, interpolation="nearest")
        for sym, color in legend.items():
            axes[1].plot([], [], "s", color=color, label=sym)
        axes[1].legend(loc="upper right", fontsize=6)
        axes[1].set_title("Zones")
        axes[1].set_xticks([])
        axes[1].set_yticks([])

    plt.tight_layout()
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    plt.savefig(output_path, bbox_inches="tight")
    plt.close(fig)

    log(f"🖼 Tile map preview saved → {output_path}", "OK")
    return output_path
