"""
Text measurement and color helpers

Font widths come from matplotlib glyph outlines, so measurements match the
fonts matplotlib resolves for the requested family.
"""

from __future__ import annotations
from functools import lru_cache
import logging

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import to_hex, to_rgb
from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4096)
def measure_text_width(text: str, font_size: float = 12.0, font_family: str = 'sans-serif') -> float:
    """
    Measure the rendered width of text

    Args:
        text: Text to measure
        font_size: Font size (px)
        font_family: Font family name or generic family

    Returns:
        Width of the glyph outlines (px); 0 for blank text
    """
    if not text or not text.strip():
        return 0.0
    prop = FontProperties(family=font_family, size=font_size)
    # '$' pairs would otherwise be parsed as mathtext
    path = TextPath((0, 0), text.replace('$', r'\$'), prop=prop)
    return float(path.get_extents().width)


def blend_colors(fg: str, bg: str = '#FFFFFF') -> str:
    """
    Blend two colors half and half

    Args:
        fg: Foreground color (any matplotlib color spec)
        bg: Background color

    Returns:
        Lowercase hex color
    """
    mixed = (np.asarray(to_rgb(fg)) + np.asarray(to_rgb(bg))) / 2.0
    return to_hex(np.clip(mixed, 0.0, 1.0))


def palette_color(index: int, name: str = 'tab10') -> str:
    """Deterministic categorical color for features read without one"""
    cmap = colormaps[name]
    n_colors = getattr(cmap, 'N', 10)
    return to_hex(cmap(index % n_colors))


def normalize_color(color: str) -> str:
    """Lowercase a color token, adding '#' to bare hex digits"""
    color = color.strip().lower()
    if color and not color.startswith('#') and all(c in '0123456789abcdef' for c in color) \
            and len(color) in (3, 6):
        color = '#' + color
    return color
