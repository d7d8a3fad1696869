"""
Raster writer

Renders a Drawing with matplotlib for PNG/PDF output. One data unit is one
SVG pixel, with the y axis pointing down as in SVG.
"""
from __future__ import annotations
from typing import List, Optional, Tuple
from pathlib import Path
import logging

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..config import PlotConfig
from ..types import PathLike
from .commands import Circle, Command, Drawing, Group, Line, Link, Rect, Text, Transform

logger = logging.getLogger(__name__)

TEXT_ANCHORS = {'start': 'left', 'middle': 'center', 'end': 'right'}
SHADOW_OFFSET = 2.0
SHADOW_ALPHA = 0.2
HATCH = '////'


class RasterWriter:
    """Renders Drawing command streams with matplotlib"""

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize RasterWriter

        Args:
            config: Plot configuration (DPI). If None, uses default settings.
        """
        self.config = config or PlotConfig()

    @property
    def dpi(self) -> int:
        return self.config.dpi

    def _points(self, px: float) -> float:
        """Convert pixels to points at the configured DPI"""
        return px * 72.0 / self.dpi

    @staticmethod
    def _map(x: float, y: float, transforms: Tuple[Transform, ...]) -> Tuple[float, float]:
        for transform in reversed(transforms):
            x, y = transform.apply(x, y)
        return x, y

    def _draw(self, ax: Axes, command: Command, transforms: Tuple[Transform, ...], href: Optional[str]) -> List:
        """Draw one command, returning the artists created"""
        if isinstance(command, Group):
            inner = transforms + ((command.transform,) if command.transform else ())
            artists = []
            for child in command.children:
                artists.extend(self._draw(ax, child, inner, href))
            return artists
        if isinstance(command, Link):
            artists = []
            for child in command.children:
                artists.extend(self._draw(ax, child, transforms, command.href or href))
            return artists

        artists = []
        if isinstance(command, Line):
            x1, y1 = self._map(command.x1, command.y1, transforms)
            x2, y2 = self._map(command.x2, command.y2, transforms)
            artists.extend(ax.plot([x1, x2], [y1, y2], color=command.stroke,
                                   linewidth=self._points(command.stroke_width),
                                   solid_capstyle='butt'))
        elif isinstance(command, Circle):
            cx, cy = self._map(command.cx, command.cy, transforms)
            artists.append(ax.add_patch(patches.Circle((cx, cy), command.r,
                                                       facecolor=command.fill, edgecolor='none')))
        elif isinstance(command, Rect):
            x, y = self._map(command.x, command.y, transforms)
            if command.shadow:
                ax.add_patch(patches.Rectangle((x + SHADOW_OFFSET, y + SHADOW_OFFSET),
                                               command.width, command.height,
                                               facecolor='black', alpha=SHADOW_ALPHA,
                                               edgecolor='none'))
            if command.hatch:
                rect = patches.Rectangle((x, y), command.width, command.height,
                                         facecolor='none', edgecolor=(0, 0, 0, 0.3),
                                         hatch=HATCH, linewidth=0)
            else:
                rect = patches.Rectangle((x, y), command.width, command.height,
                                         facecolor=command.fill, alpha=command.opacity,
                                         edgecolor='none')
            artists.append(ax.add_patch(rect))
        elif isinstance(command, Text):
            x, y = self._map(command.x, command.y, transforms)
            rotation = -sum(t.rotate for t in transforms)
            artists.append(ax.text(x, y, command.text,
                                   fontsize=self._points(command.font_size),
                                   family=command.font_family, color=command.fill,
                                   ha=TEXT_ANCHORS.get(command.anchor, 'center'),
                                   va='baseline', rotation=rotation,
                                   rotation_mode='anchor'))
        else:
            raise TypeError(f"Unsupported drawing command: {type(command).__name__}")

        if href:
            for artist in artists:
                artist.set_url(href)
        return artists

    def render(self, drawing: Drawing) -> Figure:
        """
        Render a Drawing onto a new matplotlib figure

        Args:
            drawing: Command stream

        Returns:
            matplotlib Figure sized to the drawing at the configured DPI
        """
        fig = plt.figure(figsize=(drawing.width / self.dpi, drawing.height / self.dpi), dpi=self.dpi)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, drawing.width)
        ax.set_ylim(drawing.height, 0)
        ax.set_axis_off()
        for command in drawing.commands:
            self._draw(ax, command, (), None)
        return fig

    def write(self, drawing: Drawing, output_file: PathLike) -> None:
        """
        Render a Drawing and save it (format from the file extension)

        Args:
            drawing: Command stream
            output_file: Destination path (.png, .pdf, ...)
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        fig = self.render(drawing)
        try:
            fig.savefig(output_file, dpi=self.dpi, facecolor='white', edgecolor='none')
        finally:
            plt.close(fig)
        logger.info(f"Plot saved to {output_file}")
