"""Drawing command stream, render pipeline and writers for LollyPlot"""

from .commands import Circle, Command, Drawing, Group, Line, Link, Rect, Text, Transform
from .pipeline import RenderPipeline
from .svg import SVGWriter
from .raster import RasterWriter

__all__ = [
    'Circle', 'Command', 'Drawing', 'Group', 'Line', 'Link', 'Rect', 'Text', 'Transform',
    'RenderPipeline',
    'SVGWriter',
    'RasterWriter',
]
