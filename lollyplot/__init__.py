"""LollyPlot: lollipop diagrams of protein mutations"""

from .config import LayoutConfig, PlotConfig, StyleConfig
from .types import Motif, MutationDescriptor, ProteinGraphic, Region
from .mutations import MutationParseError, parse_mutation, parse_mutations
from .layout import LayoutEngine, LayoutResult
from .drawing import RasterWriter, RenderPipeline, SVGWriter

__version__ = "0.1.0"
__all__ = [
    "LayoutConfig", "PlotConfig", "StyleConfig",
    "Motif", "MutationDescriptor", "ProteinGraphic", "Region",
    "MutationParseError", "parse_mutation", "parse_mutations",
    "LayoutEngine", "LayoutResult",
    "RasterWriter", "RenderPipeline", "SVGWriter",
]
