"""
Layout Module for LollyPlot
Layout engine for linear lollipop diagrams

Public API:
    - LayoutEngine: Main layout calculation engine
    - LayoutResult: Complete layout solution
    - MarkerAggregator: Merges duplicate mutations into markers
    - StaggerEngine: Vertical staggering of close lollipops
    - AxisSelector: Axis tick de-duplication
    - LabelFitter: Domain label fitting
    - Marker: Labelable point along the sequence
"""

from .engine import LayoutEngine
from .aggregator import MarkerAggregator
from .stagger import StaggerEngine, marker_radius
from .axis import AxisSelector
from .labels import LabelFitter
from .types import (
    LayoutResult,
    Marker,
    StaggerResult,
    LollipopPlacement,
    AxisTick,
    FittedLabel,
    RegionBox,
    MotifBox,
    PRIORITY_START,
    PRIORITY_MOTIF,
    PRIORITY_DOMAIN,
    PRIORITY_LOLLIPOP,
    PRIORITY_END,
)

__all__ = [
    'LayoutEngine',
    'MarkerAggregator',
    'StaggerEngine',
    'marker_radius',
    'AxisSelector',
    'LabelFitter',
    'LayoutResult',
    'Marker',
    'StaggerResult',
    'LollipopPlacement',
    'AxisTick',
    'FittedLabel',
    'RegionBox',
    'MotifBox',
    'PRIORITY_START',
    'PRIORITY_MOTIF',
    'PRIORITY_DOMAIN',
    'PRIORITY_LOLLIPOP',
    'PRIORITY_END',
]
