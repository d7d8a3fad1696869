"""
Layout types for LollyPlot
Data structures for layout engine results

Markers and placements are frozen once the engine has built them.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Dict, Any

from ..types import Region, Motif

# Axis priorities: higher wins contention for an axis slot
PRIORITY_START = 0
PRIORITY_MOTIF = 1
PRIORITY_DOMAIN = 5
PRIORITY_LOLLIPOP = 10
PRIORITY_END = 99


@dataclass(frozen=True)
class Marker:
    """
    Labelable point along the sequence axis

    Lollipops, domain and motif boundaries and the sequence start/end are
    all markers.

    Attributes:
        position: Sequence coordinate (0..length)
        priority: Axis priority, see the PRIORITY_* constants
        count: Number of aggregated mutation descriptors
        color: Normalized (lowercase) color
        label: Display label of the originating descriptor
        source_index: Index of the first originating descriptor
    """
    position: int
    priority: int
    count: int = 1
    color: str = ''
    label: Optional[str] = None
    source_index: Optional[int] = None

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        """Position ascending, priority descending, then first-seen order"""
        index = self.source_index if self.source_index is not None else 0
        return (self.position, -self.priority, index)

    @property
    def display_label(self) -> str:
        """Label with the multiplicity suffix, e.g. 'R273C (3)'"""
        text = self.label or str(self.position)
        if self.count > 1:
            return f"{text} ({self.count})"
        return text


@dataclass(frozen=True)
class StaggerResult:
    """
    Vertical staggering of lollipop markers

    Attributes:
        markers: Markers in sequence order
        offsets: Upward offset of each marker head (px)
        contributions: Stack height contribution of each marker (px)
        base_height: Height of an unstaggered lollipop (px)
        max_height: Vertical space to reserve for the lollipop row (px)
    """
    markers: List[Marker]
    offsets: List[float]
    contributions: List[float]
    base_height: float
    max_height: float

    @property
    def extra_height(self) -> float:
        """Space needed above a single unstaggered lollipop (px)"""
        if not self.markers:
            return 0.0
        return self.max_height - self.base_height

    @property
    def is_empty(self) -> bool:
        """Whether there were no markers to stagger"""
        return not self.markers


@dataclass(frozen=True)
class LollipopPlacement:
    """
    Pixel placement of one lollipop

    Attributes:
        marker: Aggregated marker
        x: Horizontal center (px)
        top: Vertical center of the head (px)
        bottom: Vertical end of the stem (px)
        radius: Head radius (px)
    """
    marker: Marker
    x: float
    top: float
    bottom: float
    radius: float


@dataclass(frozen=True)
class AxisTick:
    """
    Tick selected for the coordinate axis

    Attributes:
        position: Sequence coordinate
        text: Tick label
        priority: Priority of the winning candidate
    """
    position: int
    text: str
    priority: int = PRIORITY_LOLLIPOP


@dataclass(frozen=True)
class FittedLabel:
    """
    Result of fitting a label into a box

    Attributes:
        text: String to render
        method: Strategy that produced it ('description', 'label', 'word', 'truncated')
        width: Measured width of the text (px)
    """
    text: str
    method: str
    width: float


@dataclass(frozen=True)
class RegionBox:
    """
    Pixel geometry of a curated domain

    Attributes:
        region: Source region
        x: Left edge (px)
        y: Top edge (px)
        width: Box width (px)
        height: Box height (px)
        label: Fitted label, or None when nothing fits
    """
    region: Region
    x: float
    y: float
    width: float
    height: float
    label: Optional[FittedLabel] = None


@dataclass(frozen=True)
class MotifBox:
    """
    Pixel geometry of a motif

    Attributes:
        motif: Source motif
        x: Left edge (px)
        y: Top edge (px)
        width: Box width (px)
        height: Box height (px)
        fill: Fill color after blending
    """
    motif: Motif
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass
class LayoutResult:
    """
    Complete layout solution for one diagram

    This is the output of LayoutEngine and input to RenderPipeline.

    Attributes:
        width: Canvas width (px)
        height: Canvas height (px)
        length: Sequence length (residues)
        scale: Pixels per residue
        pop_space: Closeness window for staggering (residues)
        axis_spacing: Minimum distance between axis ticks (residues)
        stagger: Stagger engine output
        lollipops: Placement of each lollipop
        backbone: (x, y, width, height) of the backbone bar
        domain_top: Top of the domain row (px)
        motifs: Motif boxes in input order
        regions: Region boxes in input order
        axis_y: Vertical position of the axis line, None when hidden
        axis_ticks: Selected axis ticks
        layout_stats: Statistics about the layout
    """
    width: float
    height: float
    length: int
    scale: float
    pop_space: int
    axis_spacing: int
    stagger: StaggerResult
    lollipops: List[LollipopPlacement]
    backbone: Tuple[float, float, float, float]
    domain_top: float
    motifs: List[MotifBox]
    regions: List[RegionBox]
    axis_y: Optional[float]
    axis_ticks: List[AxisTick]
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_lollipops(self) -> int:
        """Number of drawn lollipops"""
        return len(self.lollipops)

    @property
    def total_mutations(self) -> int:
        """Number of mutation descriptors behind the lollipops"""
        return sum(p.marker.count for p in self.lollipops)

    def x_for(self, position: float) -> float:
        """Horizontal pixel for a sequence coordinate"""
        return self.backbone[0] + position * self.scale

    def get_region_box(self, text: str) -> Optional[RegionBox]:
        """First region box whose region label is text"""
        for box in self.regions:
            if box.region.text == text:
                return box
        return None
