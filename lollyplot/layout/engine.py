"""
Layout Engine for LollyPlot
Pure layout logic for linear lollipop diagrams

Bands, top to bottom:
- Labels (optional) and staggered lollipops
- Backbone with motifs and curated domains
- Coordinate axis (optional)

The engine only computes geometry; RenderPipeline turns a LayoutResult
into drawing commands.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Union
import logging

from ..config import PlotConfig
from ..fonts import blend_colors, measure_text_width
from ..mutations import parse_mutations
from ..types import MutationDescriptor, ProteinGraphic, PFAMB_MOTIF
from .aggregator import MarkerAggregator
from .axis import AxisSelector
from .labels import LabelFitter, MeasureFn
from .stagger import StaggerEngine
from .types import (
    LayoutResult,
    LollipopPlacement,
    Marker,
    MotifBox,
    RegionBox,
    StaggerResult,
    PRIORITY_START,
    PRIORITY_END,
    PRIORITY_DOMAIN,
    PRIORITY_LOLLIPOP,
    PRIORITY_MOTIF,
)

logger = logging.getLogger(__name__)

MutationInput = Union[str, MutationDescriptor]


class LayoutEngine:
    """
    Layout engine for lollipop diagrams

    Algorithm:
    1. Pick the canvas width (fixed, or wide enough for every domain label)
    2. Aggregate mutations into markers and stagger close lollipops
    3. Stack the bands and place backbone, motifs and domains
    4. Collect tick candidates along the way and select the axis ticks
    """

    def __init__(self, config: Optional[PlotConfig] = None, measure: Optional[MeasureFn] = None):
        """
        Initialize layout engine

        Args:
            config: Plot configuration (defaults if None)
            measure: Text width function (text, font_size) -> px.
                     Defaults to matplotlib glyph measurement.
        """
        self.config = config or PlotConfig()
        self.layout_config = self.config.layout
        self.style = self.config.style
        if measure is None:
            family = self.style.font_family
            measure = lambda text, size: measure_text_width(text, size, family)  # noqa: E731
        self.measure = measure

        self.aggregator = MarkerAggregator()
        self.stagger_engine = StaggerEngine(self.layout_config)
        self.label_fitter = LabelFitter(
            measure,
            font_size=self.style.domain_font_size,
            min_truncate_width=self.layout_config.min_truncate_width,
        )

    def auto_width(self, graphic: ProteinGraphic) -> float:
        """
        Width at which every domain label fits its box

        Args:
            graphic: Annotation track

        Returns:
            Canvas width including padding (px)
        """
        cfg = self.layout_config
        width = cfg.min_auto_width
        for region in graphic.regions:
            fraction = region.size / graphic.length
            if fraction <= 0 or not region.text:
                continue
            needed = self.measure(region.text, self.style.domain_font_size) + cfg.text_padding
            if fraction * width < needed:
                width = needed / fraction
        if width > cfg.max_auto_width:
            logger.warning(f"Automatic width {width:.0f}px capped at {cfg.max_auto_width:.0f}px")
            width = cfg.max_auto_width
        return width + cfg.padding * 2

    def calculate_layout(
        self,
        graphic: ProteinGraphic,
        mutations: Sequence[MutationInput] = ()
    ) -> LayoutResult:
        """
        Calculate the layout of one diagram

        Args:
            graphic: Sequence length plus domains and motifs
            mutations: Change strings or parsed descriptors

        Returns:
            LayoutResult with all positions calculated

        Raises:
            ValueError: if the sequence length is not positive
        """
        if graphic.length <= 0:
            raise ValueError(f"Sequence length must be positive, got {graphic.length}")

        cfg = self.layout_config
        width = cfg.graphic_width or self.auto_width(graphic)
        scale = (width - cfg.padding * 2) / graphic.length
        pop_space = self.stagger_engine.pop_space(scale)
        axis_spacing = AxisSelector.spacing_for_scale(scale, cfg.axis_tick_spacing)

        logger.info(f"Layout for {graphic.identifier or 'sequence'} ({graphic.length}aa): "
                    f"width {width:.0f}px, scale {scale:.3f}px/aa")

        descriptors = self._descriptors(mutations)
        markers = self.aggregator.aggregate(descriptors)
        stagger = self.stagger_engine.calculate(markers, pop_space)

        start_y = cfg.padding
        if cfg.show_labels:
            start_y += cfg.padding  # room for labels
        height = cfg.domain_height + cfg.padding * 2
        if not stagger.is_empty:
            height += stagger.max_height
            start_y += stagger.extra_height
        if not cfg.hide_axis:
            height += cfg.axis_padding + cfg.axis_height

        candidates: List[Marker] = [
            Marker(position=0, priority=PRIORITY_START),
            Marker(position=graphic.length, priority=PRIORITY_END),
        ]

        lollipops: List[LollipopPlacement] = []
        if not stagger.is_empty:
            pop_top = start_y + cfg.lollipop_radius
            pop_bottom = pop_top + cfg.lollipop_height
            start_y = pop_bottom - (cfg.domain_height - cfg.backbone_height) / 2
            lollipops = self._place_lollipops(stagger, scale, pop_top, pop_bottom)
            candidates.extend(Marker(position=p.marker.position, priority=PRIORITY_LOLLIPOP)
                              for p in lollipops)

        backbone_y = start_y + (cfg.domain_height - cfg.backbone_height) / 2
        backbone = (cfg.padding, backbone_y, width - cfg.padding * 2, cfg.backbone_height)

        motifs = self._place_motifs(graphic, scale, start_y, candidates)
        regions = self._place_regions(graphic, scale, start_y, candidates)

        axis_y: Optional[float] = None
        axis_ticks = []
        if not cfg.hide_axis:
            axis_y = start_y + cfg.domain_height + cfg.axis_padding
            axis_ticks = AxisSelector(axis_spacing).select(candidates)

        logger.info(f"Layout complete: {len(lollipops)} lollipops, {len(regions)} domains, "
                    f"{len(motifs)} motifs, {len(axis_ticks)} axis ticks, height {height:.1f}px")

        return LayoutResult(
            width=width,
            height=height,
            length=graphic.length,
            scale=scale,
            pop_space=pop_space,
            axis_spacing=axis_spacing,
            stagger=stagger,
            lollipops=lollipops,
            backbone=backbone,
            domain_top=start_y,
            motifs=motifs,
            regions=regions,
            axis_y=axis_y,
            axis_ticks=axis_ticks,
            layout_stats={
                'n_descriptors': len(descriptors),
                'n_markers': len(markers),
                'n_tick_candidates': len(candidates),
                'stagger_extra_height': stagger.extra_height,
                'auto_width': not cfg.graphic_width,
            }
        )

    def _descriptors(self, mutations: Sequence[MutationInput]) -> List[MutationDescriptor]:
        """Parse change strings, passing descriptors through"""
        descriptors: List[MutationDescriptor] = []
        for mutation in mutations:
            if isinstance(mutation, MutationDescriptor):
                descriptors.append(mutation)
            else:
                descriptors.extend(parse_mutations([mutation], self.style))
        return descriptors

    def _place_lollipops(
        self,
        stagger: StaggerResult,
        scale: float,
        pop_top: float,
        pop_bottom: float
    ) -> List[LollipopPlacement]:
        """Pixel placement for each staggered marker"""
        placements = []
        for marker, offset in zip(stagger.markers, stagger.offsets):
            placements.append(LollipopPlacement(
                marker=marker,
                x=self.layout_config.padding + marker.position * scale,
                top=pop_top - offset,
                bottom=pop_bottom,
                radius=self.stagger_engine.radius(marker),
            ))
        return placements

    def _place_motifs(
        self,
        graphic: ProteinGraphic,
        scale: float,
        start_y: float,
        candidates: List[Marker]
    ) -> List[MotifBox]:
        """
        Motif boxes over the backbone

        Disordered regions cover the backbone; other motifs are taller,
        centered on the domain row, and contribute axis tick candidates.
        """
        cfg = self.layout_config
        if cfg.hide_motifs:
            return []

        boxes: List[MotifBox] = []
        for motif in graphic.motifs:
            if motif.type == PFAMB_MOTIF:
                continue
            if motif.is_disordered and cfg.hide_disordered:
                continue
            x = motif.start * scale
            box_width = motif.end * scale - x
            if motif.is_disordered:
                boxes.append(MotifBox(
                    motif=motif,
                    x=cfg.padding + x,
                    y=start_y + (cfg.domain_height - cfg.backbone_height) / 2,
                    width=box_width,
                    height=cfg.backbone_height,
                    fill=motif.color,
                ))
                continue
            boxes.append(MotifBox(
                motif=motif,
                x=cfg.padding + x,
                y=start_y + (cfg.domain_height - cfg.motif_height) / 2,
                width=box_width,
                height=cfg.motif_height,
                fill=blend_colors(motif.color, '#FFFFFF'),
            ))
            candidates.append(Marker(position=motif.start, priority=PRIORITY_MOTIF))
            candidates.append(Marker(position=motif.end, priority=PRIORITY_MOTIF))
        return boxes

    def _place_regions(
        self,
        graphic: ProteinGraphic,
        scale: float,
        start_y: float,
        candidates: List[Marker]
    ) -> List[RegionBox]:
        """Curated domain boxes with fitted labels"""
        cfg = self.layout_config
        boxes: List[RegionBox] = []
        for region in graphic.regions:
            candidates.append(Marker(position=region.start, priority=PRIORITY_DOMAIN))
            candidates.append(Marker(position=region.end, priority=PRIORITY_DOMAIN))

            x = region.start * scale
            box_width = region.end * scale - x

            label = None
            if box_width > cfg.min_label_box_width:
                label = self.label_fitter.fit(box_width - cfg.text_padding,
                                              region.text, region.description)
            boxes.append(RegionBox(
                region=region,
                x=cfg.padding + x,
                y=start_y,
                width=box_width,
                height=cfg.domain_height,
                label=label,
            ))
        return boxes
