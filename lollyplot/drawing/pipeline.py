"""
Render pipeline

Runs the layout engine and emits drawing commands band by band:
lollipops, backbone, motifs, domains, axis.
"""
from __future__ import annotations
from typing import List, Optional, Sequence
import logging

from ..config import PlotConfig
from ..layout import LayoutEngine, LayoutResult
from ..layout.engine import MutationInput
from ..layout.labels import MeasureFn
from ..types import ProteinGraphic
from .commands import Circle, Command, Drawing, Group, Line, Link, Rect, Text, Transform

logger = logging.getLogger(__name__)

SOLID_DISORDER_FILL = '#000'
SOLID_DISORDER_OPACITY = 0.15


class RenderPipeline:
    """
    Builds the drawing command stream for a lollipop diagram

    Example:
        >>> pipeline = RenderPipeline(PlotConfig.labeled())
        >>> drawing = pipeline.render(graphic, ['R273C', 'R175H@4'])
        >>> SVGWriter(pipeline.config).write(drawing, 'tp53.svg')
    """

    def __init__(self, config: Optional[PlotConfig] = None, measure: Optional[MeasureFn] = None) -> None:
        """
        Initialize RenderPipeline

        Args:
            config: Plot configuration. If None, uses default settings.
            measure: Optional text width function for the layout engine
        """
        self.config: PlotConfig = config or PlotConfig()
        self.layout_engine = LayoutEngine(self.config, measure=measure)

    def render(self, graphic: ProteinGraphic, mutations: Sequence[MutationInput] = ()) -> Drawing:
        """
        Lay out and draw a diagram

        Args:
            graphic: Annotation track
            mutations: Change strings or parsed descriptors

        Returns:
            Drawing command stream
        """
        layout = self.layout_engine.calculate_layout(graphic, mutations)
        return self.draw(layout, graphic)

    def draw(self, layout: LayoutResult, graphic: ProteinGraphic) -> Drawing:
        """
        Emit drawing commands for a computed layout

        Args:
            layout: Output of LayoutEngine.calculate_layout
            graphic: Annotation track the layout was computed for

        Returns:
            Drawing command stream
        """
        drawing = Drawing(width=layout.width, height=layout.height)
        for command in self._lollipops(layout):
            drawing.add(command)
        drawing.add(self._backbone(layout, graphic))
        for command in self._motifs(layout):
            drawing.add(command)
        for command in self._regions(layout):
            drawing.add(command)
        if layout.axis_y is not None:
            drawing.add(self._axis(layout))
        logger.debug(f"Emitted {len(drawing.commands)} top-level drawing commands")
        return drawing

    def _lollipops(self, layout: LayoutResult) -> List[Command]:
        style = self.config.style
        commands: List[Command] = []
        for pop in layout.lollipops:
            commands.append(Line(pop.x, pop.top, pop.x, pop.bottom,
                                 stroke=style.backbone_color, stroke_width=style.stem_width))
            commands.append(Link(
                children=(Circle(pop.x, pop.top, pop.radius, fill=pop.marker.color),),
                title=pop.marker.label,
            ))
            if self.config.layout.show_labels:
                commands.append(Group(
                    children=(Text(0.0, pop.radius * -1.5, pop.marker.display_label,
                                   font_size=style.lollipop_font_size,
                                   fill=style.lollipop_label_color,
                                   font_family=style.font_family),),
                    transform=Transform(pop.x, pop.top, self.config.layout.label_rotation),
                ))
        return commands

    def _backbone(self, layout: LayoutResult, graphic: ProteinGraphic) -> Command:
        x, y, width, height = layout.backbone
        title = f"{graphic.identifier}, {graphic.description} ({graphic.length}aa)"
        return Link(
            children=(Rect(x, y, width, height, fill=self.config.style.backbone_color),),
            title=title,
        )

    def _motifs(self, layout: LayoutResult) -> List[Command]:
        solid = self.config.layout.solid_fill_only
        commands: List[Command] = []
        for box in layout.motifs:
            if box.motif.is_disordered:
                if solid:
                    rect = Rect(box.x, box.y, box.width, box.height,
                                fill=SOLID_DISORDER_FILL, opacity=SOLID_DISORDER_OPACITY)
                else:
                    rect = Rect(box.x, box.y, box.width, box.height, fill='none', hatch=True)
            else:
                rect = Rect(box.x, box.y, box.width, box.height, fill=box.fill, shadow=True)
            commands.append(Link(children=(rect,), title=box.motif.type))
        return commands

    def _region_link(self, link: Optional[str]) -> Optional[str]:
        if not link:
            return None
        if '://' in link:
            return link
        return self.config.style.link_prefix + link

    def _regions(self, layout: LayoutResult) -> List[Command]:
        style = self.config.style
        commands: List[Command] = []
        for box in layout.regions:
            children: List[Command] = [
                Rect(0.0, 0.0, box.width, box.height, fill=box.region.color, shadow=True)
            ]
            if box.label is not None:
                children.append(Text(box.width / 2.0, 4 + box.height / 2, box.label.text,
                                     font_size=style.domain_font_size,
                                     fill=style.domain_label_color,
                                     font_family=style.font_family))
            commands.append(Group(
                children=(Link(children=tuple(children),
                               href=self._region_link(box.region.link),
                               title=box.region.description or box.region.text),),
                transform=Transform(box.x, box.y),
            ))
        return commands

    def _axis(self, layout: LayoutResult) -> Command:
        cfg = self.config.layout
        style = self.config.style
        y = layout.axis_y
        children: List[Command] = [
            Line(cfg.padding, y, layout.width - cfg.padding, y, stroke=style.axis_color),
            Line(cfg.padding, y, cfg.padding, y + cfg.axis_height / 3, stroke=style.axis_color),
        ]
        for tick in layout.axis_ticks:
            x = layout.x_for(tick.position)
            children.append(Line(x, y, x, y + cfg.axis_height / 3, stroke=style.axis_color))
            children.append(Text(x, y + cfg.axis_height, tick.text,
                                 font_size=style.axis_font_size,
                                 fill=style.axis_label_color,
                                 font_family=style.font_family))
        return Group(children=tuple(children), css_class='axis')
