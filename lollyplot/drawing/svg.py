"""
SVG writer

Serialises a Drawing with svgwrite. Domains and motifs share a soft drop
shadow; disordered regions use a diagonal hatch pattern.
"""
from __future__ import annotations
from typing import Optional
from pathlib import Path
import logging

import svgwrite
from svgwrite.container import Group as SVGGroup

from ..config import PlotConfig
from ..types import PathLike
from .commands import Circle, Command, Drawing, Group, Line, Link, Rect, Text

logger = logging.getLogger(__name__)

SHADOW_FILTER_ID = 'ds'
HATCH_PATTERN_ID = 'disordered-hatch'


class SVGWriter:
    """Writes Drawing command streams as SVG documents"""

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize SVGWriter

        Args:
            config: Plot configuration. If None, uses default settings.
        """
        self.config = config or PlotConfig()

    def _add_defs(self, dwg: svgwrite.Drawing) -> None:
        shadow = dwg.filter(id=SHADOW_FILTER_ID, start=(0, 0))
        shadow.feOffset(in_='SourceAlpha', dx=2, dy=2)
        shadow.feComponentTransfer().feFuncA('linear', slope=0.2)
        shadow.feGaussianBlur(result='blurOut', stdDeviation=1)
        shadow.feBlend(in_='SourceGraphic', in2='blurOut', mode='normal')
        dwg.defs.add(shadow)

        hatch = dwg.pattern(id=HATCH_PATTERN_ID, size=(4, 4), patternUnits='userSpaceOnUse')
        hatch.add(dwg.path(d='M-1,1 l2,-2 M0,4 l4,-4 M3,5 l2,-2', stroke='#000000', opacity=0.3))
        dwg.defs.add(hatch)

    @staticmethod
    def _text_style(text: Text) -> str:
        return f"font-size:{text.font_size:g}px;font-family:{text.font_family};fill:{text.fill};"

    def _element(self, dwg: svgwrite.Drawing, command: Command):
        """Build the svgwrite element for one command"""
        if isinstance(command, Line):
            return dwg.line(start=(command.x1, command.y1), end=(command.x2, command.y2),
                            stroke=command.stroke, stroke_width=command.stroke_width)
        if isinstance(command, Circle):
            return dwg.circle(center=(command.cx, command.cy), r=command.r, fill=command.fill)
        if isinstance(command, Rect):
            fill = f"url(#{HATCH_PATTERN_ID})" if command.hatch else command.fill
            rect = dwg.rect(insert=(command.x, command.y), size=(command.width, command.height), fill=fill)
            if command.opacity != 1.0:
                rect['opacity'] = command.opacity
            if command.shadow:
                rect['filter'] = f"url(#{SHADOW_FILTER_ID})"
            return rect
        if isinstance(command, Text):
            return dwg.text(command.text, insert=(command.x, command.y),
                            style=self._text_style(command), text_anchor=command.anchor)
        if isinstance(command, Group):
            group = dwg.g()
            if command.transform is not None:
                group['transform'] = command.transform.to_svg()
            if command.css_class:
                group['class'] = command.css_class
            for child in command.children:
                group.add(self._element(dwg, child))
            return group
        if isinstance(command, Link):
            container: SVGGroup = dwg.a(command.href) if command.href else dwg.g()
            if command.title:
                container.set_desc(title=command.title)
            for child in command.children:
                container.add(self._element(dwg, child))
            return container
        raise TypeError(f"Unsupported drawing command: {type(command).__name__}")

    def build(self, drawing: Drawing) -> svgwrite.Drawing:
        """
        Build the svgwrite document

        Args:
            drawing: Command stream

        Returns:
            svgwrite.Drawing ready to serialise
        """
        dwg = svgwrite.Drawing(size=(f"{drawing.width:f}", f"{drawing.height:f}"),
                               profile='full', debug=False)
        self._add_defs(dwg)
        for command in drawing.commands:
            dwg.add(self._element(dwg, command))
        return dwg

    def to_string(self, drawing: Drawing) -> str:
        """Serialise a Drawing to an SVG string"""
        return self.build(drawing).tostring()

    def write(self, drawing: Drawing, output_file: PathLike) -> None:
        """
        Write a Drawing to an SVG file

        Args:
            drawing: Command stream
            output_file: Destination path
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            self.build(drawing).write(f, pretty=True)
        logger.info(f"SVG saved to {output_file}")
