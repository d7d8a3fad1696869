"""
Drawing commands

A diagram is an ordered list of primitives in pixel coordinates. Writers
serialise the same command list to SVG or render it with matplotlib.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union
import math


@dataclass(frozen=True)
class Transform:
    """Translation followed by a rotation (degrees, SVG convention)"""
    tx: float = 0.0
    ty: float = 0.0
    rotate: float = 0.0

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a point from group space to parent space"""
        theta = math.radians(self.rotate)
        rx = x * math.cos(theta) - y * math.sin(theta)
        ry = x * math.sin(theta) + y * math.cos(theta)
        return self.tx + rx, self.ty + ry

    def to_svg(self) -> str:
        parts = [f"translate({self.tx:f},{self.ty:f})"]
        if self.rotate:
            parts.append(f"rotate({self.rotate:g})")
        return ' '.join(parts)


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: str


@dataclass(frozen=True)
class Rect:
    """
    Filled rectangle

    Attributes:
        shadow: Apply the drop-shadow filter
        hatch: Fill with the disordered-region hatch pattern instead of fill
    """
    x: float
    y: float
    width: float
    height: float
    fill: str
    opacity: float = 1.0
    shadow: bool = False
    hatch: bool = False


@dataclass(frozen=True)
class Text:
    """Text anchored at (x, y) on its baseline"""
    x: float
    y: float
    text: str
    font_size: float
    fill: str
    font_family: str = 'sans-serif'
    anchor: str = 'middle'


@dataclass(frozen=True)
class Group:
    """Children drawn under a transform"""
    children: Tuple['Command', ...]
    transform: Optional[Transform] = None
    css_class: Optional[str] = None


@dataclass(frozen=True)
class Link:
    """Children wrapped in a hyperlink and/or tooltip"""
    children: Tuple['Command', ...]
    href: Optional[str] = None
    title: Optional[str] = None


Command = Union[Line, Circle, Rect, Text, Group, Link]


@dataclass
class Drawing:
    """
    Complete command stream for one diagram

    Attributes:
        width: Canvas width (px)
        height: Canvas height (px)
        commands: Top-level commands in paint order
    """
    width: float
    height: float
    commands: List[Command] = field(default_factory=list)

    def add(self, command: Command) -> Command:
        self.commands.append(command)
        return command

    def walk(self) -> Iterator[Tuple[Command, Tuple[Transform, ...]]]:
        """Leaf commands in paint order with the transforms above them"""
        def _walk(commands, transforms):
            for command in commands:
                if isinstance(command, Group):
                    inner = transforms + ((command.transform,) if command.transform else ())
                    yield from _walk(command.children, inner)
                elif isinstance(command, Link):
                    yield from _walk(command.children, transforms)
                else:
                    yield command, transforms
        yield from _walk(self.commands, ())

    def find(self, kind: type) -> List[Command]:
        """All leaf commands of a given type"""
        return [command for command, _ in self.walk() if isinstance(command, kind)]
