"""
Lollipop staggering

Lollipops closer than the pop space would overlap, so heads with close
neighbours to their right are lifted by the size of those neighbours.
The tallest resulting stack decides how much room the lollipop row needs.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence
import logging

import numpy as np

from ..config import LayoutConfig
from .types import Marker, StaggerResult

logger = logging.getLogger(__name__)

STACK_GAP = 0.5
"""Vertical gap between stacked heads (px)"""

STACK_FACTOR = 3.0
"""Head radii of vertical space per stacked neighbour"""


def marker_radius(marker: Marker, config: LayoutConfig) -> float:
    """
    Head radius for a marker

    Grows with the square root of log(count), so heavily recurrent
    mutations stand out without dwarfing the track.

    Args:
        marker: Marker to size
        config: Layout configuration (base radius)

    Returns:
        Radius in px; the base radius for count <= 1
    """
    if marker.count <= 1:
        return config.lollipop_radius
    return float(np.sqrt(np.log(2 + marker.count) * config.lollipop_radius ** 2))


class StaggerEngine:
    """
    Computes vertical offsets of close lollipops

    Algorithm:
    1. Order markers by position (ties by first-seen order)
    2. For each marker, walk forward while neighbours stay within pop space
    3. Each neighbour lifts the marker by 0.5 + 3 * radius(neighbour)
    4. The tallest stack is the space reserved for the lollipop row
    """

    def __init__(
        self,
        config: LayoutConfig,
        radius_fn: Optional[Callable[[Marker, LayoutConfig], float]] = None
    ):
        """
        Initialize stagger engine

        Args:
            config: Layout configuration
            radius_fn: Head radius function (default: marker_radius)
        """
        self.config = config
        self.radius_fn = radius_fn or marker_radius

    def pop_space(self, scale: float) -> int:
        """
        Closeness window in residues

        Args:
            scale: Pixels per residue

        Returns:
            Largest position difference at which two lollipops collide
        """
        return int((self.config.lollipop_radius + self.config.stagger_gap) / scale)

    def radius(self, marker: Marker) -> float:
        """Head radius for a marker"""
        return self.radius_fn(marker, self.config)

    def _step(self, marker: Marker) -> float:
        return STACK_GAP + self.radius(marker) * STACK_FACTOR

    def calculate(self, markers: Sequence[Marker], pop_space: int) -> StaggerResult:
        """
        Stagger markers

        Args:
            markers: Lollipop markers in any order
            pop_space: Closeness window (residues)

        Returns:
            StaggerResult with markers in sequence order
        """
        base = self.config.base_stem_height
        if not markers:
            return StaggerResult(markers=[], offsets=[], contributions=[],
                                 base_height=base, max_height=0.0)

        ordered = sorted(markers, key=lambda m: m.sort_key)
        steps = [self._step(m) for m in ordered]

        offsets: List[float] = []
        for i, marker in enumerate(ordered):
            offset = 0.0
            for j in range(i + 1, len(ordered)):
                # ordered by position, so the first miss ends the window
                if ordered[j].position - marker.position > pop_space:
                    break
                offset += steps[j]
            offsets.append(offset)

        contributions = [base + offset for offset in offsets]
        max_height = max(contributions)

        logger.debug(f"Staggered {len(ordered)} lollipops (pop space {pop_space}): "
                     f"max stack {max_height:.1f}px")

        return StaggerResult(
            markers=ordered,
            offsets=offsets,
            contributions=contributions,
            base_height=base,
            max_height=max_height,
        )
