"""
Axis tick selection

Every lollipop, domain boundary and motif boundary would like a tick on the
coordinate axis. Only candidates spaced far enough apart are drawn, and when
candidates compete for the same slot the higher priority one wins.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence
import logging

from .types import AxisTick, Marker

logger = logging.getLogger(__name__)


class AxisSelector:
    """
    Picks the ticks to draw on the coordinate axis

    Candidates are walked in (position, -priority) order. A candidate is
    dropped when it is too close to the last drawn tick, or when a better
    candidate lies within its look-ahead window; that better candidate is
    then drawn instead. The sequence end carries the top priority, so any
    candidate whose window reaches it gives way and the end is always drawn.
    """

    def __init__(self, min_spacing: int):
        """
        Initialize axis selector

        Args:
            min_spacing: Minimum distance between drawn ticks (residues)
        """
        self.min_spacing = min_spacing

    @staticmethod
    def spacing_for_scale(scale: float, tick_spacing_px: float = 20.0) -> int:
        """
        Minimum tick distance in residues for a given scale

        Args:
            scale: Pixels per residue
            tick_spacing_px: Minimum tick distance in pixels

        Returns:
            Distance in residues, at least 1
        """
        return max(1, int(tick_spacing_px / scale))

    def best_in_window(self, ordered: Sequence[Marker], index: int) -> int:
        """
        Index of the best candidate in the window starting at index

        The window holds every candidate closer than min_spacing to
        ordered[index]. Ties go to the earliest candidate.
        """
        start = ordered[index].position
        best = index
        for j in range(index + 1, len(ordered)):
            if ordered[j].position - start >= self.min_spacing:
                break
            if ordered[j].priority > ordered[best].priority:
                best = j
        return best

    def select(self, candidates: Iterable[Marker]) -> List[AxisTick]:
        """
        Select ticks to draw

        Args:
            candidates: Tick candidates in any order

        Returns:
            AxisTick list in increasing position
        """
        # stable sort keeps first-seen order for exact duplicates
        ordered = sorted(candidates, key=lambda m: (m.position, -m.priority))

        ticks: List[AxisTick] = []
        last_drawn = None
        for i, candidate in enumerate(ordered):
            if ticks and candidate.position == ticks[-1].position:
                continue
            if last_drawn is not None and candidate.position - last_drawn < self.min_spacing:
                continue
            if self.best_in_window(ordered, i) != i:
                continue
            ticks.append(AxisTick(
                position=candidate.position,
                text=str(candidate.position),
                priority=candidate.priority,
            ))
            last_drawn = candidate.position

        logger.debug(f"Selected {len(ticks)} of {len(ordered)} axis tick candidates "
                     f"(spacing {self.min_spacing})")
        return ticks
