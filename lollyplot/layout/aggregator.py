"""
Marker aggregation

Merges mutation descriptors sharing a (label, color) key into a single
lollipop marker carrying the summed count.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Tuple
import logging

from ..types import MutationDescriptor
from .types import Marker, PRIORITY_LOLLIPOP

logger = logging.getLogger(__name__)


class MarkerAggregator:
    """
    Builds lollipop markers from parsed mutation descriptors

    Markers come out in first-seen order of their aggregation key. Counts
    are accumulated before any marker is created, so the markers handed to
    the layout stages are never modified.
    """

    @staticmethod
    def aggregation_key(descriptor: MutationDescriptor) -> Tuple[str, str]:
        """Key under which descriptors are merged"""
        return (descriptor.label, descriptor.color.lower())

    def aggregate(self, descriptors: Iterable[MutationDescriptor]) -> List[Marker]:
        """
        Aggregate descriptors into markers

        Args:
            descriptors: Parsed descriptors in input order

        Returns:
            One Marker per distinct (label, color), in first-seen order
        """
        first_seen: Dict[Tuple[str, str], int] = {}
        counts: Dict[Tuple[str, str], int] = {}
        sources: Dict[Tuple[str, str], MutationDescriptor] = {}
        n_descriptors = 0

        for index, descriptor in enumerate(descriptors):
            n_descriptors += 1
            key = self.aggregation_key(descriptor)
            if key in counts:
                counts[key] += descriptor.count
                continue
            first_seen[key] = index
            counts[key] = descriptor.count
            sources[key] = descriptor

        markers = [
            Marker(
                position=sources[key].position,
                priority=PRIORITY_LOLLIPOP,
                count=counts[key],
                color=key[1],
                label=sources[key].label,
                source_index=first_seen[key],
            )
            for key in first_seen
        ]
        logger.debug(f"Aggregated {n_descriptors} descriptors into {len(markers)} markers")
        return markers
