"""
Type definitions for LollyPlot

Input records shared by the readers, the layout engine and the renderers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TypedDict, List, Optional, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

DISORDER_MOTIF = 'disorder'
"""Motif type drawn as a hatched backbone overlay"""

PFAMB_MOTIF = 'pfamb'
"""Motif type never drawn"""


@dataclass(frozen=True)
class Region:
    """
    Curated domain annotation

    Attributes:
        start: First residue (sequence coordinate)
        end: Last residue (sequence coordinate, start <= end)
        color: Fill color
        text: Short label (e.g. 'P53_TAD')
        description: Optional long description
        link: Optional link, absolute or relative to the style link prefix
    """
    start: int
    end: int
    color: str
    text: str = ''
    description: str = ''
    link: Optional[str] = None

    @property
    def size(self) -> int:
        """Length of the region in residues"""
        return self.end - self.start


@dataclass(frozen=True)
class Motif:
    """
    Secondary annotation span (transmembrane, coiled-coil, disorder, ...)

    Attributes:
        start: First residue
        end: Last residue
        type: Motif type name
        color: Fill color before blending with white
    """
    start: int
    end: int
    type: str
    color: str = '#000000'

    @property
    def is_disordered(self) -> bool:
        """Whether this motif is a disordered region"""
        return self.type == DISORDER_MOTIF


@dataclass(frozen=True)
class ProteinGraphic:
    """
    Annotation track for one protein

    Attributes:
        length: Sequence length (residues)
        regions: Curated domains
        motifs: Secondary motifs
        identifier: Protein identifier used in the backbone tooltip
        description: Protein description used in the backbone tooltip
    """
    length: int
    regions: List[Region] = field(default_factory=list)
    motifs: List[Motif] = field(default_factory=list)
    identifier: str = ''
    description: str = ''


@dataclass(frozen=True)
class MutationDescriptor:
    """
    Parsed mutation change string

    Attributes:
        label: Display label with count/color suffixes removed (e.g. 'R273C')
        position: Residue position
        count: Number of observations
        color: Normalized (lowercase) head color
    """
    label: str
    position: int
    count: int = 1
    color: str = ''


# Raw JSON records (Pfam graphic format)

class PfamMetadata(TypedDict, total=False):
    """Metadata block of a Pfam graphic record"""
    identifier: str
    description: str
    accession: str


class PfamRegionRecord(TypedDict, total=False):
    """Domain entry of a Pfam graphic record"""
    start: Union[int, str]
    end: Union[int, str]
    color: str
    text: str
    href: str
    metadata: PfamMetadata


class PfamMotifRecord(TypedDict, total=False):
    """Motif entry of a Pfam graphic record"""
    start: Union[int, str]
    end: Union[int, str]
    color: str
    type: str


class PfamGraphicRecord(TypedDict, total=False):
    """Pfam graphic record as served by the Pfam API"""
    length: Union[int, str]
    regions: List[PfamRegionRecord]
    motifs: List[PfamMotifRecord]
    metadata: PfamMetadata
