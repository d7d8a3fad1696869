"""
Mutation descriptor parser

Turns change strings such as 'R273C', 'G245S@3' or 'R175H#00aa00' into
MutationDescriptor records.

Syntax: <wild><pos><mut>[@count][#RRGGBB]
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import re
import logging

from Bio.SeqUtils import seq1

from .config import StyleConfig
from .fonts import normalize_color
from .types import MutationDescriptor

logger = logging.getLogger(__name__)

CHANGE_POSITION = re.compile(r'^(\D*)(\d+)(\D*)')
"""Wild-type residue(s), position, mutant residue(s)"""


class MutationParseError(ValueError):
    """Raised for change strings that carry no position or a bad count"""


def _residue_code(residues: str) -> str:
    """One-letter code for a residue token, accepting three-letter names"""
    if residues.startswith('p.'):
        residues = residues[2:]
    if len(residues) == 3 and residues.isalpha():
        return seq1(residues)
    return residues.upper()


def is_synonymous(wild: str, mutant: str) -> bool:
    """
    Check whether a change keeps the wild-type residue

    Args:
        wild: Residue token before the position (e.g. 'R', 'Arg', 'p.R')
        mutant: Residue token after the position (e.g. 'C', '=', '')

    Returns:
        True for empty, '=' or identical mutant residues
    """
    if mutant in ('', '='):
        return True
    return _residue_code(wild) == _residue_code(mutant)


def parse_mutation(change: str, style: Optional[StyleConfig] = None) -> MutationDescriptor:
    """
    Parse a single change string

    Args:
        change: Raw change string
        style: Style configuration providing default colors

    Returns:
        MutationDescriptor with normalized color

    Raises:
        MutationParseError: if the string has no position or a bad count
    """
    style = style or StyleConfig()
    label = change.strip()
    count = 1
    color: Optional[str] = None

    if '@' in label:
        label, count_text = label.split('@', 1)
        count_match = re.match(r'\s*(\d+)', count_text)
        if not count_match:
            raise MutationParseError(f"Invalid count in change '{change}'")
        count = int(count_match.group(1))
        # a color may follow the count
        if '#' in count_text:
            color = '#' + count_text.split('#', 1)[1]

    if '#' in label:
        label, color_text = label.split('#', 1)
        color = '#' + color_text

    match = CHANGE_POSITION.match(label)
    if not match:
        raise MutationParseError(f"No residue position in change '{change}'")
    wild, position, mutant = match.groups()

    if color is None:
        color = style.synonymous_color if is_synonymous(wild, mutant) else style.mutation_color

    return MutationDescriptor(
        label=label,
        position=int(position),
        count=count,
        color=normalize_color(color),
    )


def parse_mutations(changes: Iterable[str], style: Optional[StyleConfig] = None) -> List[MutationDescriptor]:
    """
    Parse change strings in order

    Args:
        changes: Raw change strings (blank entries are skipped)
        style: Style configuration providing default colors

    Returns:
        List of MutationDescriptor
    """
    descriptors: List[MutationDescriptor] = []
    for change in changes:
        if not change or not change.strip():
            continue
        descriptors.append(parse_mutation(change, style))
    logger.debug(f"Parsed {len(descriptors)} mutation descriptors")
    return descriptors
