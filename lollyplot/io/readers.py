"""
I/O Readers

Handles reading of annotation tracks and mutation lists.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from io import StringIO
import json
import logging

import pandas as pd
from Bio import SeqIO

from ..fonts import normalize_color, palette_color
from ..types import (
    DISORDER_MOTIF,
    Motif,
    PathLike,
    PfamGraphicRecord,
    ProteinGraphic,
    Region,
)

logger = logging.getLogger(__name__)

DEFAULT_MOTIF_COLOR = '#000000'


def _to_int(value: Any) -> int:
    """Coordinates in Pfam JSON may be numbers or numeric strings"""
    return int(float(value))


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))


class GraphicReader:
    """Reads annotation tracks from Pfam graphic JSON or feature tables"""

    @staticmethod
    def from_record(record: PfamGraphicRecord) -> ProteinGraphic:
        """
        Build a ProteinGraphic from a parsed Pfam graphic record

        Args:
            record: Dict with 'length', 'regions', 'motifs', 'metadata'

        Returns:
            ProteinGraphic
        """
        if 'length' not in record:
            raise ValueError("Graphic record has no 'length'")

        regions: List[Region] = []
        for i, entry in enumerate(record.get('regions', [])):
            metadata = entry.get('metadata', {})
            regions.append(Region(
                start=_to_int(entry['start']),
                end=_to_int(entry['end']),
                color=normalize_color(entry.get('color') or palette_color(i)),
                text=entry.get('text', ''),
                description=metadata.get('description', ''),
                link=entry.get('href'),
            ))

        motifs: List[Motif] = []
        for entry in record.get('motifs', []):
            motifs.append(Motif(
                start=_to_int(entry['start']),
                end=_to_int(entry['end']),
                type=entry.get('type', ''),
                color=normalize_color(entry.get('color') or DEFAULT_MOTIF_COLOR),
            ))

        metadata = record.get('metadata', {})
        return ProteinGraphic(
            length=_to_int(record['length']),
            regions=regions,
            motifs=motifs,
            identifier=metadata.get('identifier', ''),
            description=metadata.get('description', ''),
        )

    @staticmethod
    def from_json(json_file: PathLike) -> ProteinGraphic:
        """
        Load a Pfam graphic JSON file

        The Pfam API wraps graphics in a list; the first entry is used.

        Args:
            json_file: Path to the JSON file

        Returns:
            ProteinGraphic
        """
        with open(json_file, 'r') as f:
            data = json.load(f)
        if isinstance(data, list):
            if not data:
                raise ValueError(f"No graphic records in {json_file}")
            if len(data) > 1:
                logger.warning(f"{json_file} holds {len(data)} graphics, using the first")
            data = data[0]
        graphic = GraphicReader.from_record(data)
        logger.debug(f"Loaded graphic with {len(graphic.regions)} regions and "
                     f"{len(graphic.motifs)} motifs from {json_file}")
        return graphic

    @staticmethod
    def from_table(table_file: PathLike, length: int, identifier: str = '', description: str = '') -> ProteinGraphic:
        """
        Load features from a delimited table

        Expected columns: start, end, label (or text); optional color,
        description, link, kind. Rows whose kind is 'region' (the default)
        become domains; any other kind becomes a motif of that type.

        Args:
            table_file: Path to TSV/CSV file (separator is sniffed)
            length: Sequence length
            identifier: Protein identifier for tooltips
            description: Protein description for tooltips

        Returns:
            ProteinGraphic
        """
        features = pd.read_csv(table_file, sep=None, engine='python')
        features.columns = [str(c).strip().lower() for c in features.columns]
        if 'text' in features.columns and 'label' not in features.columns:
            features = features.rename(columns={'text': 'label'})

        missing = {'start', 'end'} - set(features.columns)
        if missing:
            raise ValueError(f"Feature table {table_file} lacks columns: {', '.join(sorted(missing))}")

        regions: List[Region] = []
        motifs: List[Motif] = []
        for _, row in features.iterrows():
            kind = row.get('kind')
            kind = 'region' if _is_missing(kind) else str(kind).strip().lower()
            color = row.get('color')
            if kind == 'region':
                regions.append(Region(
                    start=_to_int(row['start']),
                    end=_to_int(row['end']),
                    color=normalize_color(palette_color(len(regions)) if _is_missing(color) else str(color)),
                    text='' if _is_missing(row.get('label')) else str(row['label']),
                    description='' if _is_missing(row.get('description')) else str(row['description']),
                    link=None if _is_missing(row.get('link')) else str(row['link']),
                ))
            else:
                motifs.append(Motif(
                    start=_to_int(row['start']),
                    end=_to_int(row['end']),
                    type=kind,
                    color=normalize_color(DEFAULT_MOTIF_COLOR if _is_missing(color) else str(color)),
                ))

        logger.debug(f"Loaded {len(regions)} regions and {len(motifs)} motifs from {table_file}")
        return ProteinGraphic(length=length, regions=regions, motifs=motifs,
                              identifier=identifier, description=description)


class UniProtReader:
    """Reads domains and motifs from UniProt entries via Bio.SeqIO"""

    REGION_FEATURES = {
        'domain', 'zn_fing', 'zinc finger region', 'repeat', 'dna_bind', 'dna-binding region',
    }
    """Feature types drawn as curated domains"""

    MOTIF_FEATURES: Dict[str, str] = {
        'transmem': 'transmembrane',
        'transmembrane region': 'transmembrane',
        'intramem': 'transmembrane',
        'signal': 'sig_p',
        'signal peptide': 'sig_p',
        'coiled': 'coiled_coil',
        'coiled-coil region': 'coiled_coil',
        'compbias': 'low_complexity',
        'compositionally biased region': 'low_complexity',
    }
    """Feature types drawn as motifs, mapped to motif type names"""

    MOTIF_COLORS: Dict[str, str] = {
        'transmembrane': '#ff0000',
        'sig_p': '#4169e1',
        'coiled_coil': '#32cd32',
        'low_complexity': '#00ffff',
        DISORDER_MOTIF: '#cccccc',
    }

    @staticmethod
    def _qualifier(feature, *keys: str) -> str:
        for key in keys:
            value = feature.qualifiers.get(key)
            if isinstance(value, (list, tuple)):
                value = value[0] if value else None
            if value:
                return str(value)
        return ''

    @classmethod
    def load(cls, entry_file: PathLike, fmt: str = 'swiss') -> ProteinGraphic:
        """
        Load a UniProt entry

        Args:
            entry_file: Swiss-Prot text ('swiss') or UniProt XML ('uniprot-xml')
            fmt: Bio.SeqIO format name

        Returns:
            ProteinGraphic with domains, motifs and disordered regions
        """
        record = next(SeqIO.parse(str(entry_file), fmt), None)
        if record is None:
            raise ValueError(f"No {fmt} records in {entry_file}")

        regions: List[Region] = []
        motifs: List[Motif] = []
        for feature in record.features:
            if feature.location is None:
                continue
            try:
                start = int(feature.location.start) + 1
                end = int(feature.location.end)
            except (TypeError, ValueError):
                logger.debug(f"Skipping feature {feature.type} with unknown bounds")
                continue

            ftype = feature.type.lower()
            note = cls._qualifier(feature, 'note', 'description')
            if ftype in cls.REGION_FEATURES:
                regions.append(Region(
                    start=start,
                    end=end,
                    color=palette_color(len(regions)),
                    text=note or feature.type,
                    description=note,
                ))
            elif ftype in cls.MOTIF_FEATURES:
                mtype = cls.MOTIF_FEATURES[ftype]
                motifs.append(Motif(start=start, end=end, type=mtype, color=cls.MOTIF_COLORS[mtype]))
            elif ftype in ('region', 'region of interest') and note.lower().startswith('disordered'):
                motifs.append(Motif(start=start, end=end, type=DISORDER_MOTIF,
                                    color=cls.MOTIF_COLORS[DISORDER_MOTIF]))

        description = record.description or ''
        logger.info(f"Loaded {record.id}: {len(record.seq)}aa, {len(regions)} domains, {len(motifs)} motifs")
        return ProteinGraphic(
            length=len(record.seq),
            regions=regions,
            motifs=motifs,
            identifier=record.name or record.id,
            description=description,
        )


def read_mutations(mutation_file: PathLike) -> List[str]:
    """
    Read mutation change strings

    Accepts one change per line, or a delimited table with a 'change'
    column and an optional 'count' column. Blank lines and lines starting
    with '#' are ignored.

    Args:
        mutation_file: Path to the mutation list

    Returns:
        Change strings in file order
    """
    with open(mutation_file, 'r') as f:
        lines = [line.strip() for line in f]
    lines = [line for line in lines if line and not line.startswith('#')]
    if not lines:
        return []

    header = lines[0].lower()
    sep = ',' if ',' in header and '\t' not in header else '\t'
    if 'change' in [field.strip() for field in header.split(sep)]:
        table = pd.read_csv(StringIO('\n'.join(lines)), sep=sep)
        table.columns = [str(c).strip().lower() for c in table.columns]
        table = table.dropna(subset=['change'])
        changes: List[str] = []
        for _, row in table.iterrows():
            change = str(row['change']).strip()
            count: Optional[Any] = row.get('count')
            if not _is_missing(count) and '@' not in change:
                change = f"{change}@{int(count)}"
            changes.append(change)
        logger.debug(f"Read {len(changes)} changes from table {mutation_file}")
        return changes

    logger.debug(f"Read {len(lines)} changes from {mutation_file}")
    return lines
