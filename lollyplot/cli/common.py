"""Shared argument handling for the draw and layout subcommands"""

from __future__ import annotations
from typing import List, Tuple
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace

from ..config import PlotConfig
from ..data import EXAMPLE_TP53_GRAPHIC
from ..io import GraphicReader, UniProtReader, read_mutations
from ..types import ProteinGraphic

logger = logging.getLogger(__name__)


def add_input_arguments(parser: ArgumentParser) -> None:
    """
    Add annotation, mutation and layout arguments

    Args:
        parser: Subcommand parser
    """
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--graphic', metavar='JSON',
                        help='Pfam graphic JSON file (default: bundled TP53 example)')
    source.add_argument('--uniprot', metavar='FILE',
                        help='UniProt entry (Swiss-Prot text, or XML with --uniprot-format uniprot-xml)')
    source.add_argument('--features', metavar='TABLE',
                        help='Feature table (start, end, label, color, ...); requires --length')
    parser.add_argument('--uniprot-format', choices=['swiss', 'uniprot-xml'], default='swiss',
                        help='Format of the --uniprot file (default: swiss)')
    parser.add_argument('--length', type=int,
                        help='Sequence length for --features')

    # Mutations
    parser.add_argument('mutations', nargs='*', metavar='CHANGE',
                        help="Mutation changes, e.g. R273C, G245S@3, R175H#00aa00")
    parser.add_argument('-m', '--mutations-file', metavar='FILE',
                        help='File with one change per line, or a table with a "change" column')

    # Layout
    parser.add_argument('--preset', choices=['default', 'publication', 'compact', 'labeled'],
                        default='default', help='Configuration preset (default: default)')
    parser.add_argument('-w', '--width', type=float, default=None,
                        help='Diagram width in px (0 = automatic, default: automatic)')
    parser.add_argument('--labels', action='store_true', help='Draw mutation labels')
    parser.add_argument('--hide-axis', action='store_true', help='Do not draw the coordinate axis')
    parser.add_argument('--hide-motifs', action='store_true', help='Do not draw motifs')
    parser.add_argument('--hide-disordered', action='store_true', help='Do not draw disordered regions')
    parser.add_argument('--no-patterns', action='store_true',
                        help='Use solid fills instead of hatch patterns')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def configure_logging(args: Namespace) -> None:
    """Configure logging for a subcommand run"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def build_config(args: Namespace) -> PlotConfig:
    """
    Build the plot configuration from a preset and flags

    Args:
        args: Parsed command-line arguments

    Returns:
        PlotConfig for this run
    """
    config = PlotConfig.preset(args.preset)
    if args.width is not None:
        if args.width < 0:
            raise ValueError(f"Width must be >= 0, got {args.width}")
        config.layout.graphic_width = args.width
    if args.labels:
        config.layout.show_labels = True
    if args.hide_axis:
        config.layout.hide_axis = True
    if args.hide_motifs:
        config.layout.hide_motifs = True
    if args.hide_disordered:
        config.layout.hide_disordered = True
    if args.no_patterns:
        config.layout.solid_fill_only = True
    if getattr(args, 'dpi', None):
        config.dpi = args.dpi
    return config


def _require_file(path: str, what: str) -> None:
    if not Path(path).exists():
        raise FileNotFoundError(f"{what} not found: {path}")


def load_inputs(args: Namespace) -> Tuple[ProteinGraphic, List[str]]:
    """
    Load the annotation track and mutation changes

    Args:
        args: Parsed command-line arguments

    Returns:
        Tuple of (graphic, change strings)
    """
    if args.uniprot:
        _require_file(args.uniprot, "UniProt entry")
        graphic = UniProtReader.load(args.uniprot, args.uniprot_format)
    elif args.features:
        _require_file(args.features, "Feature table")
        if not args.length:
            raise ValueError("--features requires --length")
        graphic = GraphicReader.from_table(args.features, args.length)
    else:
        graphic_file = args.graphic or EXAMPLE_TP53_GRAPHIC
        if not args.graphic:
            logger.info("No annotation given, using bundled TP53 example")
        _require_file(graphic_file, "Graphic file")
        graphic = GraphicReader.from_json(graphic_file)

    changes: List[str] = list(args.mutations)
    if args.mutations_file:
        _require_file(args.mutations_file, "Mutations file")
        changes.extend(read_mutations(args.mutations_file))

    logger.info(f"Annotation: {graphic.identifier or 'custom'} ({graphic.length}aa), "
                f"{len(graphic.regions)} domains, {len(graphic.motifs)} motifs")
    logger.info(f"Mutations: {len(changes)}")
    return graphic, changes
