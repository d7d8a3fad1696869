"""Layout subcommand - write lollipop and axis positions as a table"""

from __future__ import annotations
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..io import write_layout_table
from ..layout import LayoutEngine
from .common import add_input_arguments, build_config, configure_logging, load_inputs

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute the diagram layout and write it as TSV'
    )
    parser.add_argument('-o', '--output', default='lollipops.layout.tsv',
                        help='Output TSV file (default: lollipops.layout.tsv)')
    add_input_arguments(parser)

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)

    config = build_config(args)
    graphic, changes = load_inputs(args)

    layout = LayoutEngine(config).calculate_layout(graphic, changes)
    write_layout_table(layout, args.output)

    logger.info(f"{layout.n_lollipops} lollipops ({layout.total_mutations} mutations), "
                f"{len(layout.axis_ticks)} axis ticks, canvas {layout.width:.0f}x{layout.height:.0f}px")
