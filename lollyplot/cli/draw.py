"""Draw subcommand - render a lollipop diagram"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..drawing import RasterWriter, RenderPipeline, SVGWriter
from .common import add_input_arguments, build_config, configure_logging, load_inputs

logger = logging.getLogger(__name__)

RASTER_SUFFIXES = {'.png', '.pdf', '.jpg', '.jpeg', '.tif', '.tiff'}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add draw subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for draw subcommand
    """
    parser = subparsers.add_parser(
        'draw',
        help='Render a lollipop diagram (SVG, PNG or PDF)'
    )
    parser.add_argument('-o', '--output', default='lollipops.svg',
                        help='Output file; format from extension (default: lollipops.svg)')
    parser.add_argument('--dpi', type=int, default=None,
                        help='Resolution for raster output (default: preset DPI)')
    add_input_arguments(parser)

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute draw subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)

    output = Path(args.output)
    suffix = output.suffix.lower()
    if suffix != '.svg' and suffix not in RASTER_SUFFIXES:
        raise ValueError(f"Unsupported output format: {suffix or '(none)'}. "
                         f"Use .svg or one of {', '.join(sorted(RASTER_SUFFIXES))}")

    config = build_config(args)
    graphic, changes = load_inputs(args)

    logger.info(f"Output: {output}")
    logger.info("Generating plot...")
    pipeline = RenderPipeline(config)
    drawing = pipeline.render(graphic, changes)

    if suffix == '.svg':
        SVGWriter(config).write(drawing, output)
    else:
        RasterWriter(config).write(drawing, output)

    logger.info(f"✓ Plot saved: {output}")
