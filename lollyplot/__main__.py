"""
LollyPlot CLI

Command-line interface with subcommands for drawing and layout export.
"""

import argparse
import sys
from .cli import draw, layout


def main():
    parser = argparse.ArgumentParser(
        prog='lollyplot',
        description='LollyPlot: lollipop diagrams of protein mutations'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    draw.add_parser(subparsers)
    layout.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'draw':
        draw.run(args)
    elif args.command == 'layout':
        layout.run(args)


if __name__ == "__main__":
    main()
