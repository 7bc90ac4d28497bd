"""
Command-line interface for hivmap.

Usage:
    hivmap -i <input.txt> [-pdf <output.pdf>] [-png <output.png>]

Example:
    hivmap -i data.txt -pdf out.pdf -png out.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .colors import ColorRegistry
from .parser import RegionInputError, read_regions
from .plot.export import save_pdf, save_png

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hivmap",
        description="Draw an HIV-1 genome map colored by recombinant subtype regions.",
    )
    parser.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="Region file: '>' header line followed by 'start end subtype' lines",
    )
    parser.add_argument(
        "-png", "--png",
        type=Path,
        default=None,
        help="PNG output path (900x300 px, 300 DPI tag)",
    )
    parser.add_argument(
        "-pdf", "--pdf",
        type=Path,
        default=None,
        help="PDF output path",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug messages",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only show warnings and errors",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.png is None and args.pdf is None:
        parser.error("at least one output format is required (-pdf or -png)")

    _configure_logging(args)

    if not args.input.is_file():
        logger.error("Input file not found: %s", args.input)
        return 1

    try:
        logger.info("Reading input: %s", args.input)
        regions = read_regions(args.input, ColorRegistry())
        logger.info("Parsed %d regions", len(regions))

        if args.png is not None:
            save_png(regions, args.png)
        if args.pdf is not None:
            save_pdf(regions, args.pdf)
    except RegionInputError as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:
        logger.error("Failed to render map: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
