#!/usr/bin/env python3
# src/sdfconv/cli/convert.py

"""Command-line interface for SDF conversion."""

import argparse
import logging
import sys
from typing import List, Optional

from .. import __version__
from ..config import ConversionConfig
from ..dispatcher import convert
from ..formats import OutputFormat

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so output streams stay clean."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def validate_format(value: str) -> OutputFormat:
    """Argparse type converting a mode name to an OutputFormat."""
    try:
        return OutputFormat.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="sdfconv",
        description="Convert SDF chemical table files to other formats",
    )
    parser.add_argument(
        "-i", "--input", required=True, help="Input SDF file ('-' for standard input)"
    )
    parser.add_argument(
        "-f",
        "--format",
        required=True,
        type=validate_format,
        metavar="FORMAT",
        help=f"Output format: {', '.join(OutputFormat.names())}",
    )
    parser.add_argument(
        "-u",
        "--urls",
        action="store_true",
        help="Expand database cross-references into URLs",
    )
    parser.add_argument(
        "-p",
        "--periodic",
        action="store_true",
        help="Add periodic table attributes to atom nodes (cypher only)",
    )
    parser.add_argument(
        "-o", "--output", default=None, help="Output file (default: standard output)"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a line counter on stderr"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sdfconv CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = ConversionConfig(
        input_path=args.input,
        output_format=args.format,
        expand_urls=args.urls,
        periodic=args.periodic,
    )

    try:
        if args.output:
            newline = "" if config.output_format.binary else None
            with open(args.output, "w", encoding="utf-8", newline=newline) as out:
                convert(config, out, progress=args.progress)
        else:
            convert(config, sys.stdout, progress=args.progress)
    except (ImportError, OSError, ValueError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
