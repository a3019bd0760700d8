#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/extract.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.logic.extract.resolver import resolve_extract_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_extract_parser() -> argparse.ArgumentParser:
    """Create argument parser for extract command."""
    parser = ChromalabArgumentParser(
        prog="chromalab extract",
        description="chromalab extract: dominant colors of an image (median cut)",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--image",
        required=True,
        help="path to a PNG, JPEG, GIF or WebP image",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=c.EXTRACT_DEFAULT_COUNT,
        help=f"maximum number of colors (default: {c.EXTRACT_DEFAULT_COUNT}, max: {c.MAX_COUNT})",
    )
    parser.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="print one hex code per line, without swatches",
    )
    return parser


def main() -> None:
    """Main entry point for extract command."""
    parser = get_extract_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_extract_input(args)


if __name__ == "__main__":
    main()
