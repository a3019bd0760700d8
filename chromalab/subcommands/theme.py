#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/theme.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.logic.theme.resolver import resolve_theme_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from ._palette_args import add_palette_arguments


def get_theme_parser() -> argparse.ArgumentParser:
    """Create argument parser for theme command."""
    parser = ChromalabArgumentParser(
        prog="chromalab theme",
        description="chromalab theme: light and dark design tokens derived from a palette",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_palette_arguments(parser)
    parser.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["export_format"],
        default=None,
        help=f"export format: {', '.join(c.EXPORT_FORMAT_KEYS)} (default: preview)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="write the export to a file instead of stdout",
    )
    return parser


def main() -> None:
    """Main entry point for theme command."""
    parser = get_theme_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_theme_input(args)


if __name__ == "__main__":
    main()
