#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/palette.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.logic.harmony.resolver import resolve_palette_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = ChromalabArgumentParser(
        prog="chromalab palette",
        description="chromalab palette: generate a harmonic color palette",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["harmony_mode"],
        default="analogous",
        help="harmony mode (default: analogous, see --list-modes)",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=5,
        help=f"number of colors (default: 5, max: {c.MAX_COUNT})",
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["color"],
        help="seed color; use -H multiple times to keep several seeds",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "--score",
        action="store_true",
        help="rate the palette on balance, accessibility, harmony and uniqueness",
    )
    parser.add_argument(
        "--list-modes",
        action="store_true",
        help="list harmony modes and exit",
    )
    return parser


def main() -> None:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_palette_input(args)


if __name__ == "__main__":
    main()
