#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/scale.py

import argparse
import sys

from chromalab.logic.scale.resolver import resolve_scale_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_scale_parser() -> argparse.ArgumentParser:
    """Create argument parser for scale command."""
    parser = ChromalabArgumentParser(
        prog="chromalab scale",
        description="chromalab scale: 50-950 tint and shade scale of one color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["color"],
        help="base color",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random base",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "--css",
        metavar="NAME",
        default=None,
        help="print CSS custom properties named --NAME-50 ... --NAME-950",
    )
    return parser


def main() -> None:
    """Main entry point for scale command."""
    parser = get_scale_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_scale_input(args)


if __name__ == "__main__":
    main()
