#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/mix.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.logic.mix.resolver import resolve_mix_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_mix_parser() -> argparse.ArgumentParser:
    """Create argument parser for mix command."""
    parser = ChromalabArgumentParser(
        prog="chromalab mix",
        description="chromalab mix: blend two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["color"],
        help="use -H twice for the two inputs",
    )
    parser.add_argument(
        "-t",
        "--ratio",
        type=INPUT_HANDLERS["float_0_1"],
        default=0.5,
        help="share of the second color: 0 to 1 (default: 0.5)",
    )
    parser.add_argument(
        "-cs",
        "--colorspace",
        type=INPUT_HANDLERS["mix_space"],
        default="oklab",
        help=f"mixing space: {', '.join(c.MIX_SPACES)} (default: oklab)",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=None,
        help=f"show a blend ramp with this many steps (max: {c.MAX_STEPS})",
    )
    return parser


def main() -> None:
    """Main entry point for mix command."""
    parser = get_mix_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_mix_input(args)


if __name__ == "__main__":
    main()
