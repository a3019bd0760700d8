#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/gradient.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.logic.gradient.resolver import resolve_gradient_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_gradient_parser() -> argparse.ArgumentParser:
    """Create argument parser for gradient command."""
    parser = ChromalabArgumentParser(
        prog="chromalab gradient",
        description="chromalab gradient: multi-stop CSS gradients with a terminal preview",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    stops = parser.add_mutually_exclusive_group()
    stops.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["color"],
        help="use -H COLOR several times; stops are spread evenly",
    )
    stops.add_argument(
        "--stop",
        action="append",
        type=INPUT_HANDLERS["gradient_stop"],
        metavar="COLOR@POS",
        help="stop at an explicit position in percent, e.g. --stop '#ff0000@25'",
    )
    parser.add_argument(
        "-k",
        "--kind",
        type=INPUT_HANDLERS["gradient_kind"],
        default="linear",
        help=f"gradient kind: {', '.join(c.GRADIENT_KINDS)} (default: linear)",
    )
    parser.add_argument(
        "-d",
        "--direction",
        default=None,
        help=(
            f"linear direction or conic start, e.g. '135deg' "
            f"(default: '{c.GRADIENT_DEFAULT_DIRECTION}' / '{c.GRADIENT_CONIC_DEFAULT}')"
        ),
    )
    parser.add_argument(
        "-cs",
        "--colorspace",
        type=INPUT_HANDLERS["gradient_space"],
        default="srgb",
        help=f"interpolation space: {', '.join(c.GRADIENT_SPACES)} (default: srgb)",
    )
    return parser


def main() -> None:
    """Main entry point for gradient command."""
    parser = get_gradient_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_gradient_input(args)


if __name__ == "__main__":
    main()
