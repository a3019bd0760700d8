#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/vision.py

import argparse
import sys

from chromalab.logic.vision.resolver import resolve_vision_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_vision_parser() -> argparse.ArgumentParser:
    """Create argument parser for vision command."""
    parser = ChromalabArgumentParser(
        prog="chromalab vision",
        description="chromalab vision: simulate color vision deficiencies",
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
        "-t",
        "--type",
        type=INPUT_HANDLERS["cvd_type"],
        default=None,
        help="protanopia, deuteranopia, tritanopia, achromatopsia or deuteranomaly (default: all)",
    )
    parser.add_argument(
        "-i",
        "--intensity",
        type=INPUT_HANDLERS["float_0_1"],
        default=1.0,
        help="simulation intensity: 0 to 1 (default: 1)",
    )
    return parser


def main() -> None:
    """Main entry point for vision command."""
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_vision_input(args)


if __name__ == "__main__":
    main()
