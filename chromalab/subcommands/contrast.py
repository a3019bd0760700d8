#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/contrast.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.logic.contrast.resolver import resolve_contrast_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ChromalabArgumentParser(
        prog="chromalab contrast",
        description="chromalab contrast: WCAG and APCA contrast of text on a background",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="text color",
    )
    parser.add_argument(
        "-bg",
        "--background",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="background color",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=INPUT_HANDLERS["contrast_target"],
        default=c.WCAG_AA_NORMAL,
        help=f"target ratio for the suggested fix (default: {c.WCAG_AA_NORMAL})",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_contrast_input(args)


if __name__ == "__main__":
    main()
