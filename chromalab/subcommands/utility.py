#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/utility.py

import argparse
import sys

from chromalab.logic.utility.resolver import resolve_utility_input
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from ._palette_args import add_palette_arguments


def get_utility_parser() -> argparse.ArgumentParser:
    """Create argument parser for utility command."""
    parser = ChromalabArgumentParser(
        prog="chromalab utility",
        description="chromalab utility: info, success, warning, error, neutral and focus colors for a palette",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_palette_arguments(parser)
    parser.add_argument(
        "-L",
        "--lock",
        action="append",
        type=INPUT_HANDLERS["role_assignment"],
        metavar="ROLE=COLOR",
        help="pin a role to a color, e.g. --lock error=#d92d20",
    )
    return parser


def main() -> None:
    """Main entry point for utility command."""
    parser = get_utility_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_utility_input(args)


if __name__ == "__main__":
    main()
