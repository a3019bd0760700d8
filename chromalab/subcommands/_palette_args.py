#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/_palette_args.py

import argparse

from chromalab.core import config as c
from chromalab.shared.sanitizer import INPUT_HANDLERS


def add_palette_arguments(parser: argparse.ArgumentParser) -> None:
    """Palette input options shared by commands that derive from a palette."""
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["color"],
        help="palette color; use -H multiple times",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["harmony_mode"],
        default="analogous",
        help="harmony mode used when no colors are given (default: analogous)",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=5,
        help=f"palette size used when no colors are given (default: 5, max: {c.MAX_COUNT})",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
