#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/utility/resolver.py

import argparse
import random
from typing import List

from chromalab.core.models import ColorStop, hex_to_stop
from chromalab.logic.harmony.engine import generate
from chromalab.shared.logger import log
from .engine import generate_utility_colors, set_utility_color
from .renderer import render_utility


def resolve_palette_colors(args: argparse.Namespace) -> List[ColorStop]:
    """
    Palette from -H colors, or a generated one when none are given.
    Shared by the utility and theme commands.
    """
    if args.hex:
        return [hex_to_stop(h) for h in args.hex]
    rng = random.Random(args.seed)
    log("info", f"no colors given, generating a {args.mode} palette")
    return generate(args.mode, args.count, rng=rng)


def resolve_utility_input(args: argparse.Namespace) -> None:
    palette = resolve_palette_colors(args)
    utility = generate_utility_colors(palette)
    for role, hex_code in args.lock or []:
        utility = set_utility_color(utility, role, hex_to_stop(hex_code))
    render_utility(palette, utility)
