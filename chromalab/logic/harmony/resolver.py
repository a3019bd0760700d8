#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/harmony/resolver.py

import argparse
import random

from chromalab.core.models import hex_to_stop
from .engine import generate, list_modes
from .renderer import render_mode_list, render_palette
from .scoring import score_palette


def resolve_palette_input(args: argparse.Namespace) -> None:
    """Generate a harmony palette from CLI arguments and print it."""
    if args.list_modes:
        render_mode_list(list_modes())
        return

    rng = random.Random(args.seed)
    seeds = [hex_to_stop(h) for h in (args.hex or [])]
    colors = generate(args.mode, args.count, seeds=seeds, rng=rng)
    score = score_palette(colors) if args.score else None
    render_palette(args.mode, colors, score)
