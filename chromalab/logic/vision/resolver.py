#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/vision/resolver.py

import argparse
import random

from chromalab.core import config as c
from chromalab.core.conversions import hex_to_rgb, rgb_to_hex
from chromalab.shared.logger import fail
from chromalab.shared.naming import get_title_for_hex
from .engine import simulate_cvd
from .renderer import render_vision


def resolve_vision_input(args: argparse.Namespace) -> None:
    if args.random:
        rng = random.Random(args.seed)
        base_hex, title = f"#{rng.randint(0, c.MAX_DEC):06x}", "random"
    elif args.hex:
        base_hex, title = args.hex, get_title_for_hex(args.hex)
    else:
        fail("one of the arguments -H/--hex -r/--random is required")

    kinds = [args.type] if args.type else [k for k in c.CVD_MATRICES if k != "normal"]
    rgb = hex_to_rgb(base_hex)
    results = [(kind, rgb_to_hex(*simulate_cvd(rgb, kind, args.intensity))) for kind in kinds]
    render_vision(base_hex, title, results, args.intensity)
