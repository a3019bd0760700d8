#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/scale/resolver.py

import argparse
import random

from chromalab.core import config as c
from chromalab.shared.logger import fail
from .engine import generate_scale
from .renderer import render_scale


def resolve_scale_input(args: argparse.Namespace) -> None:
    if args.random:
        rng = random.Random(args.seed)
        base_hex = f"#{rng.randint(0, c.MAX_DEC):06x}"
    elif args.hex:
        base_hex = args.hex
    else:
        fail("one of the arguments -H/--hex -r/--random is required")

    render_scale(base_hex, generate_scale(base_hex), css_prefix=args.css)
