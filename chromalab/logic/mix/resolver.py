#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/mix/resolver.py

import argparse

from chromalab.core.conversions import hex_to_rgb, rgb_to_hex
from chromalab.shared.logger import fail, log
from .engine import mix, mix_steps
from .renderer import render_mix


def resolve_mix_input(args: argparse.Namespace) -> None:
    if not args.hex or len(args.hex) != 2:
        log("info", "use -H HEX twice, e.g. chromalab mix -H ff0000 -H 0000ff")
        fail("exactly two colors are required for mixing")

    c1, c2 = (hex_to_rgb(h) for h in args.hex)
    if args.steps and args.steps > 1:
        colors = [rgb_to_hex(*rgb) for rgb in mix_steps(c1, c2, args.steps, args.colorspace)]
    else:
        colors = [rgb_to_hex(*mix(c1, c2, args.ratio, args.colorspace))]
    render_mix(args.hex, colors, args.colorspace)
