#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gradient/resolver.py

import argparse

from chromalab.core import config as c
from chromalab.shared.logger import fail, log
from .engine import GradientStop, build_gradient_css, even_stops, gradient_ramp, sort_stops
from .renderer import render_gradient


def resolve_gradient_input(args: argparse.Namespace) -> None:
    if args.stop:
        stops = [GradientStop(hex_code, pos) for hex_code, pos in args.stop]
    else:
        stops = even_stops(args.hex or [])

    if len(stops) < 2:
        log("info", "use -H COLOR or --stop COLOR@POS at least twice")
        fail("a gradient needs at least two colors")

    stops = sort_stops(stops)
    css = build_gradient_css(stops, args.kind, args.direction, args.colorspace)
    ramp = gradient_ramp(stops, c.GRADIENT_PREVIEW_WIDTH, args.colorspace)
    render_gradient(stops, ramp, css)
