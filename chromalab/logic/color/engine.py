#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/color/engine.py

import argparse
from typing import Any, Dict

from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.core.contrast import WHITE, BLACK, apca_contrast, get_wcag_contrast, text_color
from chromalab.core.gamut import max_chroma
from chromalab.core.luminance import get_luminance
from chromalab.shared.naming import nearest_name
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color inspector."""
    if getattr(args, "all_tech_infos", False):
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    base_hex, title = resolve_color_input(args)
    r, g, b = conv.hex_to_rgb(base_hex)
    l_rel = get_luminance(r, g, b)

    contrast_data = None
    if getattr(args, "contrast", False):
        contrast_data = get_contrast_data((r, g, b), l_rel)

    render_color_info(
        hex_code=base_hex,
        title=title,
        args=args,
        rgb=(r, g, b),
        luminance=l_rel,
        tech_data=get_color_data(r, g, b, args),
        contrast_data=contrast_data,
    )


def get_contrast_data(rgb, lum: float) -> Dict[str, Any]:
    data = get_wcag_contrast(lum)
    data["white"]["apca"] = apca_contrast(WHITE, rgb)
    data["black"]["apca"] = apca_contrast(BLACK, rgb)
    data["text"] = text_color(rgb)
    return data


def get_color_data(r: int, g: int, b: int, args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the conversions selected on the command line."""
    data = {}

    if getattr(args, "hsl", False):
        data["hsl"] = conv.rgb_to_hsl(r, g, b)
    if getattr(args, "hsv", False):
        data["hsv"] = conv.rgb_to_hsv(r, g, b)
    if getattr(args, "cmyk", False):
        data["cmyk"] = conv.rgb_to_cmyk(r, g, b)
    if getattr(args, "oklab", False):
        data["oklab"] = conv.rgb_to_oklab(r, g, b)
    if getattr(args, "oklch", False):
        data["oklch"] = conv.rgb_to_oklch(r, g, b)
        L, _, hue = data["oklch"]
        data["max_chroma"] = max_chroma(L, hue)
    if getattr(args, "name", False):
        data["name"] = nearest_name((r, g, b))

    return data
