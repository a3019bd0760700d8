#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/contrast.py

from typing import Optional, Tuple

from . import config as c
from .conversions import RGB, hex_to_rgb, rgb_to_hex, rgb_to_oklch
from .gamut import oklch_to_rgb
from .luminance import get_apca_luminance, get_luminance

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def get_contrast_ratio_rgb(c1: RGB, c2: RGB) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


contrast_ratio = get_contrast_ratio_rgb


def wcag_level(ratio: float) -> str:
    if ratio >= c.WCAG_AAA_NORMAL:
        return "AAA"
    if ratio >= c.WCAG_AA_NORMAL:
        return "AA"
    if ratio >= c.WCAG_AA_LARGE:
        return "AA Large"
    return "Fail"


def get_wcag_contrast(lum: float) -> dict:
    """
    Calculate WCAG contrast ratios against pure white and pure black.

    Formula: (L1 + 0.05) / (L2 + 0.05), where L is the relative luminance.
    """
    contrast_white = (c.UNIT + c.WCAG_LUMINANCE_OFFSET) / (lum + c.WCAG_LUMINANCE_OFFSET)
    contrast_black = (lum + c.WCAG_LUMINANCE_OFFSET) / c.WCAG_LUMINANCE_OFFSET

    def get_pass_fail(ratio: float) -> dict:
        return {
            "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
            "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
            "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
            "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
        }

    return {
        "white": {
            "ratio": round(contrast_white, 2),
            "level": wcag_level(contrast_white),
            "levels": get_pass_fail(contrast_white),
        },
        "black": {
            "ratio": round(contrast_black, 2),
            "level": wcag_level(contrast_black),
            "levels": get_pass_fail(contrast_black),
        },
    }


def text_color(bg: RGB) -> str:
    """
    Pick a text color for the given background.

    White wins whenever it reaches AA (4.5:1) against the background, even
    if black would score higher. Black is used only when white falls short.
    """
    if get_contrast_ratio_rgb(bg, WHITE) >= c.WCAG_AA_NORMAL:
        return "#ffffff"
    return "#000000"


def apca_contrast(fg: RGB, bg: RGB) -> int:
    """
    APCA lightness contrast (Lc) of text `fg` on background `bg`.

    Positive for dark text on a light background, negative for light text
    on a dark background. Source: APCA-W3 0.0.98G.
    """
    y_fg = get_apca_luminance(*fg)
    y_bg = get_apca_luminance(*bg)

    if y_bg > y_fg:
        spl = y_bg ** c.APCA_NORM_BG - y_fg ** c.APCA_NORM_TXT
        sapc = 0.0 if spl < c.APCA_CLIP else spl * c.APCA_SCALE - c.APCA_OFFSET
    else:
        spl = y_bg ** c.APCA_REV_BG - y_fg ** c.APCA_REV_TXT
        sapc = 0.0 if spl > -c.APCA_CLIP else spl * c.APCA_SCALE + c.APCA_OFFSET

    return int(round(sapc * c.PERCENT))


def apca_level(lc: float) -> str:
    mag = abs(lc)
    for threshold, label in c.APCA_LEVELS:
        if mag >= threshold:
            return label
    return "Fail"


def suggest_contrast_fix(
    hex_code: str, bg: RGB, target: float = c.WCAG_AA_NORMAL
) -> Optional[Tuple[str, str]]:
    """
    Find the smallest OKLCH lightness change that makes `hex_code` reach
    `target` contrast against `bg`.

    Returns (new_hex, "darken" | "lighten"), or None when the color already
    passes or no better candidate exists. Light backgrounds push the color
    darker, dark backgrounds push it lighter; chroma is damped in proportion
    to the lightness travelled.
    """
    rgb = hex_to_rgb(hex_code)
    if get_contrast_ratio_rgb(rgb, bg) >= target:
        return None

    L, chroma, hue = rgb_to_oklch(*rgb)
    direction = "darken" if get_luminance(*bg) > c.CONTRAST_BG_LUM_SPLIT else "lighten"

    if direction == "lighten":
        lo, hi = L, c.UNIT
    else:
        lo, hi = 0.0, L

    original = rgb_to_hex(*rgb)
    best = original
    for _ in range(c.CONTRAST_BINARY_SEARCH_ITERATIONS):
        mid = (lo + hi) / c.DIV_2
        damped = chroma * (c.UNIT - abs(mid - L) * c.CONTRAST_CHROMA_DAMPING)
        candidate = oklch_to_rgb(mid, damped, hue)
        if get_contrast_ratio_rgb(candidate, bg) >= target:
            best = rgb_to_hex(*candidate)
            if direction == "lighten":
                hi = mid
            else:
                lo = mid
        else:
            if direction == "lighten":
                lo = mid
            else:
                hi = mid
        if hi - lo < c.CONTRAST_SEARCH_WIDTH:
            break

    if best == original:
        return None
    return best, direction
