#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/gamut.py

from . import config as c
from .conversions import (
    RGB,
    from_linear,
    oklab_to_linear_rgb,
    oklab_to_rgb,
    oklch_to_oklab,
    _to_byte,
)
from chromalab.shared.clamping import clamp, wrap_hue


def _encoded_in_gamut(L: float, chroma: float, hue: float) -> bool:
    """True when every unclamped sRGB channel rounds into [0, 255]."""
    for v in oklab_to_linear_rgb(*oklch_to_oklab(L, chroma, hue)):
        if v != v:
            return False
        encoded = from_linear(v) * c.RGB_MAX
        if not (c.RGB_CLAMP_TOLERANCE_LOWER <= encoded < c.RGB_CLAMP_TOLERANCE_UPPER):
            return False
    return True


def is_in_gamut(L: float, chroma: float, hue: float) -> bool:
    """Check whether an OKLCH color is displayable in sRGB without clipping."""
    if L < 0 or L > 1:
        return False
    return _encoded_in_gamut(L, max(0.0, chroma), wrap_hue(hue))


def oklch_to_rgb(L: float, chroma: float, hue: float) -> RGB:
    """
    Map an OKLCH color to displayable sRGB.

    Lightness and hue are kept; only chroma is reduced. Out-of-gamut colors
    are brought in by bisecting chroma between 0 and the requested value and
    keeping the largest chroma found to be in gamut.
    """
    if L != L:
        L = 0.0
    if chroma != chroma or chroma < 0:
        chroma = 0.0
    hue = wrap_hue(hue)

    if chroma < c.ACHROMATIC_CHROMA:
        v = _to_byte(from_linear(clamp(L ** 3 if L > 0 else 0.0, 0.0, 1.0)) * c.RGB_MAX)
        return (v, v, v)
    if L >= 1:
        return (255, 255, 255)
    if L <= 0:
        return (0, 0, 0)

    if _encoded_in_gamut(L, chroma, hue):
        return oklab_to_rgb(*oklch_to_oklab(L, chroma, hue))

    lo, hi = 0.0, chroma
    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        if hi - lo < c.GAMUT_MAP_WIDTH:
            break
        mid = (lo + hi) / c.DIV_2
        if _encoded_in_gamut(L, mid, hue):
            lo = mid
        else:
            hi = mid

    return oklab_to_rgb(*oklch_to_oklab(L, lo, hue))


def max_chroma(L: float, hue: float) -> float:
    """Largest chroma displayable in sRGB at the given lightness and hue."""
    if L <= 0 or L >= 1:
        return 0.0
    lo, hi = 0.0, c.MAX_CHROMA_SEARCH
    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        if hi - lo < c.GAMUT_MAP_WIDTH:
            break
        mid = (lo + hi) / c.DIV_2
        if _encoded_in_gamut(L, mid, wrap_hue(hue)):
            lo = mid
        else:
            hi = mid
    return lo
