#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gradient/engine.py

from dataclasses import dataclass
from typing import List, Optional, Sequence

from chromalab.core import config as c
from chromalab.core.conversions import RGB, hex_to_rgb, rgb_to_hex, rgb_to_oklch
from chromalab.core.gamut import oklch_to_rgb
from chromalab.logic.mix.engine import mix_oklab, mix_rgb
from chromalab.shared.clamping import wrap_hue


@dataclass(frozen=True)
class GradientStop:
    hex: str
    pos: float  # percent along the gradient line, 0-100


def even_stops(hexes: Sequence[str]) -> List[GradientStop]:
    """Stops for `hexes` spread evenly from 0% to 100%."""
    n = len(hexes)
    if n == 1:
        return [GradientStop(hexes[0], 0.0)]
    return [GradientStop(h, round(i / (n - 1) * 100.0)) for i, h in enumerate(hexes)]


def sort_stops(stops: Sequence[GradientStop]) -> List[GradientStop]:
    return sorted(stops, key=lambda s: s.pos)


def _fmt_pos(pos: float) -> str:
    return f"{pos:g}%"


def build_gradient_css(
    stops: Sequence[GradientStop],
    kind: str = "linear",
    direction: Optional[str] = None,
    space: str = "srgb",
) -> str:
    """
    CSS gradient for `stops`, sorted by position.

    A non-sRGB `space` adds the CSS Color 4 hint ("in oklab, ") at the start
    of the arguments, before the direction or shape.
    """
    if kind not in c.GRADIENT_KINDS:
        raise ValueError(f"unknown gradient kind: {kind}")
    if space not in c.GRADIENT_SPACES:
        raise ValueError(f"unknown interpolation space: {space}")

    body = ", ".join(f"{s.hex} {_fmt_pos(s.pos)}" for s in sort_stops(stops))
    in_space = f"in {space}, " if space != "srgb" else ""
    if kind == "radial":
        return f"radial-gradient({in_space}circle at center, {body})"
    if kind == "conic":
        return f"conic-gradient({in_space}{direction or c.GRADIENT_CONIC_DEFAULT}, {body})"
    return f"linear-gradient({in_space}{direction or c.GRADIENT_DEFAULT_DIRECTION}, {body})"


def _mix_oklch(c1: RGB, c2: RGB, t: float) -> RGB:
    l1, ch1, h1 = rgb_to_oklch(*c1)
    l2, ch2, h2 = rgb_to_oklch(*c2)
    h_diff = h2 - h1
    if h_diff > 180:
        h2 -= c.HUE_MAX
    elif h_diff < -180:
        h2 += c.HUE_MAX
    return oklch_to_rgb(l1 + t * (l2 - l1), ch1 + t * (ch2 - ch1), wrap_hue(h1 + t * (h2 - h1)))


_INTERPOLATORS = {
    "srgb": mix_rgb,
    "oklab": mix_oklab,
    "oklch": _mix_oklch,
}


def sample_gradient(stops: Sequence[GradientStop], pos: float, space: str = "srgb") -> RGB:
    """Color at `pos` percent; positions outside the stops take the end colors."""
    ordered = sort_stops(stops)
    if pos <= ordered[0].pos:
        return hex_to_rgb(ordered[0].hex)
    if pos >= ordered[-1].pos:
        return hex_to_rgb(ordered[-1].hex)
    for left, right in zip(ordered, ordered[1:]):
        if pos <= right.pos:
            span = right.pos - left.pos
            t = (pos - left.pos) / span if span else 1.0
            return _INTERPOLATORS[space](hex_to_rgb(left.hex), hex_to_rgb(right.hex), t)
    return hex_to_rgb(ordered[-1].hex)


def gradient_ramp(stops: Sequence[GradientStop], width: int, space: str = "srgb") -> List[str]:
    """`width` evenly spaced samples across 0-100%, as hex."""
    if width <= 1:
        return [rgb_to_hex(*sample_gradient(stops, 0.0, space))]
    return [
        rgb_to_hex(*sample_gradient(stops, i / (width - 1) * 100.0, space))
        for i in range(width)
    ]
