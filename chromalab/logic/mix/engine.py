#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/mix/engine.py

from typing import List

from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.core.conversions import RGB
from chromalab.shared.clamping import _clamp01


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def mix_rgb(c1: RGB, c2: RGB, t: float = 0.5) -> RGB:
    t = _clamp01(t)
    return tuple(conv._to_byte(_lerp(a, b, t)) for a, b in zip(c1, c2))


def mix_hsl(c1: RGB, c2: RGB, t: float = 0.5) -> RGB:
    """Interpolate in HSL along the shorter hue arc."""
    t = _clamp01(t)
    h1, s1, l1 = conv.rgb_to_hsl(*c1)
    h2, s2, l2 = conv.rgb_to_hsl(*c2)
    h_diff = h2 - h1
    if h_diff > 180:
        h2 -= c.HUE_MAX
    elif h_diff < -180:
        h2 += c.HUE_MAX
    h_new = _lerp(h1, h2, t) % c.HUE_MAX
    return conv.hsl_to_rgb(h_new, _lerp(s1, s2, t), _lerp(l1, l2, t))


def mix_oklab(c1: RGB, c2: RGB, t: float = 0.5) -> RGB:
    t = _clamp01(t)
    lab1 = conv.rgb_to_oklab(*c1)
    lab2 = conv.rgb_to_oklab(*c2)
    return conv.oklab_to_rgb(*(_lerp(a, b, t) for a, b in zip(lab1, lab2)))


MIXERS = {
    "oklab": mix_oklab,
    "hsl": mix_hsl,
    "rgb": mix_rgb,
}


def mix(c1: RGB, c2: RGB, t: float = 0.5, space: str = "oklab") -> RGB:
    if space not in MIXERS:
        raise ValueError(f"unknown mixing space: {space}")
    return MIXERS[space](c1, c2, t)


def mix_steps(c1: RGB, c2: RGB, steps: int, space: str = "oklab") -> List[RGB]:
    """`steps` evenly spaced mixes from c1 to c2, both ends included."""
    if steps <= 1:
        return [mix(c1, c2, 0.5, space)]
    return [mix(c1, c2, i / (steps - 1), space) for i in range(steps)]
