#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/scale/engine.py

from dataclasses import dataclass
from typing import List, Tuple

from chromalab.core import config as c
from chromalab.core.conversions import hex_to_rgb, rgb_to_oklch
from chromalab.core.gamut import oklch_to_rgb
from chromalab.core.models import ColorStop, rgb_to_stop
from chromalab.shared.clamping import clamp

SCALE_STEPS = c.SCALE_STEPS


@dataclass(frozen=True)
class ScaleStep:
    step: int
    color: ColorStop
    target: Tuple[float, float, float]  # requested OKLCH before gamut mapping


def scale_lightness(t: float) -> float:
    span = c.SCALE_L_TOP - c.SCALE_L_BOTTOM
    return clamp(c.SCALE_L_TOP - span * t ** c.SCALE_L_EXP, *c.SCALE_L_RANGE)


def scale_chroma(base_chroma: float, t: float) -> float:
    """Chroma tent: zero at both ends, strongest just below the middle."""
    tent = 4.0 * t * (1.0 - t)
    factor = c.SCALE_TENT_BOOST - c.SCALE_TENT_FALLOFF * abs(t - c.SCALE_TENT_PEAK_T)
    return clamp(base_chroma * tent * factor, 0.0, c.CHROMA_CEILING)


def generate_scale(hex_code: str) -> List[ScaleStep]:
    """
    Build the 50-950 tint/shade ramp for a color.

    Every step keeps the input's OKLCH hue; lightness falls along a power
    curve and chroma follows the tent scaled by the input's chroma (at most 0.32).
    """
    _, chroma, hue = rgb_to_oklch(*hex_to_rgb(hex_code))
    base_chroma = min(chroma, c.SCALE_BASE_CHROMA_MAX)

    steps = []
    for step in SCALE_STEPS:
        t = step / 1000.0
        target = (scale_lightness(t), scale_chroma(base_chroma, t), hue)
        rgb = oklch_to_rgb(*target)
        steps.append(ScaleStep(step=step, color=rgb_to_stop(*rgb), target=target))
    return steps
