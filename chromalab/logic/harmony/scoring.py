#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/harmony/scoring.py

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from chromalab.core import config as c
from chromalab.core.contrast import get_contrast_ratio_rgb
from chromalab.core.difference import color_dist
from chromalab.core.models import ColorStop


@dataclass(frozen=True)
class PaletteScore:
    balance: int = 0
    accessibility: int = 0
    harmony: int = 0
    uniqueness: int = 0
    overall: int = 0


def _std_dev(values: Sequence[float], mean: float) -> float:
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def score_palette(colors: Sequence[ColorStop]) -> PaletteScore:
    """
    Rate a palette on four 0-100 axes and their mean.

    balance        evenness of the hue gaps around the wheel
    accessibility  share of color pairs reaching 4.5:1 contrast
    harmony        consistency of HSL saturation
    uniqueness     mean pairwise OKLab distance
    """
    if len(colors) < 2:
        return PaletteScore()

    hues = sorted(stop.hsl[0] for stop in colors)
    gaps = [(hues[(i + 1) % len(hues)] - h) % c.HUE_MAX for i, h in enumerate(hues)]
    ideal_gap = c.HUE_MAX / len(hues)
    gap_dev = _std_dev(gaps, ideal_gap)
    balance = round(max(0.0, 100.0 - gap_dev / ideal_gap * 100.0))

    pairs = list(combinations(colors, 2))
    passing = sum(
        1 for a, b in pairs if get_contrast_ratio_rgb(a.rgb, b.rgb) >= c.WCAG_AA_NORMAL
    )
    accessibility = round(passing / len(pairs) * 100.0)

    sats = [stop.hsl[1] for stop in colors]
    sat_dev = _std_dev(sats, sum(sats) / len(sats))
    harmony = round(max(0.0, 100.0 - sat_dev * c.SCORE_SATURATION_WEIGHT))

    avg_dist = sum(color_dist(a.rgb, b.rgb) for a, b in pairs) / len(pairs)
    uniqueness = round(min(100.0, avg_dist * c.SCORE_UNIQUENESS_SCALE))

    overall = round((balance + accessibility + harmony + uniqueness) / 4.0)
    return PaletteScore(
        balance=int(balance),
        accessibility=int(accessibility),
        harmony=int(harmony),
        uniqueness=int(uniqueness),
        overall=int(overall),
    )
