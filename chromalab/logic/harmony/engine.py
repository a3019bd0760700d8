#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/harmony/engine.py

import math
import random
from typing import List, Optional, Sequence, Tuple

from chromalab.core import config as c
from chromalab.core.conversions import hsl_to_rgb
from chromalab.core.models import ColorStop, rgb_to_stop
from chromalab.shared.clamping import clamp, wrap_hue

HSL = Tuple[float, float, float]


def rotate_hue(h: float, d: float) -> float:
    return wrap_hue(h + d)


def _jitter(rng, width: float) -> float:
    """Uniform offset in [-width/2, width/2)."""
    return (rng.random() - 0.5) * width


def make_stop(h: float, s: float, L: float) -> ColorStop:
    return rgb_to_stop(*hsl_to_rgb(wrap_hue(h), s, L))


def anchor_hues(mode: str, h: float) -> List[float]:
    """Hue anchors of a geometric harmony mode, rotated to base hue `h`."""
    offsets = c.HARMONY_ANCHORS.get(mode, (0,))
    return [rotate_hue(h, d) for d in offsets]


def sample_template_hues(mode: str, h: float, n: int, rng) -> List[float]:
    """
    Sample `n` hues from a Matsuda template rotated to `h`.

    Arcs share the samples in proportion to their width (at least one each,
    the last arc takes the remainder). Offsets inside an arc are biased
    toward its center.
    """
    arcs = c.MATSUDA_TEMPLATES[mode]
    total_width = sum(width for _, width in arcs)
    hues = []
    remaining = n
    for i, (center, width) in enumerate(arcs):
        if i == len(arcs) - 1:
            share = remaining
        else:
            share = max(1, int(round(width / total_width * n)))
        remaining -= share
        for _ in range(max(0, share)):
            u = math.sin(rng.random() * math.pi - math.pi / 2)
            hues.append(rotate_hue(h, center + u * width / c.DIV_2))
    return hues[:n] if n > 0 else []


def _random_base(rng) -> HSL:
    return (
        rng.random() * c.HUE_MAX,
        c.BASE_S_MIN + rng.random() * c.BASE_S_SPAN,
        c.BASE_L_MIN + rng.random() * c.BASE_L_SPAN,
    )


def generate(
    mode: str,
    count: int,
    seeds: Optional[Sequence[ColorStop]] = None,
    rng=None,
) -> List[ColorStop]:
    """
    Generate a palette of exactly `count` colors for a harmony mode.

    `seeds` are existing colors to build around: the first seed's HSL is
    the base color, and with two or more seeds every seed is emitted as-is
    before the remaining slots are filled. `rng` is any object with a
    `random()` method; a system-seeded `random.Random` is used when omitted.
    """
    if rng is None:
        rng = random.Random()
    count = max(0, int(count))
    seeds = list(seeds or [])

    if seeds:
        base = seeds[0].hsl
    else:
        base = _random_base(rng)
    base_h, base_s, base_l = base

    if mode == "monochromatic":
        stops = []
        for i in range(count):
            t = 0.5 if count == 1 else i / (count - 1)
            s = clamp(base_s + _jitter(rng, 12.0), 10.0, 95.0)
            stops.append(make_stop(base_h, s, 15.0 + t * 70.0))
        return stops

    if mode == "shades":
        stops = []
        for i in range(count):
            t = 0.5 if count == 1 else i / (count - 1)
            stops.append(make_stop(base_h, clamp(base_s - t * 20.0, 10.0, 95.0), 8.0 + t * 82.0))
        return stops

    if mode == "natural":
        stops = []
        for _ in range(count):
            h = rotate_hue(base_h, _jitter(rng, 50.0))
            s = 15.0 + rng.random() * 45.0
            L = 25.0 + rng.random() * 50.0
            stops.append(make_stop(h, s, L))
        return stops

    if mode == "random":
        bh = rng.random() * c.HUE_MAX
        stops = []
        for i in range(count):
            s = 45.0 + rng.random() * 45.0
            L = 35.0 + rng.random() * 35.0
            stops.append(make_stop(rotate_hue(bh, i * c.GOLDEN_ANGLE), s, L))
        return stops

    s_lo, s_hi = c.ANCHOR_S_RANGE
    l_lo, l_hi = c.ANCHOR_L_RANGE

    if len(seeds) > 1:
        stops = list(seeds)
        need = count - len(stops)
        hues = _mode_hues(mode, base_h, max(need, 1), rng)
        for i in range(need):
            s = clamp(base_s + _jitter(rng, c.ANCHOR_S_JITTER), s_lo, s_hi)
            L = clamp(base_l + _jitter(rng, c.SEED_L_JITTER), l_lo, l_hi)
            stops.append(make_stop(hues[i % len(hues)], s, L))
        return stops[:count]

    if mode in c.MATSUDA_TEMPLATES:
        stops = []
        for h in sample_template_hues(mode, base_h, count, rng):
            s = clamp(base_s + _jitter(rng, c.ANCHOR_S_JITTER), s_lo, s_hi)
            L = clamp(base_l + _jitter(rng, c.SINGLE_CYCLE_L_JITTER), l_lo, l_hi)
            stops.append(make_stop(h, s, L))
        return stops

    hues = anchor_hues(mode, base_h)
    total = math.ceil(count / len(hues)) if count else 0
    stops = []
    for i in range(count):
        cycle = i // len(hues)
        if total > 1:
            lv = (cycle / (total - 1)) * c.CYCLE_L_SPAN - c.CYCLE_L_SPAN / c.DIV_2
        else:
            lv = _jitter(rng, c.SINGLE_CYCLE_L_JITTER)
        s = clamp(base_s + _jitter(rng, c.ANCHOR_S_JITTER), s_lo, s_hi)
        stops.append(make_stop(hues[i % len(hues)], s, clamp(base_l + lv, l_lo, l_hi)))
    return stops


def _mode_hues(mode: str, h: float, n: int, rng) -> List[float]:
    if mode in c.MATSUDA_TEMPLATES:
        return sample_template_hues(mode, h, n, rng)
    return anchor_hues(mode, h)


def list_modes() -> List[Tuple[str, str, str]]:
    """(id, label, description) for every supported harmony mode."""
    return [(mode, label, desc) for mode, (label, desc) in c.HARMONY_MODES.items()]
