#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/utility/engine.py

from dataclasses import replace
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from chromalab.core import config as c
from chromalab.core.gamut import oklch_to_rgb
from chromalab.core.models import ColorStop, UtilityColor, UtilityColorSet, palette_colors, rgb_to_stop
from chromalab.shared.clamping import clamp, wrap_hue

OKLCH = Tuple[float, float, float]


def hue_distance(h1: float, h2: float) -> float:
    d = abs(h1 - h2) % c.HUE_MAX
    return min(d, c.HUE_MAX - d)


def nudge_hue(h: float, palette_hues: Sequence[float]) -> float:
    """
    Push hue `h` away from the nearest palette hue until they are at least
    18 degrees apart. Hues already far enough away are returned unchanged.
    """
    if not palette_hues:
        return h
    nearest_d = float("inf")
    nearest_h = h
    for ph in palette_hues:
        d = hue_distance(ph, h)
        if d < nearest_d:
            nearest_d, nearest_h = d, ph
    if nearest_d >= c.UTILITY_HUE_GAP:
        return h
    direction = -1.0 if (h - nearest_h + c.HUE_MAX) % c.HUE_MAX > 180.0 else 1.0
    return wrap_hue(h + direction * (c.UTILITY_HUE_GAP - nearest_d))


def primary_oklch(oklchs: Sequence[OKLCH]) -> OKLCH:
    """Highest-chroma OKLCH in the list (first one wins on ties)."""
    if not oklchs:
        return c.UTILITY_DEFAULT_PRIMARY
    best = oklchs[0]
    for lch in oklchs[1:]:
        if lch[1] > best[1]:
            best = lch
    return best


def _make_utility(role: str, L: float, chroma: float, hue: float) -> UtilityColor:
    label, description, _ = c.UTILITY_DEFS[role]
    color = rgb_to_stop(*oklch_to_rgb(L, chroma, hue))
    return UtilityColor(role=role, label=label, description=description, color=color)


def generate_utility_colors(palette: Sequence) -> UtilityColorSet:
    """
    Derive the six utility colors (info, success, warning, error, neutral,
    focus) from a palette.

    State roles sit at fixed OKLCH hue anchors nudged away from palette
    hues, at one lightness and chroma level chosen from the palette's
    averages. Neutral and focus take the hue of the most saturated slot.
    """
    oklchs = [stop.oklch for stop in palette_colors(palette)]
    if oklchs:
        avg_l = sum(lch[0] for lch in oklchs) / len(oklchs)
        avg_c = sum(lch[1] for lch in oklchs) / len(oklchs)
    else:
        avg_l, avg_c = c.UTILITY_DEFAULT_AVG_L, c.UTILITY_DEFAULT_AVG_C
    p_l, p_c, p_h = primary_oklch(oklchs)

    if avg_l > c.UTILITY_BRIGHT_AVG_L:
        target_l = c.UTILITY_BRIGHT_TARGET_L
    elif avg_l < c.UTILITY_DARK_AVG_L:
        target_l = c.UTILITY_DARK_TARGET_L
    else:
        target_l = c.UTILITY_TARGET_L
    target_l = clamp(target_l, *c.UTILITY_L_RANGE)
    target_c = clamp(avg_c * 0.8 + 0.07, *c.UTILITY_C_RANGE)

    hues = [lch[2] for lch in oklchs]

    def anchor(role: str) -> float:
        return nudge_hue(c.UTILITY_DEFS[role][2], hues)

    return {
        "info": _make_utility("info", target_l, target_c, anchor("info")),
        "success": _make_utility("success", target_l, target_c, anchor("success")),
        "warning": _make_utility(
            "warning", target_l + 0.06, clamp(target_c * 1.2, 0.10, 0.20), anchor("warning")
        ),
        "error": _make_utility(
            "error", target_l, clamp(target_c * 1.1, 0.12, 0.24), anchor("error")
        ),
        "neutral": _make_utility(
            "neutral", target_l + 0.04, clamp(p_c * 0.08, 0.01, 0.04), p_h
        ),
        "focus": _make_utility(
            "focus",
            clamp(p_l, *c.UTILITY_FOCUS_L_RANGE),
            clamp(p_c, *c.UTILITY_FOCUS_C_RANGE),
            p_h,
        ),
    }


def merge_utility_colors(
    existing: Optional[Mapping[str, UtilityColor]],
    generated: Mapping[str, UtilityColor],
    locked: Iterable[str] = (),
) -> UtilityColorSet:
    """
    Per role, keep the existing color when it is locked (by its own flag or
    by appearing in `locked`), else take the generated one.
    """
    existing = existing or {}
    lock_mask = set(locked)
    merged: Dict[str, UtilityColor] = {}
    for role in c.UTILITY_ROLES:
        prev = existing.get(role)
        keep = prev is not None and (prev.locked or role in lock_mask)
        merged[role] = prev if keep else generated[role]
    return merged


def lock_utility_role(utility: Mapping[str, UtilityColor], role: str, locked: bool = True) -> UtilityColorSet:
    out = dict(utility)
    if role in out:
        out[role] = replace(out[role], locked=locked)
    return out


def set_utility_color(utility: Mapping[str, UtilityColor], role: str, color: ColorStop) -> UtilityColorSet:
    """Replace one role's color by hand; the role is locked so regeneration keeps it."""
    out = dict(utility)
    if role in out:
        out[role] = replace(out[role], color=color, locked=True)
    return out
