#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/clamping.py


def clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp100(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(100.0, v))


def wrap_hue(h: float) -> float:
    """Normalize an angle into [0, 360)."""
    if h != h:
        return 0.0
    h = h % 360.0
    return 0.0 if h >= 360.0 else h
