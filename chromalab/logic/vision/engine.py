#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/vision/engine.py

from typing import Dict, Sequence

from chromalab.core import config as c
from chromalab.core.conversions import RGB, _srgb_to_linear, _to_byte, from_linear
from chromalab.shared.clamping import _clamp01


def simulate_cvd(rgb: RGB, kind: str, intensity: float = 1.0) -> RGB:
    """
    Simulate how `rgb` looks under a color-vision deficiency.

    The matrix for `kind` is applied in linear RGB; `intensity` in [0, 1]
    blends between the original (0) and the full simulation (1).
    """
    matrix = c.CVD_MATRICES.get(kind)
    if matrix is None:
        raise ValueError(f"unknown vision type: {kind}")
    f = _clamp01(intensity)
    lin = [_srgb_to_linear(v) for v in rgb]

    out = []
    for row, orig in zip(matrix, lin):
        sim = row[0] * lin[0] + row[1] * lin[1] + row[2] * lin[2]
        mixed = _clamp01((1 - f) * orig + f * sim)
        out.append(_to_byte(from_linear(mixed) * c.RGB_MAX))
    return tuple(out)


def simulate_palette(colors: Sequence[RGB], intensity: float = 1.0) -> Dict[str, list]:
    """Every vision type applied to every color, keyed by type."""
    return {
        kind: [simulate_cvd(rgb, kind, intensity) for rgb in colors]
        for kind in c.CVD_MATRICES
    }
