#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/luminance.py

from .conversions import _srgb_to_linear
from . import config as c


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _srgb_to_linear(r) +
        c.LUMA_G * _srgb_to_linear(g) +
        c.LUMA_B * _srgb_to_linear(b)
    )


def get_apca_luminance(r: int, g: int, b: int) -> float:
    """Screen luminance (Ys) with the APCA channel coefficients."""
    return (
        c.APCA_LUMA_R * _srgb_to_linear(r) +
        c.APCA_LUMA_G * _srgb_to_linear(g) +
        c.APCA_LUMA_B * _srgb_to_linear(b)
    )
