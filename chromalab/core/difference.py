#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/difference.py

import math
from typing import Tuple

from .conversions import rgb_to_oklab


def delta_e_ok(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """Euclidean distance between two OKLab colors."""
    return math.sqrt(
        (lab1[0] - lab2[0]) ** 2 + (lab1[1] - lab2[1]) ** 2 + (lab1[2] - lab2[2]) ** 2
    )


def color_dist(rgb1: Tuple[int, int, int], rgb2: Tuple[int, int, int]) -> float:
    """
    Perceptual distance between two RGB colors.

    Measured as straight-line distance in OKLab, where equal steps read as
    roughly equal visual differences. 0.0 means identical; black to white
    is 1.0.
    """
    return delta_e_ok(rgb_to_oklab(*rgb1), rgb_to_oklab(*rgb2))
