#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/extract/engine.py

import math
from typing import Iterable, List, Sequence, Tuple

from PIL import Image

from chromalab.core import config as c
from chromalab.core.conversions import RGB, rgb_to_hsl
from chromalab.core.difference import color_dist
from chromalab.core.models import ColorStop, rgb_to_stop

Pixel = Tuple[int, ...]


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def median_cut(pixels: Sequence[RGB], depth: int) -> List[List[RGB]]:
    """
    Split `pixels` into 2**depth buckets, each time halving a bucket at the
    median of its widest channel (red wins ties, then green).
    """
    if depth == 0 or not pixels:
        return [list(pixels)]
    spans = [max(p[i] for p in pixels) - min(p[i] for p in pixels) for i in range(3)]
    key = spans.index(max(spans))
    ordered = sorted(pixels, key=lambda p: p[key])
    mid = len(ordered) // 2
    return median_cut(ordered[:mid], depth - 1) + median_cut(ordered[mid:], depth - 1)


def average_bucket(bucket: Sequence[RGB]) -> RGB:
    if not bucket:
        return c.EXTRACT_EMPTY_BUCKET
    n = len(bucket)
    return tuple(_round_half_up(sum(p[i] for p in bucket) / n) for i in range(3))


def is_usable(rgb: RGB) -> bool:
    """Drop near-grays and colors too dark or too light to use as a swatch."""
    _, s, l = rgb_to_hsl(*rgb)
    lo, hi = c.EXTRACT_L_RANGE
    return s >= c.EXTRACT_MIN_SATURATION and lo <= l <= hi


def dedup_colors(colors: Iterable[RGB], threshold: float = c.EXTRACT_DEDUP_DIST) -> List[RGB]:
    """Keep the first of every group of colors closer than `threshold` in OKLab."""
    kept: List[RGB] = []
    for rgb in colors:
        if not any(color_dist(rgb, other) < threshold for other in kept):
            kept.append(rgb)
    return kept


def extract_from_pixels(pixels: Iterable[Pixel], count: int = c.EXTRACT_DEFAULT_COUNT) -> List[RGB]:
    """
    Dominant colors of a pixel list, most saturated first.

    Pixels are RGB or RGBA tuples; RGBA pixels with alpha under 128 are
    ignored. The opaque pixels are median-cut into 2**ceil(log2(2 * count))
    buckets, bucket averages that are too gray, dark or light are dropped,
    near duplicates are merged and at most `count` colors are returned.
    """
    opaque = [
        tuple(p[:3]) for p in pixels
        if len(p) < 4 or p[3] >= c.EXTRACT_MIN_ALPHA
    ]
    if not opaque or count < 1:
        return []
    depth = math.ceil(math.log2(count * 2))
    averages = [average_bucket(b) for b in median_cut(opaque, depth)]
    colors = dedup_colors(rgb for rgb in averages if is_usable(rgb))
    colors.sort(key=lambda rgb: -rgb_to_hsl(*rgb)[1])
    return colors[:count]


def image_pixels(image: Image.Image) -> List[Pixel]:
    """RGBA pixels of `image` after scaling its longest side down to 200px."""
    width, height = image.size
    scale = min(1.0, c.EXTRACT_MAX_SIDE / max(width, height))
    size = (max(1, _round_half_up(width * scale)), max(1, _round_half_up(height * scale)))
    rgba = image.convert("RGBA")
    if size != rgba.size:
        rgba = rgba.resize(size, Image.Resampling.BILINEAR)
    data = rgba.tobytes()
    return [tuple(data[i:i + 4]) for i in range(0, len(data), 4)]


def load_image(path: str) -> Image.Image:
    """
    Open an image file with Pillow and load its pixels.

    Raises:
        FileNotFoundError: if `path` does not exist
        ValueError: if the file is not an image Pillow can read
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise ValueError(f"could not read image: {e}") from e


def extract_colors(image: Image.Image, count: int = c.EXTRACT_DEFAULT_COUNT) -> List[ColorStop]:
    return [rgb_to_stop(*rgb) for rgb in extract_from_pixels(image_pixels(image), count)]
