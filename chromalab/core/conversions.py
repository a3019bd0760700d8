#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/conversions.py

import math
import re
from typing import Optional, Tuple

from . import config as c
from chromalab.shared.clamping import clamp, _clamp01, _clamp100, wrap_hue

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")
_RGB_STR_RE = re.compile(r"rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)")
_HSL_STR_RE = re.compile(r"hsla?\(\s*([\d.]+)[,\s]\s*([\d.]+)%?[,\s]\s*([\d.]+)%?")


def to_linear(v: float) -> float:
    """Linearize an encoded sRGB component in [0, 1]."""
    if v <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def from_linear(v: float) -> float:
    """Apply the sRGB transfer curve to a linear component."""
    if v <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * v
    return c.SRGB_DIVISOR * (v ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an 8-bit sRGB component."""
    return to_linear(_clamp01(color_comp / c.RGB_MAX))


def _to_byte(v: float) -> int:
    """Round and clamp a 0-255 float into an 8-bit channel."""
    if v != v:
        return 0
    return max(0, min(int(c.RGB_MAX), int(round(v))))


# ==========================================
# Hex
# ==========================================

def parse_hex(value: str) -> Optional[str]:
    """
    Parse a 3-, 6- or 8-digit hex string (leading '#' optional).

    Returns the canonical lowercase '#rrggbb' form, or None when the input
    has the wrong length or contains non-hex characters. The alpha byte of
    an 8-digit value is dropped.
    """
    if value is None:
        return None
    s = str(value).strip()
    if s.startswith("#"):
        s = s[1:]
    if not s or not _HEX_RE.match(s):
        return None
    if len(s) == 3:
        return "#" + "".join(ch * 2 for ch in s).lower()
    if len(s) == 6:
        return "#" + s.lower()
    if len(s) == 8:
        return "#" + s[:6].lower()
    return None


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert hex string to RGB tuple."""
    h = parse_hex(hex_code)
    if not h:
        return (0, 0, 0)
    return (int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a '#rrggbb' hex string."""
    return f"#{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"


# ==========================================
# HSL / HSV / CMYK
# ==========================================

def _hue_from_rgb(r_f: float, g_f: float, b_f: float, cmax: float, delta: float) -> float:
    if cmax == r_f:
        h = ((g_f - b_f) / delta) % 6.0
    elif cmax == g_f:
        h = (b_f - r_f) / delta + 2.0
    else:
        h = (r_f - g_f) / delta + 4.0
    return wrap_hue(h * c.HUE_SECTOR)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL (h in degrees, s and l in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return (0.0, 0.0, _clamp100(L * c.PERCENT))
    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return (h, _clamp100(s * c.PERCENT), _clamp100(L * c.PERCENT))


def hsl_to_rgb(h: float, s: float, L: float) -> RGB:
    """Convert HSL (percent saturation and lightness) to RGB."""
    s_n = _clamp100(s) / c.PERCENT
    l_n = _clamp100(L) / c.PERCENT
    if s_n == 0:
        v = _to_byte(l_n * c.RGB_MAX)
        return (v, v, v)

    q = l_n * (c.UNIT + s_n) if l_n < 0.5 else l_n + s_n - l_n * s_n
    p = c.DIV_2 * l_n - q
    hk = wrap_hue(h) / c.HUE_MAX

    def channel(t: float) -> float:
        t = t % 1.0
        if t < 1.0 / 6.0:
            return p + (q - p) * 6.0 * t
        if t < 0.5:
            return q
        if t < 2.0 / 3.0:
            return p + (q - p) * (2.0 / 3.0 - t) * 6.0
        return p

    return (
        _to_byte(channel(hk + 1.0 / 3.0) * c.RGB_MAX),
        _to_byte(channel(hk) * c.RGB_MAX),
        _to_byte(channel(hk - 1.0 / 3.0) * c.RGB_MAX),
    )


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSV (h in degrees, s and v in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta) if delta > 0 else 0.0
    s = 0.0 if cmax == 0 else delta / cmax
    return (h, _clamp100(s * c.PERCENT), _clamp100(cmax * c.PERCENT))


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (percent saturation and value) to RGB."""
    h = wrap_hue(h)
    s_n = _clamp100(s) / c.PERCENT
    v_n = _clamp100(v) / c.PERCENT
    chroma = v_n * s_n
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = v_n - chroma
    if h < 60:
        r_p, g_p, b_p = chroma, x, 0.0
    elif h < 120:
        r_p, g_p, b_p = x, chroma, 0.0
    elif h < 180:
        r_p, g_p, b_p = 0.0, chroma, x
    elif h < 240:
        r_p, g_p, b_p = 0.0, x, chroma
    elif h < 300:
        r_p, g_p, b_p = x, 0.0, chroma
    else:
        r_p, g_p, b_p = chroma, 0.0, x
    return (
        _to_byte((r_p + m) * c.RGB_MAX),
        _to_byte((g_p + m) * c.RGB_MAX),
        _to_byte((b_p + m) * c.RGB_MAX),
    )


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[int, int, int, int]:
    """Convert RGB to CMYK (integer percentages)."""
    r_n, g_n, b_n = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    k = c.UNIT - max(r_n, g_n, b_n)
    if k >= c.UNIT:
        return (0, 0, 0, 100)
    denom = c.UNIT - k
    return (
        int(round((c.UNIT - r_n - k) / denom * c.PERCENT)),
        int(round((c.UNIT - g_n - k) / denom * c.PERCENT)),
        int(round((c.UNIT - b_n - k) / denom * c.PERCENT)),
        int(round(k * c.PERCENT)),
    )


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK (percent) to RGB."""
    k_n = _clamp100(k) / c.PERCENT
    return (
        _to_byte(c.RGB_MAX * (c.UNIT - _clamp100(cy) / c.PERCENT) * (c.UNIT - k_n)),
        _to_byte(c.RGB_MAX * (c.UNIT - _clamp100(m) / c.PERCENT) * (c.UNIT - k_n)),
        _to_byte(c.RGB_MAX * (c.UNIT - _clamp100(y) / c.PERCENT) * (c.UNIT - k_n)),
    )


# ==========================================
# OKLab / OKLCH
# ==========================================

def rgb_to_oklab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    rgb_lin = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))

    lms = [sum(row[i] * rgb_lin[i] for i in range(3)) for row in c.M1_RGB_TO_LMS]
    l_, m_, s_ = (math.copysign(abs(v) ** c.OKLAB_CUBE_ROOT_EXP, v) for v in lms)

    ok_l, ok_a, ok_b = (
        row[0] * l_ + row[1] * m_ + row[2] * s_ for row in c.M2_LMS_TO_OKLAB
    )
    return ok_l, ok_a, ok_b


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to linear sRGB without clamping (values may leave [0, 1])."""
    l_, m_, s_ = (L + ka * a + kb * b for ka, kb in c.M2_INV_OKLAB_TO_LMS)
    lms = (l_ ** 3, m_ ** 3, s_ ** 3)
    r_lin, g_lin, b_lin = (
        row[0] * lms[0] + row[1] * lms[1] + row[2] * lms[2] for row in c.M1_INV_LMS_TO_RGB
    )
    return r_lin, g_lin, b_lin


def oklab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert OKLab to RGB, clamping out-of-range channels."""
    r_lin, g_lin, b_lin = oklab_to_linear_rgb(L, a, b)
    return (
        _to_byte(from_linear(_clamp01(r_lin)) * c.RGB_MAX),
        _to_byte(from_linear(_clamp01(g_lin)) * c.RGB_MAX),
        _to_byte(from_linear(_clamp01(b_lin)) * c.RGB_MAX),
    )


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = wrap_hue(math.degrees(math.atan2(b, a)))
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_oklch(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Direct RGB to OKLCH conversion."""
    L, a_val, b_val = rgb_to_oklab(r, g, b)
    return oklab_to_oklch(L, a_val, b_val)


# ==========================================
# CSS string parsers
# ==========================================

def parse_rgb_str(value: str) -> Optional[RGB]:
    """Parse 'rgb(r, g, b)' or 'rgba(r, g, b, a)'; returns None if no match."""
    m = _RGB_STR_RE.search(value or "")
    if not m:
        return None
    return tuple(_to_byte(float(m.group(i))) for i in (1, 2, 3))


def parse_hsl_str(value: str) -> Optional[RGB]:
    """Parse 'hsl(h, s%, l%)' or 'hsl(h s% l%)' into RGB; returns None if no match."""
    m = _HSL_STR_RE.search(value or "")
    if not m:
        return None
    h = float(m.group(1)) % c.HUE_MAX
    s = clamp(float(m.group(2)), 0.0, c.PERCENT)
    L = clamp(float(m.group(3)), 0.0, c.PERCENT)
    return hsl_to_rgb(h, s, L)


def parse_any(value: str) -> Optional[RGB]:
    """Parse a hex, rgb() or hsl() string into RGB."""
    h = parse_hex(value)
    if h:
        return hex_to_rgb(h)
    return parse_rgb_str(value) or parse_hsl_str(value)
