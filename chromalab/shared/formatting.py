#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/formatting.py


def to_css_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r} {g} {b})"


def to_css_hsl(h: float, s: float, l: float) -> str:
    return f"hsl({round(h)} {round(s)}% {round(l)}%)"


def to_css_oklch(L: float, chroma: float, hue: float) -> str:
    return f"oklch({L:.4f} {chroma:.4f} {round(hue)})"


def to_css_oklab(L: float, a: float, b: float) -> str:
    return f"oklab({L:.4f} {a:.4f} {b:.4f})"


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return to_css_rgb(*args)
    elif fmt == 'hsl':
        return to_css_hsl(*args)
    elif fmt == 'hsv':
        h, s, v = args
        return f"hsv({round(h)} {round(s)}% {round(v)}%)"
    elif fmt == 'cmyk':
        cy, m, y, k = args
        return f"cmyk({cy}% {m}% {y}% {k}%)"
    elif fmt == 'oklab':
        return to_css_oklab(*args)
    elif fmt == 'oklch':
        return to_css_oklch(*args)

    return ""
