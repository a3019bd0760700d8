#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/models.py

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from .conversions import RGB, hex_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_oklch


@dataclass(frozen=True)
class ColorStop:
    """Canonical color: hex plus the RGB and HSL derived from it."""
    hex: str
    rgb: RGB
    hsl: Tuple[float, float, float]

    @property
    def oklch(self) -> Tuple[float, float, float]:
        return rgb_to_oklch(*self.rgb)


@dataclass(frozen=True)
class PaletteSlot:
    color: ColorStop
    locked: bool = False
    name: Optional[str] = None


@dataclass(frozen=True)
class UtilityColor:
    role: str
    label: str
    description: str
    color: ColorStop
    locked: bool = False


@dataclass(frozen=True)
class SemanticToken:
    name: str
    light: str
    dark: str
    description: str = ""


@dataclass(frozen=True)
class UtilityToken:
    base: str
    light: str
    dark: str
    subtle: str
    subtle_dark: str


@dataclass(frozen=True)
class PaletteToken:
    name: str
    hex: str


@dataclass(frozen=True)
class ThemeTokenSet:
    semantic: Tuple[SemanticToken, ...] = ()
    utility: Dict[str, UtilityToken] = field(default_factory=dict)
    palette: Tuple[PaletteToken, ...] = ()

    def token(self, name: str) -> Optional[SemanticToken]:
        for tok in self.semantic:
            if tok.name == name:
                return tok
        return None


UtilityColorSet = Dict[str, UtilityColor]


def rgb_to_stop(r: int, g: int, b: int) -> ColorStop:
    """Build a ColorStop from RGB; hex and HSL are derived from the same RGB."""
    hex_code = rgb_to_hex(r, g, b)
    rgb = hex_to_rgb(hex_code)
    return ColorStop(hex=hex_code, rgb=rgb, hsl=rgb_to_hsl(*rgb))


def hex_to_stop(hex_code: str) -> ColorStop:
    """Build a ColorStop from a hex string (an alpha byte is dropped)."""
    return rgb_to_stop(*hex_to_rgb(hex_code))


def slots_from_hexes(hexes: Sequence[str], locked: Sequence[int] = ()) -> List[PaletteSlot]:
    """Build palette slots from hex strings; indexes in `locked` start locked."""
    locked_set = set(locked)
    return [
        PaletteSlot(color=hex_to_stop(h), locked=i in locked_set)
        for i, h in enumerate(hexes)
    ]


def toggle_lock(slots: Sequence[PaletteSlot], index: int) -> List[PaletteSlot]:
    """Return a copy of `slots` with the lock at `index` flipped."""
    out = list(slots)
    if 0 <= index < len(out):
        out[index] = replace(out[index], locked=not out[index].locked)
    return out


def regenerate_slots(
    slots: Sequence[PaletteSlot], colors: Sequence[ColorStop]
) -> List[PaletteSlot]:
    """
    Merge freshly generated colors into an existing palette.

    The result has one slot per generated color. A slot whose existing
    counterpart at the same index is locked is carried over unchanged;
    every other slot takes the new color and drops any stale name.
    """
    merged = []
    for i, color in enumerate(colors):
        prev = slots[i] if i < len(slots) else None
        if prev is not None and prev.locked:
            merged.append(prev)
        else:
            merged.append(PaletteSlot(color=color))
    return merged


def palette_colors(palette: Sequence) -> List[ColorStop]:
    """Accept slots, stops or hex strings and return the ColorStops."""
    colors = []
    for item in palette:
        if isinstance(item, PaletteSlot):
            colors.append(item.color)
        elif isinstance(item, ColorStop):
            colors.append(item)
        else:
            colors.append(hex_to_stop(item))
    return colors
