#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/contrast/engine.py

from dataclasses import dataclass
from typing import Optional, Tuple

from chromalab.core import config as c
from chromalab.core.contrast import (
    apca_contrast,
    apca_level,
    get_contrast_ratio_rgb,
    suggest_contrast_fix,
    wcag_level,
)
from chromalab.core.conversions import hex_to_rgb


@dataclass(frozen=True)
class ContrastReport:
    fg: str
    bg: str
    ratio: float
    level: str
    apca: int
    apca_level: str
    passes_target: bool
    fix: Optional[Tuple[str, str]] = None


def check_contrast(fg: str, bg: str, target: float = c.WCAG_AA_NORMAL) -> ContrastReport:
    """WCAG and APCA contrast of `fg` text on `bg`, plus a fix when it falls short."""
    fg_rgb, bg_rgb = hex_to_rgb(fg), hex_to_rgb(bg)
    ratio = get_contrast_ratio_rgb(fg_rgb, bg_rgb)
    lc = apca_contrast(fg_rgb, bg_rgb)
    passes = ratio >= target
    return ContrastReport(
        fg=fg,
        bg=bg,
        ratio=ratio,
        level=wcag_level(ratio),
        apca=lc,
        apca_level=apca_level(lc),
        passes_target=passes,
        fix=None if passes else suggest_contrast_fix(fg, bg_rgb, target),
    )
