#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/theme/renderer.py

from chromalab.core import config as c
from chromalab.core.models import ThemeTokenSet
from chromalab.shared.preview import swatch


def render_theme(tokens: ThemeTokenSet) -> None:
    """Side-by-side light and dark swatches for every token."""
    info = c.MSG_BOLD_COLORS['info']
    print(f"\n{c.BOLD_WHITE}{'token':<32}{'light':<18}dark{c.RESET}")
    for tok in tokens.semantic:
        print(
            f"{info}{tok.name:<32}{c.RESET}{swatch(tok.light, 6)} {tok.light:<10} "
            f"{swatch(tok.dark, 6)} {tok.dark}"
        )
    print()
    for role, tok in tokens.utility.items():
        print(
            f"{info}{'--' + role:<32}{c.RESET}{swatch(tok.light, 6)} {tok.light:<10} "
            f"{swatch(tok.dark, 6)} {tok.dark}"
        )
    print()
    for p in tokens.palette:
        print(f"{info}{'--palette-' + p.name:<32}{c.RESET}{swatch(p.hex, 6)} {p.hex}")
    print()
