#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/harmony/renderer.py

from typing import List, Optional, Sequence, Tuple

from chromalab.core import config as c
from chromalab.core.models import ColorStop
from chromalab.shared.formatting import to_css_hsl
from chromalab.shared.preview import print_color_block
from .scoring import PaletteScore


def render_mode_list(modes: List[Tuple[str, str, str]]) -> None:
    print()
    for mode, label, desc in modes:
        print(f"{c.MSG_BOLD_COLORS['info']}{mode:<16}{c.RESET}{c.BOLD_WHITE}{label:<16}{c.RESET}{desc}")
    print()


def render_palette(mode: str, colors: Sequence[ColorStop], score: Optional[PaletteScore] = None) -> None:
    label, _ = c.HARMONY_MODES[mode]
    print(f"\n{c.BOLD_WHITE}{label}{c.RESET}\n")
    for i, stop in enumerate(colors):
        title = f"{c.MSG_BOLD_COLORS['info']}color{f'{i + 1}':>10}{c.RESET}"
        print_color_block(stop.hex, title, end="")
        print(f"  {to_css_hsl(*stop.hsl)}")

    if score is not None:
        print()
        for key in ("overall", "balance", "accessibility", "harmony", "uniqueness"):
            print(f"{c.MSG_BOLD_COLORS['info']}{key:<18}{c.RESET}{c.BOLD_WHITE}: {getattr(score, key):>3}{c.RESET}")
    print()
