#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/scale/renderer.py

from typing import Optional, Sequence

from chromalab.core import config as c
from chromalab.shared.formatting import to_css_oklch
from chromalab.shared.preview import print_color_block
from .engine import ScaleStep


def render_scale(base_hex: str, steps: Sequence[ScaleStep], css_prefix: Optional[str] = None) -> None:
    if css_prefix:
        for s in steps:
            print(f"--{css_prefix}-{s.step}: {s.color.hex};")
        return

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}base{c.RESET}")
    print()
    for s in steps:
        label = f"{c.MSG_BOLD_COLORS['info']}{s.step:>4}{c.RESET}"
        print_color_block(s.color.hex, label, end="")
        print(f"  {to_css_oklch(*s.color.oklch)}")
    print()
