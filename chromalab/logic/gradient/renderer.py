#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gradient/renderer.py

from typing import Sequence

from chromalab.core import config as c
from chromalab.shared.preview import print_color_block, swatch
from .engine import GradientStop


def render_gradient(stops: Sequence[GradientStop], ramp: Sequence[str], css: str) -> None:
    info = c.MSG_BOLD_COLORS['info']
    print()
    for s in stops:
        print_color_block(s.hex, f"{info}stop{f'{s.pos:g}%':>11}{c.RESET}")
    print()
    print(f"{' ' * 22}{''.join(swatch(h, 1) for h in ramp)}")
    print()
    print(f"{c.BOLD_WHITE}background: {css};{c.RESET}")
    print()
