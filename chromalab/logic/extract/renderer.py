#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/extract/renderer.py

from typing import Sequence

from chromalab.core import config as c
from chromalab.core.models import ColorStop
from chromalab.shared.formatting import to_css_hsl
from chromalab.shared.naming import nearest_name
from chromalab.shared.preview import print_color_block


def render_extracted(source: str, colors: Sequence[ColorStop], plain: bool = False) -> None:
    if plain:
        for stop in colors:
            print(stop.hex)
        return

    print(f"\n{c.BOLD_WHITE}{source}{c.RESET}\n")
    for i, stop in enumerate(colors):
        title = f"{c.MSG_BOLD_COLORS['info']}color{f'{i + 1}':>10}{c.RESET}"
        print_color_block(stop.hex, title, end="")
        print(f"  {to_css_hsl(*stop.hsl)}  {nearest_name(stop.rgb)}")
    print()
