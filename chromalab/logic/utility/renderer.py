#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/utility/renderer.py

from typing import Mapping, Sequence

from chromalab.core import config as c
from chromalab.core.models import ColorStop, UtilityColor
from chromalab.shared.preview import print_color_block


def render_utility(palette: Sequence[ColorStop], utility: Mapping[str, UtilityColor]) -> None:
    info = c.MSG_BOLD_COLORS['info']
    print()
    for i, stop in enumerate(palette):
        print_color_block(stop.hex, f"{c.BOLD_WHITE}palette{f'{i + 1}':>8}{c.RESET}")
    print()
    for role in c.UTILITY_ROLES:
        item = utility[role]
        lock = " (locked)" if item.locked else ""
        print_color_block(item.color.hex, f"{info}{role}{c.RESET}", end="")
        print(f"  {item.description}{lock}")
    print()
