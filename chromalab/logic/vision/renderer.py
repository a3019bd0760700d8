#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/vision/renderer.py

from typing import Sequence, Tuple

from chromalab.core import config as c
from chromalab.shared.preview import print_color_block


def render_vision(base_hex: str, title: str, results: Sequence[Tuple[str, str]], intensity: float) -> None:
    perc = f"{round(intensity * 100)}%"
    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for kind, sim_hex in results:
        label = f"{c.MSG_BOLD_COLORS['info']}{kind[:7]}{perc:>9}{c.RESET}"
        print_color_block(sim_hex, label)
    print()
