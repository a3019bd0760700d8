#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/mix/renderer.py

from typing import Sequence

from chromalab.core import config as c
from chromalab.shared.preview import print_color_block


def render_mix(inputs: Sequence[str], colors: Sequence[str], colorspace: str) -> None:
    info = c.MSG_BOLD_COLORS['info']
    print()
    for i, hex_code in enumerate(inputs):
        print_color_block(hex_code, f"{c.BOLD_WHITE}input{f'{i + 1}':>10}{c.RESET}")
    print()
    if len(colors) == 1:
        print_color_block(colors[0], f"{info}{colorspace} mix{c.RESET}")
    else:
        for i, hex_code in enumerate(colors):
            print_color_block(hex_code, f"{info}step{f'{i + 1}':>11}{c.RESET}")
    print()
