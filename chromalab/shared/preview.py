#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/preview.py

import re

from chromalab.core import config as c
from chromalab.core.conversions import hex_to_rgb

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def swatch(hex_code: str, width: int = 16) -> str:
    r, g, b = hex_to_rgb(hex_code)
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    padding = " " * max(0, 18 - get_visible_len(title))
    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch(hex_code)}  "
        f"{c.BOLD_WHITE}{hex_code.lower()}{c.RESET}",
        end=end,
    )


def print_pair_block(fg_hex: str, bg_hex: str, title: str, sample: str = " Aa ") -> None:
    """Print a text sample in `fg_hex` on a `bg_hex` background."""
    fr, fg, fb = hex_to_rgb(fg_hex)
    br, bg, bb = hex_to_rgb(bg_hex)
    padding = " " * max(0, 18 - get_visible_len(title))
    text = sample.center(16)
    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{br};{bg};{bb}m\033[38;2;{fr};{fg};{fb}m{text}{c.RESET}  "
        f"{c.BOLD_WHITE}{fg_hex.lower()} on {bg_hex.lower()}{c.RESET}"
    )
