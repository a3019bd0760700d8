#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/color/renderer.py

import argparse
from typing import Any, Dict, Optional

from chromalab.core import config as c
from chromalab.shared.formatting import format_colorspace
from chromalab.shared.preview import print_color_block


def _zero_small(v: float, threshold: float = 1e-4) -> float:
    """Zero out small floating-point values below a threshold."""
    return 0.0 if abs(v) <= threshold else v


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw an ANSI-colored bar representation of a value."""
    total_len = 16
    abs_val = min(abs(val), max_val)
    percent = abs_val / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"

    if val < 0:
        return f"{empty_ansi}{'░' * empty}{c.RESET}{color_ansi}{'█' * filled}{c.RESET}"
    return f"{color_ansi}{'█' * filled}{c.RESET}{empty_ansi}{'░' * empty}{c.RESET}"


def _label(text: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{text}{c.RESET}{' ' * max(1, 18 - len(text))}{c.BOLD_WHITE}:"


def _bar_line(letter: str, bar: str, suffix: str = "") -> None:
    print(f"                    {c.BOLD_WHITE}{letter}{c.RESET} {bar}{suffix}")


def render_color_info(
    hex_code: str,
    title: str,
    args: argparse.Namespace,
    rgb: tuple,
    luminance: Optional[float] = None,
    tech_data: Optional[Dict[str, Any]] = None,
    contrast_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Print color information. All values are computed by the engine."""
    print()
    print_color_block(hex_code, f"{c.BOLD_WHITE}{title}{c.RESET}")

    hide_bars = getattr(args, "hide_bars", False)
    r, g, b = rgb
    data = tech_data or {}

    if "name" in data:
        print(f"\n{_label('name')} {data['name']}{c.RESET}")

    if luminance is not None and getattr(args, "luminance", False):
        print(f"\n{_label('luminance')} {luminance:.6f}{c.RESET}")
        if not hide_bars:
            _bar_line("L", _draw_bar(luminance, 1.0, 200, 200, 200))

    if getattr(args, "rgb", False):
        print(f"\n{_label('rgb')} {format_colorspace('rgb', r, g, b)}{c.RESET}")
        if not hide_bars:
            _bar_line("R", _draw_bar(r, 255, 255, 60, 60), f" {c.BOLD_WHITE}{(r / 255) * 100:6.2f}%{c.RESET}")
            _bar_line("G", _draw_bar(g, 255, 60, 255, 60), f" {c.BOLD_WHITE}{(g / 255) * 100:6.2f}%{c.RESET}")
            _bar_line("B", _draw_bar(b, 255, 60, 80, 255), f" {c.BOLD_WHITE}{(b / 255) * 100:6.2f}%{c.RESET}")

    if "hsl" in data:
        h, s, l_hsl = data["hsl"]
        print(f"\n{_label('hsl')} {format_colorspace('hsl', h, s, l_hsl)}{c.RESET}")
        if not hide_bars:
            _bar_line("H", _draw_bar(h, 360, 255, 200, 0))
            _bar_line("S", _draw_bar(s, 100, 0, 200, 255))
            _bar_line("L", _draw_bar(l_hsl, 100, 200, 200, 200))

    if "hsv" in data:
        h, s, v = data["hsv"]
        print(f"\n{_label('hsv')} {format_colorspace('hsv', h, s, v)}{c.RESET}")
        if not hide_bars:
            _bar_line("H", _draw_bar(h, 360, 255, 200, 0))
            _bar_line("S", _draw_bar(s, 100, 0, 200, 255))
            _bar_line("V", _draw_bar(v, 100, 200, 200, 200))

    if "cmyk" in data:
        cy, m, y_cmyk, k = data["cmyk"]
        print(f"\n{_label('cmyk')} {format_colorspace('cmyk', cy, m, y_cmyk, k)}{c.RESET}")
        if not hide_bars:
            _bar_line("C", _draw_bar(cy, 100, 0, 255, 255))
            _bar_line("M", _draw_bar(m, 100, 255, 0, 255))
            _bar_line("Y", _draw_bar(y_cmyk, 100, 255, 255, 0))
            _bar_line("K", _draw_bar(k, 100, 100, 100, 100))

    if "oklab" in data:
        l_ok, a_ok, b_ok = data["oklab"]
        a_comp, b_comp = _zero_small(a_ok), _zero_small(b_ok)
        print(f"\n{_label('oklab')} {format_colorspace('oklab', l_ok, a_comp, b_comp)}{c.RESET}")
        if not hide_bars:
            _bar_line("L", _draw_bar(l_ok, 1.0, 200, 200, 200))
            _bar_line("A", _draw_bar(a_comp, 0.4, 60, 255, 60))
            _bar_line("B", _draw_bar(b_comp, 0.4, 60, 60, 255))

    if "oklch" in data:
        l_oklch, c_oklch, h_oklch = data["oklch"]
        print(f"\n{_label('oklch')} {format_colorspace('oklch', l_oklch, c_oklch, h_oklch)}{c.RESET}")
        if not hide_bars:
            _bar_line("L", _draw_bar(l_oklch, 1.0, 200, 200, 200))
            _bar_line("C", _draw_bar(c_oklch / 0.4, 1.0, 255, 60, 255))
            _bar_line("H", _draw_bar(h_oklch, 360, 255, 200, 0))
        if "max_chroma" in data:
            print(f"{_label('gamut')} chroma ceiling {data['max_chroma']:.4f}{c.RESET}")

    if contrast_data:
        bg_ansi = f"\033[48;2;{r};{g};{b}m"
        info_c = c.MSG_BOLD_COLORS["info"]
        succ_c, err_c = c.MSG_BOLD_COLORS["success"], c.MSG_BOLD_COLORS["error"]

        def fmt_status(status: str) -> str:
            return f"{succ_c}Pass{info_c}" if status == "Pass" else f"{err_c}Fail{info_c}"

        print(f"\n{_label('contrast')} text {contrast_data['text']}{c.RESET}")
        for key, fg in (("white", "255;255;255"), ("black", "0;0;0")):
            entry = contrast_data[key]
            block = f"{bg_ansi}\033[1;38;2;{fg}m{key:^16}{c.RESET}"
            aa, aaa = fmt_status(entry["levels"]["AA"]), fmt_status(entry["levels"]["AAA"])
            print(
                f"                    {block}  {c.BOLD_WHITE}{entry['ratio']:5.2f}:1 "
                f"{info_c}(AA:{aa}, AAA:{aaa}) Lc {entry['apca']:+d}{c.RESET}"
            )

    print()
