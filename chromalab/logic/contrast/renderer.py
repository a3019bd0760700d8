#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/contrast/renderer.py

from chromalab.core import config as c
from chromalab.shared.preview import print_color_block, print_pair_block
from .engine import ContrastReport


def render_contrast(report: ContrastReport, target: float) -> None:
    info = c.MSG_BOLD_COLORS['info']
    status = (
        f"{c.MSG_BOLD_COLORS['success']}Pass" if report.passes_target
        else f"{c.MSG_BOLD_COLORS['error']}Fail"
    )
    print()
    print_color_block(report.fg, f"{info}foreground{c.RESET}")
    print_color_block(report.bg, f"{info}background{c.RESET}")
    print_pair_block(report.fg, report.bg, f"{info}sample{c.RESET}")
    print()
    print(f"{info}{'wcag ratio':<18}{c.RESET}{c.BOLD_WHITE}: {report.ratio:.2f}:1 ({report.level}){c.RESET}")
    print(f"{info}{'target':<18}{c.RESET}{c.BOLD_WHITE}: {target:.2f}:1 {status}{c.RESET}")
    print(f"{info}{'apca':<18}{c.RESET}{c.BOLD_WHITE}: Lc {report.apca:+d} ({report.apca_level}){c.RESET}")

    if report.fix:
        fixed_hex, direction = report.fix
        print()
        print_color_block(fixed_hex, f"{info}{direction}{c.RESET}")
        print_pair_block(fixed_hex, report.bg, f"{info}fixed sample{c.RESET}")
    elif not report.passes_target:
        print()
        print(f"{c.MSG_BOLD_COLORS['warning']}no lightness change reaches the target on this background{c.RESET}")
    print()
