#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/theme/resolver.py

import argparse
import sys

from chromalab.logic.export.engine import export_theme
from chromalab.logic.utility.engine import generate_utility_colors
from chromalab.logic.utility.resolver import resolve_palette_colors
from chromalab.shared.logger import fail, log
from .engine import derive_theme_tokens
from .renderer import render_theme


def resolve_theme_input(args: argparse.Namespace) -> None:
    palette = resolve_palette_colors(args)
    utility = generate_utility_colors(palette)
    tokens = derive_theme_tokens(palette, utility)

    if args.format is None and not args.output:
        render_theme(tokens)
        return

    text = export_theme(args.format or "css", tokens, utility)
    if not args.output:
        sys.stdout.write(text)
        return
    try:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        fail(f"cannot write '{args.output}': {e.strerror}")
    log("success", f"wrote {args.format or 'css'} tokens to {args.output}")
