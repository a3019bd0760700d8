#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/extract/resolver.py

import argparse

from chromalab.shared.logger import fail, log
from .engine import extract_colors, load_image
from .renderer import render_extracted


def resolve_extract_input(args: argparse.Namespace) -> None:
    try:
        image = load_image(args.image)
    except FileNotFoundError:
        fail(f"image not found: '{args.image}'")
    except ValueError as e:
        fail(str(e))

    colors = extract_colors(image, args.count)
    if not colors:
        log("warning", "no usable colors found: the image is transparent, gray or too dark/light")
    render_extracted(args.image, colors, plain=args.plain)
