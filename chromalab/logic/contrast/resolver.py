#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/contrast/resolver.py

import argparse

from .engine import check_contrast
from .renderer import render_contrast


def resolve_contrast_input(args: argparse.Namespace) -> None:
    report = check_contrast(args.foreground, args.background, args.target)
    render_contrast(report, args.target)
