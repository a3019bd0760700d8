#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit color support so swatches render as true RGB blocks."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") not in ("truecolor", "24bit"):
        os.environ["COLORTERM"] = "truecolor"
