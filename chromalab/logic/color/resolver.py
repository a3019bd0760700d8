#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/color/resolver.py

import argparse
import random
from typing import Tuple

from chromalab.core import config as c
from chromalab.shared.logger import fail, log
from chromalab.shared.naming import get_title_for_hex


def resolve_color_input(args: argparse.Namespace) -> Tuple[str, str]:
    """Resolve raw CLI input into a base hex and a display title."""
    if args.random:
        rng = random.Random(args.seed)
        return f"#{rng.randint(0, c.MAX_DEC):06x}", "random"
    if args.hex:
        return args.hex, get_title_for_hex(args.hex)

    log("info", "use 'chromalab --help' for more information")
    fail("one of the arguments -H/--hex -r/--random is required")
