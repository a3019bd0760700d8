#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/command_registry.py

from . import (
    palette,
    scale,
    contrast,
    utility,
    theme,
    vision,
    mix,
    gradient,
    extract,
)

SUBCOMMANDS = {
    'palette': palette,
    'scale': scale,
    'contrast': contrast,
    'utility': utility,
    'theme': theme,
    'vision': vision,
    'mix': mix,
    'gradient': gradient,
    'extract': extract,
}
