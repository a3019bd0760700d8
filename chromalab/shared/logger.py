#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/logger.py

import sys
import argparse

from chromalab.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def fail(message: str) -> None:
    """Log an error and exit with the CLI usage error code."""
    log('error', message)
    sys.exit(2)


class ChromalabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report argparse errors through the color logger, then exit with code 2."""
        fail(message)
