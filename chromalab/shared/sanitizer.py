#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/sanitizer.py

import argparse
import re
from typing import Tuple

from chromalab.core import config as c
from chromalab.core.conversions import parse_any, rgb_to_hex
from .naming import lookup_name


def _sanitize_for_log(value) -> str:
    """Collapse whitespace and newlines so the value logs on one line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving a leading minus sign.
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a float from a string, preserving the sign and keeping only
    the first decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Lowercased letters, digits and dashes only; used for ids like mode names."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z0-9_\-]", s))


def resolve_color(value: str) -> str:
    """
    Resolve hex, rgb(), hsl() or a CSS color name to canonical '#rrggbb'.
    Returns an empty string when nothing matches.
    """
    if value is None:
        return ""
    named = lookup_name(value)
    if named:
        return named
    rgb = parse_any(str(value).strip())
    if rgb is None:
        return ""
    return rgb_to_hex(*rgb)


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> str:
    """Validator for any color notation: hex, rgb(), hsl() or a CSS name."""
    cleaned = resolve_color(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color value: '{raw}'")
    return cleaned


def handle_choice(choices):
    """
    Factory returning a validator that normalizes an identifier and checks
    it against `choices`.
    """
    allowed = list(choices)
    lookup = {str(ch).lower(): ch for ch in allowed}

    def validator(v: str) -> str:
        cleaned = _extract_alpha_only(v)
        if cleaned not in lookup:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(
                f"invalid choice: '{raw}' (choose from {', '.join(map(str, allowed))})"
            )
        return lookup[cleaned]
    return validator


def handle_role_assignment(v: str) -> Tuple[str, str]:
    """Validator for ROLE=COLOR pairs such as 'error=#d92d20'."""
    raw = _sanitize_for_log(v)
    if "=" not in str(v):
        raise argparse.ArgumentTypeError(f"expected ROLE=COLOR, got: '{raw}'")
    role, _, value = str(v).partition("=")
    role = _extract_alpha_only(role)
    if role not in c.UTILITY_ROLES:
        raise argparse.ArgumentTypeError(
            f"unknown utility role: '{role}' (choose from {', '.join(c.UTILITY_ROLES)})"
        )
    return role, handle_color(value)


def handle_gradient_stop(v: str) -> Tuple[str, float]:
    """Validator for COLOR@POS gradient stops such as '#ff0000@25' (POS in percent)."""
    raw = _sanitize_for_log(v)
    color, sep, pos = str(v).rpartition("@")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected COLOR@POS, got: '{raw}'")
    val = _extract_signed_float(pos)
    if val is None:
        raise argparse.ArgumentTypeError(f"invalid stop position: '{raw}'")
    return handle_color(color), max(0.0, min(100.0, val))


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color,
    "harmony_mode": handle_choice(c.HARMONY_MODES),
    "export_format": handle_choice(c.EXPORT_FORMAT_KEYS),
    "cvd_type": handle_choice(c.CVD_MATRICES),
    "mix_space": handle_choice(c.MIX_SPACES),
    "role_assignment": handle_role_assignment,
    "gradient_stop": handle_gradient_stop,
    "gradient_kind": handle_choice(c.GRADIENT_KINDS),
    "gradient_space": handle_choice(c.GRADIENT_SPACES),

    "float_0_1": handle_float_range(0.0, 1.0),
    "contrast_target": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),

    "count": handle_int_range(1, c.MAX_COUNT),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
    "steps": handle_int_range(1, c.MAX_STEPS),
}
