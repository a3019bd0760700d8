#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/theme/engine.py

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from chromalab.core import config as c
from chromalab.core.conversions import rgb_to_hex
from chromalab.core.gamut import oklch_to_rgb
from chromalab.core.models import (
    PaletteToken,
    SemanticToken,
    ThemeTokenSet,
    UtilityColor,
    UtilityToken,
    palette_colors,
)
from chromalab.logic.utility.engine import generate_utility_colors
from chromalab.shared.clamping import clamp
from chromalab.shared.naming import approx_color_name, slugify

OKLCH = Tuple[float, float, float]

# Token name -> description, in output order
SEMANTIC_TOKENS = (
    ("--background", "Page / canvas background"),
    ("--foreground", "Default body text"),
    ("--surface-dim", "Subtle bg: striped rows, aside panels, code wells"),
    ("--surface-dim-foreground", "Text on dim surface"),
    ("--card", "Card / content block background"),
    ("--card-foreground", "Card text"),
    ("--card-raised", "Raised card, sidebar, drawer"),
    ("--card-raised-foreground", "Text on raised card"),
    ("--popover", "Popover, tooltip, dropdown, modal background"),
    ("--popover-foreground", "Popover text"),
    ("--primary", "Primary CTA: buttons, links, active nav"),
    ("--primary-foreground", "Text/icon on primary"),
    ("--primary-container", "Large sections, hero bg, secondary CTA surface"),
    ("--primary-container-foreground", "Text on primary-container"),
    ("--secondary", "Secondary buttons, less-prominent surfaces"),
    ("--secondary-foreground", "Text on secondary"),
    ("--muted", "Muted surface: disabled states, placeholder backgrounds"),
    ("--muted-foreground", "Secondary / placeholder text"),
    ("--accent", "Hover surface, selected state, highlight chip bg"),
    ("--accent-foreground", "Text on accent surface"),
    ("--destructive", "Error / delete actions"),
    ("--destructive-foreground", "Text on destructive"),
    ("--destructive-subtle", "Error alert background / inline error tint"),
    ("--border", "Default divider / border"),
    ("--border-strong", "High-emphasis border: active inputs, selected cards"),
    ("--input", "Form input border"),
    ("--ring", "Keyboard focus ring, matches primary brand color"),
)

SEMANTIC_TOKEN_NAMES = tuple(name for name, _ in SEMANTIC_TOKENS)


def _hex(L: float, chroma: float, hue: float) -> str:
    return rgb_to_hex(*oklch_to_rgb(L, chroma, hue))


def chroma_ranking(oklchs: Sequence[OKLCH]) -> List[int]:
    """Indexes ordered by descending chroma; ties keep palette order."""
    return sorted(range(len(oklchs)), key=lambda i: -oklchs[i][1])


def semantic_slot_names(palette: Sequence) -> List[str]:
    """
    Name each palette slot for export: the most saturated slot is
    'primary', the next 'secondary', the rest get a hue-bucket name.
    Repeated names are suffixed -2, -3 and so on.
    """
    oklchs = [stop.oklch for stop in palette_colors(palette)]
    names = [""] * len(oklchs)
    used = set()
    for rank, i in enumerate(chroma_ranking(oklchs)):
        if rank < len(c.THEME_PALETTE_SLOT_NAMES):
            base = c.THEME_PALETTE_SLOT_NAMES[rank]
        else:
            base = slugify(approx_color_name(*oklchs[i]))
        name, counter = base, 2
        while name in used:
            name = f"{base}-{counter}"
            counter += 1
        names[i] = name
        used.add(name)
    return names


def utility_token(color: UtilityColor) -> UtilityToken:
    """Light, dark and subtle alert variants of one utility role."""
    L, chroma, hue = color.color.oklch
    light_adj = -0.10 if color.role == "warning" else -0.06
    dark_adj = 0.04 if color.role == "warning" else 0.08
    return UtilityToken(
        base=color.color.hex,
        light=_hex(clamp(L + light_adj, 0.34, 0.55), clamp(chroma * 1.05, 0.10, 0.26), hue),
        dark=_hex(clamp(L + dark_adj, 0.50, 0.78), clamp(chroma * 0.88, 0.08, 0.22), hue),
        subtle=_hex(0.945, clamp(chroma * 0.3, 0.02, 0.07), hue),
        subtle_dark=_hex(0.16, clamp(chroma * 0.32, 0.02, 0.08), hue),
    )


def derive_theme_tokens(
    palette: Sequence, utility: Optional[Mapping[str, UtilityColor]] = None
) -> ThemeTokenSet:
    """
    Derive the light and dark design-token set for a palette.

    Neutrals are never pure gray: every surface, border and text token is
    built by one helper that tints a target lightness with the primary hue.
    Primary, accent and destructive get their own lightness bands per mode,
    and dark surfaces rise in lightness with elevation.
    """
    utility = utility or {}
    colors = palette_colors(palette)
    if not colors:
        return ThemeTokenSet()

    oklchs = [stop.oklch for stop in colors]
    ranking = chroma_ranking(oklchs)
    p_l, p_c, p_h = oklchs[ranking[0]]
    if len(ranking) > 1:
        s_h = oklchs[ranking[1]][2]
    else:
        s_h = p_h

    tint_c = clamp(p_c * 0.06, *c.THEME_TINT_C_RANGE)

    def neutral(L: float, chroma: Optional[float] = None, hue: Optional[float] = None) -> str:
        return _hex(
            clamp(L, *c.THEME_NEUTRAL_L_RANGE),
            tint_c if chroma is None else chroma,
            p_h if hue is None else hue,
        )

    primary_light = _hex(clamp(p_l, *c.THEME_PRIMARY_LIGHT_L), clamp(p_c, 0.14, 0.32), p_h)
    primary_dark = _hex(clamp(p_l + 0.35, *c.THEME_PRIMARY_DARK_L), clamp(p_c * 0.85, 0.10, 0.28), p_h)

    error = utility.get("error") or generate_utility_colors(colors)["error"]
    e_l, e_c, e_h = error.color.oklch

    def dark_surface(level: int) -> str:
        return neutral(
            0.08 + level * 0.028,
            clamp(p_c * (0.04 + level * 0.012), 0.004, 0.025),
        )

    surface_light = [neutral(L) for L in c.THEME_SURFACE_LIGHT_L]
    surface_dark = [dark_surface(level) for level in c.THEME_SURFACE_DARK_LEVELS]

    values: Dict[str, Tuple[str, str]] = {
        "--background": (surface_light[0], surface_dark[0]),
        "--foreground": (neutral(0.10), neutral(0.94)),
        "--surface-dim": (surface_light[1], surface_dark[1]),
        "--surface-dim-foreground": (neutral(0.25), neutral(0.80)),
        "--card": (surface_light[2], surface_dark[2]),
        "--card-foreground": (neutral(0.10), neutral(0.94)),
        "--card-raised": (surface_light[3], surface_dark[3]),
        "--card-raised-foreground": (neutral(0.10), neutral(0.94)),
        "--popover": (surface_light[4], surface_dark[4]),
        "--popover-foreground": (neutral(0.10), neutral(0.94)),
        "--primary": (primary_light, primary_dark),
        "--primary-foreground": (neutral(0.985, 0.004), neutral(0.12, 0.01)),
        "--primary-container": (
            _hex(0.92, clamp(p_c * 0.38, 0.03, 0.10), p_h),
            _hex(0.24, clamp(p_c * 0.35, 0.03, 0.09), p_h),
        ),
        "--primary-container-foreground": (
            _hex(0.20, clamp(p_c * 0.5, 0.06, 0.16), p_h),
            _hex(0.88, clamp(p_c * 0.45, 0.05, 0.14), p_h),
        ),
        "--secondary": (neutral(0.96, hue=s_h), neutral(0.18, hue=s_h)),
        "--secondary-foreground": (neutral(0.14, hue=s_h), neutral(0.93, hue=s_h)),
        "--muted": (neutral(0.94), neutral(0.20)),
        "--muted-foreground": (neutral(0.46), neutral(0.62)),
        "--accent": (
            _hex(0.935, clamp(p_c * 0.38, 0.03, 0.11), p_h),
            _hex(0.24, clamp(p_c * 0.38, 0.03, 0.10), p_h),
        ),
        "--accent-foreground": (neutral(0.14), neutral(0.93)),
        "--destructive": (
            _hex(clamp(e_l, 0.42, 0.52), clamp(e_c, 0.18, 0.28), e_h),
            _hex(clamp(e_l + 0.12, 0.56, 0.72), clamp(e_c * 0.88, 0.14, 0.26), e_h),
        ),
        "--destructive-foreground": (neutral(0.985, 0.004), neutral(0.985, 0.004)),
        "--destructive-subtle": (
            _hex(0.94, clamp(e_c * 0.28, 0.03, 0.08), e_h),
            _hex(0.18, clamp(e_c * 0.28, 0.03, 0.07), e_h),
        ),
        "--border": (neutral(0.86), neutral(0.26)),
        "--border-strong": (neutral(0.72), neutral(0.40)),
        "--input": (neutral(0.86), neutral(0.24)),
        "--ring": (primary_light, primary_dark),
    }

    semantic = tuple(
        SemanticToken(name=name, light=values[name][0], dark=values[name][1], description=desc)
        for name, desc in SEMANTIC_TOKENS
    )
    utility_tokens = {
        role: utility_token(utility[role]) for role in c.UTILITY_ROLES if role in utility
    }
    palette_tokens = tuple(
        PaletteToken(name=name, hex=stop.hex)
        for name, stop in zip(semantic_slot_names(colors), colors)
    )
    return ThemeTokenSet(semantic=semantic, utility=utility_tokens, palette=palette_tokens)


def merge_theme_tokens(
    existing: Optional[ThemeTokenSet], generated: ThemeTokenSet, locked: Iterable[str] = ()
) -> ThemeTokenSet:
    """
    Keep semantic tokens and utility roles named in `locked` from `existing`;
    everything else comes from `generated`. Palette tokens always follow
    the new palette.
    """
    if existing is None:
        return generated
    lock_mask = set(locked)
    old_semantic = {tok.name: tok for tok in existing.semantic}
    semantic = tuple(
        old_semantic[tok.name] if tok.name in lock_mask and tok.name in old_semantic else tok
        for tok in generated.semantic
    )
    utility = {
        role: existing.utility[role] if role in lock_mask and role in existing.utility else tok
        for role, tok in generated.utility.items()
    }
    return ThemeTokenSet(semantic=semantic, utility=utility, palette=generated.palette)
