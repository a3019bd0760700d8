#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/export/engine.py

import json
from typing import Callable, Dict, List, Mapping, Optional

from chromalab.core.models import ThemeTokenSet, UtilityColor

THEME_CSS_HEADER = """/**
 * Color system generated by chromalab
 *
 *  Layer 1  primitive   raw palette values (--palette-primary, --palette-secondary, ...)
 *  Layer 2  semantic    purpose-named tokens (--background, --primary, ...)
 *  Layer 3  component   apply via var(--token)
 *
 *  Surface elevation, lowest to highest:
 *   --background < --surface-dim < --card < --card-raised < --popover
 *
 *  Dark mode uses tonal elevation: higher surfaces are lighter.
 */"""


def _bare(name: str) -> str:
    return name[2:] if name.startswith("--") else name


def _palette_var(name: str) -> str:
    return f"--palette-{name}"


def _indent(lines: List[str], prefix: str = "  ") -> List[str]:
    return [prefix + line if line else line for line in lines]


def _utility_lines(tokens: ThemeTokenSet, mode: str) -> List[str]:
    lines = []
    for role, tok in tokens.utility.items():
        value = tok.light if mode == "light" else tok.dark
        subtle = tok.subtle if mode == "light" else tok.subtle_dark
        lines.append(f"  --{role}: {value};")
        lines.append(f"  --{role}-subtle: {subtle};")
    return lines


def build_theme_css(tokens: ThemeTokenSet, utility: Optional[Mapping[str, UtilityColor]] = None) -> str:
    """
    CSS custom properties: light values on :root, dark values both under
    prefers-color-scheme and on a .dark class for manual switching.
    """
    sem_light = [f"  {t.name}: {t.light};" for t in tokens.semantic]
    sem_dark = [f"  {t.name}: {t.dark};" for t in tokens.semantic]
    pal = [f"  {_palette_var(p.name)}: {p.hex};" for p in tokens.palette]

    lines = [
        THEME_CSS_HEADER,
        "",
        "/* Light mode (default) */",
        ":root {",
        "  /* Semantic tokens */",
        *sem_light,
        "",
        "  /* Utility state colors */",
        *_utility_lines(tokens, "light"),
        "",
        "  /* Primitive palette */",
        *pal,
        "}",
        "",
        "/* Dark mode (system preference) */",
        "@media (prefers-color-scheme: dark) {",
        "  :root {",
        *_indent(sem_dark),
        "",
        "    /* Utility */",
        *_indent(_utility_lines(tokens, "dark")),
        "  }",
        "}",
        "",
        '/* Manual dark mode: add class="dark" to <html> */',
        ".dark {",
        *sem_dark,
        "",
        *_utility_lines(tokens, "dark"),
        "}",
    ]
    return "\n".join(lines) + "\n"


def _description(utility: Optional[Mapping[str, UtilityColor]], role: str) -> str:
    if utility and role in utility:
        return utility[role].description
    return ""


def build_json_tokens(tokens: ThemeTokenSet, utility: Optional[Mapping[str, UtilityColor]] = None) -> str:
    """Design-token JSON tree: global palette, semantic light/dark and utility roles."""
    tree = {
        "global": {p.name: {"value": p.hex, "type": "color"} for p in tokens.palette},
        "semantic": {
            mode: {
                _bare(t.name): {
                    "value": t.light if mode == "light" else t.dark,
                    "type": "color",
                    "description": t.description,
                }
                for t in tokens.semantic
            }
            for mode in ("light", "dark")
        },
        "utility": {
            role: {
                "DEFAULT": {
                    "value": tok.base,
                    "type": "color",
                    "description": _description(utility, role),
                },
                "light": {"value": tok.light, "type": "color"},
                "dark": {"value": tok.dark, "type": "color"},
                "subtle": {"value": tok.subtle, "type": "color"},
            }
            for role, tok in tokens.utility.items()
        },
    }
    return json.dumps(tree, indent=2) + "\n"


def build_tailwind_config(tokens: ThemeTokenSet, utility: Optional[Mapping[str, UtilityColor]] = None) -> str:
    """Tailwind v3 config whose colors point at the CSS variables."""
    lines = [
        "/** @type {import('tailwindcss').Config} */",
        "module.exports = {",
        "  darkMode: 'class',",
        "  theme: {",
        "    extend: {",
        "      colors: {",
    ]
    for t in tokens.semantic:
        key = _bare(t.name)
        lines.append(f"        '{key}': 'var({t.name})',")
    for role in tokens.utility:
        lines.append(f"        '{role}': {{")
        lines.append(f"          DEFAULT: 'var(--{role})',")
        lines.append(f"          subtle: 'var(--{role}-subtle)',")
        lines.append("        },")
    for p in tokens.palette:
        lines.append(f"        'palette-{p.name}': 'var({_palette_var(p.name)})',")
    lines += [
        "      },",
        "    },",
        "  },",
        "};",
    ]
    return "\n".join(lines) + "\n"


def build_tailwind_v4(tokens: ThemeTokenSet, utility: Optional[Mapping[str, UtilityColor]] = None) -> str:
    """Tailwind v4 CSS-first @theme block."""
    lines = [
        "/* Tailwind v4: paste into your main CSS file together with the CSS variables export */",
        "",
        '@import "tailwindcss";',
        "",
        "@theme {",
        "  /* Semantic colors (light/dark via CSS variables) */",
    ]
    lines += [f"  --color-{_bare(t.name)}: var({t.name});" for t in tokens.semantic]
    lines += ["", "  /* Utility / state colors */"]
    for role, tok in tokens.utility.items():
        lines += [
            f"  --color-{role}: {tok.base};",
            f"  --color-{role}-light: {tok.light};",
            f"  --color-{role}-dark: {tok.dark};",
            f"  --color-{role}-subtle: {tok.subtle};",
        ]
    lines += ["", "  /* Raw palette */"]
    lines += [f"  --color-palette-{p.name}: {p.hex};" for p in tokens.palette]
    lines.append("}")
    return "\n".join(lines) + "\n"


def build_style_dictionary(tokens: ThemeTokenSet, utility: Optional[Mapping[str, UtilityColor]] = None) -> str:
    """DTCG-style token file ($value / $type / $description) for Style Dictionary."""

    def key(name: str) -> str:
        return _bare(name).replace("-", "_")

    tree = {
        "color": {
            "primitive": {
                p.name: {"$value": p.hex, "$type": "color", "$description": f"Palette slot {i + 1}"}
                for i, p in enumerate(tokens.palette)
            },
            "semantic": {
                mode: {
                    key(t.name): {
                        "$value": t.light if mode == "light" else t.dark,
                        "$type": "color",
                        "$description": t.description,
                    }
                    for t in tokens.semantic
                }
                for mode in ("light", "dark")
            },
            "utility": {
                role: {
                    "base": {
                        "$value": tok.base,
                        "$type": "color",
                        "$description": _description(utility, role),
                    },
                    "light": {"$value": tok.light, "$type": "color"},
                    "dark": {"$value": tok.dark, "$type": "color"},
                    "subtle": {"$value": tok.subtle, "$type": "color"},
                    "subtle_dark": {"$value": tok.subtle_dark, "$type": "color"},
                }
                for role, tok in tokens.utility.items()
            },
        }
    }
    return json.dumps(tree, indent=2) + "\n"


Builder = Callable[..., str]

EXPORT_FORMATS: Dict[str, Builder] = {
    "css": build_theme_css,
    "json": build_json_tokens,
    "tailwind": build_tailwind_config,
    "tailwind4": build_tailwind_v4,
    "style-dictionary": build_style_dictionary,
}


def export_theme(fmt: str, tokens: ThemeTokenSet, utility: Optional[Mapping[str, UtilityColor]] = None) -> str:
    """Render `tokens` in one of EXPORT_FORMATS; raises KeyError for an unknown format."""
    return EXPORT_FORMATS[fmt](tokens, utility)
