"""Test theme export formats.

Tests for chromalab.logic.export.engine:
    - CSS custom properties with light, system-dark and class-dark blocks
    - design-token JSON and Style Dictionary trees
    - Tailwind v3 config and v4 @theme output
"""

import json
import re

import pytest

from chromalab.core import config as c
from chromalab.logic.export.engine import (
    EXPORT_FORMATS,
    build_json_tokens,
    build_style_dictionary,
    build_tailwind_config,
    build_tailwind_v4,
    build_theme_css,
    export_theme,
)
from chromalab.logic.theme.engine import SEMANTIC_TOKEN_NAMES, derive_theme_tokens
from chromalab.logic.utility.engine import generate_utility_colors

PALETTE = ["#3366ff", "#ff8800", "#22aa66"]


def _css_blocks(css):
    """Split the CSS export into its light, system-dark and class-dark parts."""
    light, rest = css.split("/* Dark mode (system preference) */")
    system_dark, class_dark = rest.split("/* Manual dark mode")
    return light, system_dark, class_dark


def _declared(block):
    return re.findall(r"^\s*(--[a-z0-9-]+):", block, re.M)


@pytest.fixture
def utility():
    return generate_utility_colors(PALETTE)


@pytest.fixture
def tokens(utility):
    return derive_theme_tokens(PALETTE, utility)


def test_formats_registry():
    assert list(EXPORT_FORMATS) == c.EXPORT_FORMAT_KEYS


def test_css_blocks(tokens):
    css = build_theme_css(tokens)
    assert ":root {" in css
    assert "@media (prefers-color-scheme: dark) {" in css
    assert ".dark {" in css
    background = tokens.token("--background")
    assert f"  --background: {background.light};" in css
    assert f"  --background: {background.dark};" in css
    assert f"    --background: {background.dark};" in css


def test_css_utility_and_palette(tokens):
    css = build_theme_css(tokens)
    info = tokens.utility["info"]
    assert f"--info: {info.light};" in css
    assert f"--info-subtle: {info.subtle};" in css
    assert f"--info-subtle: {info.subtle_dark};" in css
    for p in tokens.palette:
        assert f"--palette-{p.name}: {p.hex};" in css
    assert css.endswith("}\n")


def test_json_tokens(tokens, utility):
    tree = json.loads(build_json_tokens(tokens, utility))
    assert set(tree) == {"global", "semantic", "utility"}
    assert list(tree["semantic"]["light"]) == [n[2:] for n in SEMANTIC_TOKEN_NAMES]
    primary = tree["semantic"]["dark"]["primary"]
    assert primary["value"] == tokens.token("--primary").dark
    assert primary["type"] == "color"
    error = tree["utility"]["error"]
    assert set(error) == {"DEFAULT", "light", "dark", "subtle"}
    assert error["DEFAULT"]["description"] == utility["error"].description
    assert len(tree["global"]) == len(PALETTE)


def test_json_without_utility_metadata(tokens):
    tree = json.loads(build_json_tokens(tokens))
    assert tree["utility"]["info"]["DEFAULT"]["description"] == ""


def test_tailwind_config(tokens):
    js = build_tailwind_config(tokens)
    assert js.startswith("/** @type {import('tailwindcss').Config} */")
    assert "darkMode: 'class'" in js
    assert "'card-raised': 'var(--card-raised)'," in js
    assert "DEFAULT: 'var(--warning)'," in js
    assert "subtle: 'var(--warning-subtle)'," in js


def test_tailwind_v4(tokens):
    css = build_tailwind_v4(tokens)
    assert '@import "tailwindcss";' in css
    assert "@theme {" in css
    assert "--color-primary-foreground: var(--primary-foreground);" in css
    success = tokens.utility["success"]
    assert f"--color-success-dark: {success.dark};" in css


def test_style_dictionary(tokens, utility):
    tree = json.loads(build_style_dictionary(tokens, utility))
    color = tree["color"]
    assert set(color) == {"primitive", "semantic", "utility"}
    assert "card_raised_foreground" in color["semantic"]["light"]
    assert color["semantic"]["light"]["ring"]["$value"] == tokens.token("--ring").light
    assert set(color["utility"]["focus"]) == {"base", "light", "dark", "subtle", "subtle_dark"}
    first = next(iter(color["primitive"].values()))
    assert first["$description"] == "Palette slot 1"


@pytest.mark.parametrize("fmt", c.EXPORT_FORMAT_KEYS)
def test_export_dispatch(fmt, tokens, utility):
    assert export_theme(fmt, tokens, utility) == EXPORT_FORMATS[fmt](tokens, utility)


def test_unknown_format(tokens):
    with pytest.raises(KeyError):
        export_theme("yaml", tokens)


@pytest.mark.parametrize("palette", [
    ["#3b82f6", "#f97316", "#22c55e"],
    ["#888888"],
])
def test_palette_primitives_never_shadow_semantic_tokens(palette):
    tokens = derive_theme_tokens(palette, generate_utility_colors(palette))
    for block in _css_blocks(build_theme_css(tokens)):
        names = _declared(block)
        assert len(names) == len(set(names))
        for name in SEMANTIC_TOKEN_NAMES:
            assert names.count(name) == 1
    light = _declared(_css_blocks(build_theme_css(tokens))[0])
    assert "--palette-primary" in light


def test_light_primary_keeps_semantic_value():
    palette = ["#3b82f6", "#f97316", "#22c55e"]
    tokens = derive_theme_tokens(palette, generate_utility_colors(palette))
    light = _css_blocks(build_theme_css(tokens))[0]
    values = re.findall(r"^\s*--primary: (#[0-9a-f]{6});", light, re.M)
    assert values == [tokens.token("--primary").light]


def test_tailwind_keys_are_unique(tokens):
    keys = re.findall(r"^\s*'([a-z0-9-]+)':", build_tailwind_config(tokens), re.M)
    assert len(keys) == len(set(keys))
    v4 = re.findall(r"^\s*(--color-[a-z0-9-]+):", build_tailwind_v4(tokens), re.M)
    assert len(v4) == len(set(v4))
