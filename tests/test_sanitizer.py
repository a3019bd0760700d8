"""Test CLI input validation, color naming and palette slot models.

Tests for chromalab.shared.sanitizer, chromalab.shared.naming and the
slot helpers in chromalab.core.models.
"""

import argparse

import pytest

from chromalab.core import config as c
from chromalab.core.models import ColorStop, hex_to_stop, regenerate_slots, slots_from_hexes, toggle_lock
from chromalab.shared.naming import (
    WEB_COLORS,
    approx_color_name,
    get_title_for_hex,
    lookup_name,
    nearest_name,
    slugify,
)
from chromalab.shared.sanitizer import INPUT_HANDLERS, handle_role_assignment, resolve_color


class TestColorInput:
    @pytest.mark.parametrize("value, expected", [
        ("red", "#ff0000"),
        ("Rebecca Purple", "#663399"),
        ("#ABC", "#aabbcc"),
        ("00ff80", "#00ff80"),
        ("rgb(0, 128, 255)", "#0080ff"),
        ("hsl(120, 100%, 50%)", "#00ff00"),
    ])
    def test_resolves(self, value, expected):
        assert INPUT_HANDLERS["color"](value) == expected

    @pytest.mark.parametrize("value", ["", "#12", "notacolor", "rgb()"])
    def test_rejects(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["color"](value)

    def test_resolve_color_empty(self):
        assert resolve_color(None) == ""
        assert resolve_color("zzz") == ""


class TestChoices:
    def test_mode_case_is_restored(self):
        assert INPUT_HANDLERS["harmony_mode"]("Matsuda_L") == "matsuda_L"
        assert INPUT_HANDLERS["harmony_mode"]("Split-Comp") == "split-comp"

    def test_unknown_choice(self):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["export_format"]("yaml")

    def test_export_formats(self):
        assert INPUT_HANDLERS["export_format"]("Tailwind4") == "tailwind4"

    def test_role_assignment(self):
        assert handle_role_assignment("Error=#D92D20") == ("error", "#d92d20")
        assert handle_role_assignment("info=navy") == ("info", "#000080")

    @pytest.mark.parametrize("value", ["error", "danger=#ff0000", "info=nope"])
    def test_bad_role_assignment(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            handle_role_assignment(value)


class TestNumbers:
    def test_count_is_clamped(self):
        assert INPUT_HANDLERS["count"]("0") == 1
        assert INPUT_HANDLERS["count"]("500") == c.MAX_COUNT
        assert INPUT_HANDLERS["count"]("5") == 5

    def test_float_range(self):
        assert INPUT_HANDLERS["float_0_1"]("0.25") == pytest.approx(0.25)
        assert INPUT_HANDLERS["float_0_1"]("7") == 1.0
        assert INPUT_HANDLERS["float_0_1"]("-3") == 0.0

    def test_non_numeric(self):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["steps"]("many")


class TestNaming:
    def test_table_is_complete(self):
        assert len(WEB_COLORS) == 148
        assert all(v == v.lower() and len(v) == 7 for v in WEB_COLORS.values())

    def test_lookup(self):
        assert lookup_name("Dark Slate Gray") == "#2f4f4f"
        assert lookup_name("navajowhite") == "#ffdead"
        assert lookup_name("no such color") is None

    def test_nearest(self):
        assert nearest_name((255, 0, 0)) == "red"
        assert nearest_name((250, 2, 3)) == "red"
        assert nearest_name((1, 1, 1)) == "black"

    def test_title(self):
        assert get_title_for_hex("#FF0000") == "red"
        assert get_title_for_hex("#123457") == "#123457"

    @pytest.mark.parametrize("lch, expected", [
        ((0.9, 0.01, 0.0), "light-gray"),
        ((0.2, 0.01, 0.0), "dark-gray"),
        ((0.5, 0.0, 0.0), "gray"),
        ((0.6, 0.2, 20.0), "red"),
        ((0.6, 0.2, 140.0), "green"),
        ((0.6, 0.2, 250.0), "blue"),
        ((0.6, 0.2, 350.0), "red"),
    ])
    def test_approx_name(self, lch, expected):
        assert approx_color_name(*lch) == expected

    def test_slugify(self):
        assert slugify("Light Gray!") == "light-gray"


class TestSlots:
    def test_stop(self):
        stop = hex_to_stop("#FF0000")
        assert (stop.hex, stop.rgb) == ("#ff0000", (255, 0, 0))
        assert isinstance(stop, ColorStop)

    def test_toggle_lock(self):
        slots = slots_from_hexes(["#ff0000", "#00ff00"])
        toggled = toggle_lock(slots, 1)
        assert toggled[1].locked
        assert not slots[1].locked
        assert toggle_lock(toggled, 1)[1].locked is False
        assert toggle_lock(slots, 9) == slots

    def test_regenerate_keeps_locked(self):
        slots = slots_from_hexes(["#ff0000", "#00ff00", "#0000ff"], locked=[1])
        fresh = [hex_to_stop(h) for h in ("#111111", "#222222", "#333333", "#444444")]
        merged = regenerate_slots(slots, fresh)
        assert [s.color.hex for s in merged] == ["#111111", "#00ff00", "#333333", "#444444"]
        assert merged[1].locked

    def test_regenerate_shrinks(self):
        slots = slots_from_hexes(["#ff0000", "#00ff00", "#0000ff"], locked=[2])
        merged = regenerate_slots(slots, [hex_to_stop("#111111")])
        assert len(merged) == 1
        assert merged[0].color.hex == "#111111"
