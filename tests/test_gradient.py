"""Test multi-stop gradients.

Tests for chromalab.logic.gradient.engine and the COLOR@POS stop validator.
"""

import argparse

import pytest

from chromalab.logic.gradient.engine import (
    GradientStop,
    build_gradient_css,
    even_stops,
    gradient_ramp,
    sample_gradient,
)
from chromalab.shared.sanitizer import INPUT_HANDLERS

RED_BLUE = [GradientStop("#ff0000", 0), GradientStop("#0000ff", 100)]


class TestStops:
    def test_even_positions(self):
        assert [s.pos for s in even_stops(["#000000", "#888888", "#ffffff"])] == [0, 50, 100]

    def test_single_stop(self):
        assert even_stops(["#123456"]) == [GradientStop("#123456", 0.0)]

    def test_stop_validator(self):
        assert INPUT_HANDLERS["gradient_stop"]("#FF0000@25") == ("#ff0000", 25.0)
        assert INPUT_HANDLERS["gradient_stop"]("blue@150") == ("#0000ff", 100.0)

    @pytest.mark.parametrize("value", ["red", "red@", "notacolor@10"])
    def test_stop_validator_rejects(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["gradient_stop"](value)


class TestCss:
    @pytest.mark.parametrize("kind, direction, space, expected", [
        ("linear", None, "srgb", "linear-gradient(to right, #ff0000 0%, #0000ff 100%)"),
        ("linear", "135deg", "oklab", "linear-gradient(in oklab, 135deg, #ff0000 0%, #0000ff 100%)"),
        ("radial", None, "srgb", "radial-gradient(circle at center, #ff0000 0%, #0000ff 100%)"),
        ("conic", None, "oklch", "conic-gradient(in oklch, from 0deg, #ff0000 0%, #0000ff 100%)"),
    ])
    def test_kinds(self, kind, direction, space, expected):
        assert build_gradient_css(RED_BLUE, kind, direction, space) == expected

    def test_stops_are_sorted(self):
        stops = [GradientStop("#0000ff", 100), GradientStop("#ff0000", 0), GradientStop("#00ff00", 37.5)]
        assert build_gradient_css(stops) == "linear-gradient(to right, #ff0000 0%, #00ff00 37.5%, #0000ff 100%)"

    @pytest.mark.parametrize("kind, space", [("diamond", "srgb"), ("linear", "cmyk")])
    def test_unknown_options(self, kind, space):
        with pytest.raises(ValueError):
            build_gradient_css(RED_BLUE, kind, None, space)


class TestSampling:
    @pytest.mark.parametrize("space", ["srgb", "oklab", "oklch"])
    def test_endpoints(self, space):
        assert sample_gradient(RED_BLUE, 0, space) == (255, 0, 0)
        assert sample_gradient(RED_BLUE, 100, space) == (0, 0, 255)

    def test_outside_the_stops(self):
        stops = [GradientStop("#ff0000", 20), GradientStop("#0000ff", 80)]
        assert sample_gradient(stops, 5) == (255, 0, 0)
        assert sample_gradient(stops, 95) == (0, 0, 255)

    def test_srgb_midpoint(self):
        stops = [GradientStop("#000000", 0), GradientStop("#ffffff", 100)]
        assert sample_gradient(stops, 50) == (128, 128, 128)

    def test_middle_stop_is_hit(self):
        stops = even_stops(["#ff0000", "#00ff00", "#0000ff"])
        assert sample_gradient(stops, 50) == (0, 255, 0)

    def test_ramp(self):
        ramp = gradient_ramp(RED_BLUE, 10, "oklab")
        assert len(ramp) == 10
        assert ramp[0] == "#ff0000"
        assert ramp[-1] == "#0000ff"
        assert gradient_ramp(RED_BLUE, 1) == ["#ff0000"]
