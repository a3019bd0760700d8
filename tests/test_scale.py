"""Test the 50-950 tint/shade scale.

Tests for chromalab.logic.scale.engine:
    - eleven steps with the standard labels
    - lightness falls from step 50 to step 950
    - requested hue equals the input hue
    - gray input gives a gray ramp
"""

import pytest

from chromalab.core.conversions import hex_to_rgb, rgb_to_oklch
from chromalab.logic.scale.engine import SCALE_STEPS, generate_scale, scale_chroma, scale_lightness


def test_step_labels():
    steps = generate_scale("#3b82f6")
    assert [s.step for s in steps] == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950]
    assert tuple(s.step for s in steps) == SCALE_STEPS


@pytest.mark.parametrize("hex_code", ["#3b82f6", "#e11d48", "#16a34a", "#facc15"])
def test_lightness_strictly_decreases(hex_code):
    lightness = [s.color.oklch[0] for s in generate_scale(hex_code)]
    assert all(a > b for a, b in zip(lightness, lightness[1:]))


@pytest.mark.parametrize("hex_code", ["#3b82f6", "#e11d48", "#16a34a"])
def test_requested_hue_is_constant(hex_code):
    _, _, hue = rgb_to_oklch(*hex_to_rgb(hex_code))
    for s in generate_scale(hex_code):
        assert s.target[2] == pytest.approx(hue, abs=0.5)


def test_gray_input_gives_grays():
    for s in generate_scale("#808080"):
        r, g, b = s.color.rgb
        assert r == g == b


def test_curves():
    assert scale_lightness(0.0) == pytest.approx(0.97)
    assert scale_lightness(1.0) == pytest.approx(0.10)
    assert scale_chroma(0.2, 0.0) == 0.0
    assert scale_chroma(0.2, 1.0) == 0.0
    assert scale_chroma(0.2, 0.4) > scale_chroma(0.2, 0.9)
