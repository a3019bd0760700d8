"""Test gamut mapping from OKLCH into displayable sRGB.

Tests for chromalab.core.gamut:
    - every mapped color is a valid 8-bit triple
    - achromatic and out-of-range lightness shortcuts
    - in-gamut colors pass through unchanged
    - out-of-gamut colors keep their hue and lose only chroma
"""

import pytest

from chromalab.core.conversions import rgb_to_oklch
from chromalab.core.gamut import is_in_gamut, max_chroma, oklch_to_rgb


def test_mapping_grid_yields_valid_rgb():
    for li in range(11):
        for ci in range(9):
            for hue in range(0, 360, 30):
                rgb = oklch_to_rgb(li / 10.0, ci * 0.05, hue)
                assert len(rgb) == 3
                assert all(isinstance(v, int) and 0 <= v <= 255 for v in rgb)


def test_zero_chroma_is_gray():
    r, g, b = oklch_to_rgb(0.5, 0.0, 123.0)
    assert r == g == b


def test_lightness_extremes():
    assert oklch_to_rgb(1.0, 0.2, 40.0) == (255, 255, 255)
    assert oklch_to_rgb(0.0, 0.2, 40.0) == (0, 0, 0)


def test_nan_inputs_do_not_raise():
    rgb = oklch_to_rgb(float("nan"), float("nan"), float("nan"))
    assert rgb == (0, 0, 0)


@pytest.mark.parametrize("rgb", [(255, 0, 0), (18, 52, 86), (250, 240, 10), (128, 128, 128)])
def test_in_gamut_colors_round_trip(rgb):
    back = oklch_to_rgb(*rgb_to_oklch(*rgb))
    assert all(abs(x - y) <= 1 for x, y in zip(back, rgb))


def test_out_of_gamut_keeps_hue_and_reduces_chroma():
    assert not is_in_gamut(0.7, 0.4, 140.0)
    L, chroma, hue = rgb_to_oklch(*oklch_to_rgb(0.7, 0.4, 140.0))
    assert L == pytest.approx(0.7, abs=0.01)
    assert hue == pytest.approx(140.0, abs=2.0)
    assert chroma < 0.4
    assert chroma == pytest.approx(max_chroma(0.7, 140.0), abs=0.01)


def test_is_in_gamut():
    assert is_in_gamut(0.5, 0.05, 200.0)
    assert not is_in_gamut(1.2, 0.0, 0.0)
