"""Test WCAG and APCA contrast metrics.

Tests for chromalab.core.contrast:
    - contrast ratio bounds and symmetry
    - WCAG level thresholds (7 / 4.5 / 3)
    - text color choice around the AA boundary
    - APCA Lc sign and magnitude
    - contrast fix suggestions
"""

import pytest

from chromalab.core.contrast import (
    BLACK,
    WHITE,
    apca_contrast,
    apca_level,
    contrast_ratio,
    get_wcag_contrast,
    suggest_contrast_fix,
    text_color,
    wcag_level,
)
from chromalab.core.conversions import hex_to_rgb


def test_black_on_white_is_21():
    assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)


def test_ratio_is_symmetric():
    a, b = (12, 200, 99), (240, 10, 80)
    assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))
    assert contrast_ratio(a, a) == pytest.approx(1.0)


@pytest.mark.parametrize("ratio, level", [
    (21.0, "AAA"),
    (7.0, "AAA"),
    (6.99, "AA"),
    (4.5, "AA"),
    (3.0, "AA Large"),
    (2.99, "Fail"),
])
def test_wcag_levels(ratio, level):
    assert wcag_level(ratio) == level


def test_wcag_contrast_table():
    data = get_wcag_contrast(0.0)
    assert data["white"]["ratio"] == 21.0
    assert data["white"]["levels"]["AAA"] == "Pass"
    assert data["black"]["ratio"] == 1.0
    assert data["black"]["level"] == "Fail"


def test_text_color_prefers_white_at_aa():
    assert text_color(BLACK) == "#ffffff"
    assert text_color(WHITE) == "#000000"
    # 118 is the lightest gray that still reaches 4.5:1 against white
    assert text_color((118, 118, 118)) == "#ffffff"
    assert text_color((119, 119, 119)) == "#000000"


def test_apca_sign_and_magnitude():
    assert apca_contrast(BLACK, WHITE) == 111
    assert apca_contrast(WHITE, BLACK) == -111
    assert apca_contrast((90, 90, 90), (90, 90, 90)) == 0


def test_apca_levels():
    assert apca_level(-111) == "Preferred"
    assert apca_level(60) == "Body"
    assert apca_level(45) == "Large"
    assert apca_level(30) == "UI"
    assert apca_level(20) == "Fail"


def test_fix_darkens_on_light_background():
    fix = suggest_contrast_fix("#777777", WHITE)
    assert fix is not None
    new_hex, direction = fix
    assert direction == "darken"
    assert contrast_ratio(hex_to_rgb(new_hex), WHITE) >= 4.5


def test_fix_lightens_on_dark_background():
    fix = suggest_contrast_fix("#333333", BLACK)
    assert fix is not None
    new_hex, direction = fix
    assert direction == "lighten"
    assert contrast_ratio(hex_to_rgb(new_hex), BLACK) >= 4.5


def test_fix_not_needed():
    assert suggest_contrast_fix("#000000", WHITE) is None
