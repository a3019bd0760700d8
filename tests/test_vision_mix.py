"""Test color-vision simulation and color mixing.

Tests for chromalab.logic.vision.engine and chromalab.logic.mix.engine.
"""

import pytest

from chromalab.core import config as c
from chromalab.core.conversions import rgb_to_hsl
from chromalab.logic.mix.engine import MIXERS, mix, mix_hsl, mix_oklab, mix_rgb, mix_steps
from chromalab.logic.vision.engine import simulate_cvd, simulate_palette

SAMPLES = [(255, 0, 0), (0, 128, 255), (34, 170, 102), (250, 204, 21)]


@pytest.mark.parametrize("rgb", SAMPLES)
def test_normal_vision_is_identity(rgb):
    assert simulate_cvd(rgb, "normal") == rgb


@pytest.mark.parametrize("rgb", SAMPLES)
def test_achromatopsia_is_gray(rgb):
    r, g, b = simulate_cvd(rgb, "achromatopsia")
    assert max(r, g, b) - min(r, g, b) <= 1


@pytest.mark.parametrize("kind", list(c.CVD_MATRICES))
def test_zero_intensity_is_identity(kind):
    assert simulate_cvd((200, 60, 30), kind, intensity=0.0) == (200, 60, 30)


def test_protanopia_changes_red():
    assert simulate_cvd((255, 0, 0), "protanopia") != (255, 0, 0)


def test_unknown_kind():
    with pytest.raises(ValueError):
        simulate_cvd((0, 0, 0), "tetrachromacy")


def test_simulate_palette_covers_every_kind():
    sims = simulate_palette(SAMPLES)
    assert list(sims) == list(c.CVD_MATRICES)
    assert all(len(v) == len(SAMPLES) for v in sims.values())


def test_rgb_midpoint():
    assert mix_rgb((0, 0, 0), (255, 255, 255)) == (128, 128, 128)


def test_hsl_takes_short_arc():
    h, _, _ = rgb_to_hsl(*mix_hsl((255, 0, 0), (255, 0, 255)))
    assert h == pytest.approx(330.0, abs=1.0)


def test_oklab_endpoints():
    a, b = (12, 34, 200), (240, 180, 20)
    assert mix_oklab(a, b, 0.0) == a
    assert mix_oklab(a, b, 1.0) == b


def test_ratio_is_clamped():
    assert mix_rgb((0, 0, 0), (255, 255, 255), 2.0) == (255, 255, 255)


def test_mix_dispatch():
    assert set(MIXERS) == set(c.MIX_SPACES)
    assert mix((0, 0, 0), (255, 255, 255), 0.5, "rgb") == (128, 128, 128)
    with pytest.raises(ValueError):
        mix((0, 0, 0), (255, 255, 255), 0.5, "cmyk")


def test_mix_steps():
    a, b = (255, 0, 0), (0, 0, 255)
    steps = mix_steps(a, b, 5, "rgb")
    assert len(steps) == 5
    assert steps[0] == a
    assert steps[-1] == b
    assert mix_steps(a, b, 1, "rgb") == [mix_rgb(a, b)]
