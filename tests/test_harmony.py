"""Test harmonic palette generation and palette scoring.

Tests for chromalab.logic.harmony:
    - exact output count for every mode
    - complementary hues sit 180 degrees apart
    - multiple seeds are emitted verbatim
    - seeded generators are reproducible
    - Matsuda template sampling stays within its arcs
    - score_palette axes
"""

import random

import pytest

from chromalab.core import config as c
from chromalab.core.models import hex_to_stop
from chromalab.logic.harmony.engine import anchor_hues, generate, list_modes, sample_template_hues
from chromalab.logic.harmony.scoring import PaletteScore, score_palette
from chromalab.logic.utility.engine import hue_distance


class FixedRandom:
    """Stand-in generator that always returns the same value."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value


@pytest.mark.parametrize("mode", list(c.HARMONY_MODES))
@pytest.mark.parametrize("count", [0, 1, 2, 5, 7, 12])
def test_exact_count_for_every_mode(mode, count):
    assert len(generate(mode, count, rng=random.Random(42))) == count


@pytest.mark.parametrize("mode", list(c.HARMONY_MODES))
def test_stops_are_consistent(mode):
    for stop in generate(mode, 6, rng=random.Random(3)):
        assert stop.hex == stop.hex.lower() and len(stop.hex) == 7
        assert all(0 <= v <= 255 for v in stop.rgb)


def test_complementary_hues_are_opposite():
    seed = hex_to_stop("#ff0000")
    colors = generate("complementary", 2, seeds=[seed], rng=FixedRandom())
    assert hue_distance(colors[0].hsl[0], colors[1].hsl[0]) == pytest.approx(180.0, abs=1.0)


def test_anchor_hues_rotate_with_base():
    assert anchor_hues("triadic", 300.0) == [300.0, 60.0, 180.0]


def test_multiple_seeds_are_kept_verbatim():
    seeds = [hex_to_stop("#ff0000"), hex_to_stop("#00ff00")]
    colors = generate("triadic", 5, seeds=seeds, rng=random.Random(1))
    assert [s.hex for s in colors[:2]] == ["#ff0000", "#00ff00"]
    assert len(colors) == 5


def test_seed_count_above_requested_count_is_truncated():
    seeds = [hex_to_stop(h) for h in ("#ff0000", "#00ff00", "#0000ff")]
    colors = generate("analogous", 2, seeds=seeds, rng=random.Random(1))
    assert [s.hex for s in colors] == ["#ff0000", "#00ff00"]


def test_seeded_generation_is_reproducible():
    for mode in c.HARMONY_MODES:
        a = generate(mode, 6, rng=random.Random(7))
        b = generate(mode, 6, rng=random.Random(7))
        assert [s.hex for s in a] == [s.hex for s in b]


def test_monochromatic_single_color_is_mid_lightness():
    seed = hex_to_stop("#3366cc")
    (stop,) = generate("monochromatic", 1, seeds=[seed], rng=FixedRandom())
    assert stop.hsl[2] == pytest.approx(50.0, abs=1.0)


def test_shades_get_lighter():
    colors = generate("shades", 5, seeds=[hex_to_stop("#2255aa")], rng=FixedRandom())
    lightness = [s.hsl[2] for s in colors]
    assert lightness == sorted(lightness)
    assert lightness[0] < 15.0 and lightness[-1] > 80.0


def test_template_hues_stay_inside_arcs():
    rng = random.Random(11)
    for mode, arcs in c.MATSUDA_TEMPLATES.items():
        for h in sample_template_hues(mode, 40.0, 9, rng):
            assert any(
                hue_distance(h, 40.0 + center) <= width / 2.0 + 1e-9
                for center, width in arcs
            )


def test_list_modes_includes_templates():
    ids = [mode for mode, _, _ in list_modes()]
    assert ids[0] == "analogous"
    assert "matsuda_T" in ids
    assert len(ids) == 16


def test_score_needs_two_colors():
    assert score_palette([hex_to_stop("#123456")]) == PaletteScore()


def test_score_black_and_white():
    score = score_palette([hex_to_stop("#000000"), hex_to_stop("#ffffff")])
    assert score == PaletteScore(balance=0, accessibility=100, harmony=100, uniqueness=100, overall=75)


def test_score_is_bounded():
    score = score_palette(generate("random", 8, rng=random.Random(5)))
    for value in (score.balance, score.accessibility, score.harmony, score.uniqueness, score.overall):
        assert 0 <= value <= 100


@pytest.mark.parametrize("seed", range(12))
def test_unseeded_complementary_pair_is_opposite(seed):
    colors = generate("complementary", 2, None, rng=random.Random(seed))
    assert len(colors) == 2
    assert hue_distance(colors[0].hsl[0], colors[1].hsl[0]) == pytest.approx(180.0, abs=2.0)
