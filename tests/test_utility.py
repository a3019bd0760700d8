"""Test utility color derivation and lock-aware merging.

Tests for chromalab.logic.utility.engine:
    - hue nudge away from palette hues
    - role set, labels and descriptions
    - focus and neutral follow the most saturated slot
    - locked roles survive regeneration
"""

import pytest

from chromalab.core import config as c
from chromalab.core.models import hex_to_stop
from chromalab.logic.utility.engine import (
    generate_utility_colors,
    hue_distance,
    lock_utility_role,
    merge_utility_colors,
    nudge_hue,
    set_utility_color,
)


@pytest.mark.parametrize("h, palette, expected", [
    (25.0, [25.0], 43.0),
    (25.0, [40.0], 22.0),
    (5.0, [355.0], 13.0),
    (231.0, [100.0], 231.0),
    (142.0, [], 142.0),
])
def test_nudge_hue(h, palette, expected):
    assert nudge_hue(h, palette) == pytest.approx(expected)


def test_roles_and_metadata():
    utility = generate_utility_colors(["#3366ff", "#ff8800"])
    assert list(utility) == list(c.UTILITY_ROLES)
    assert utility["error"].label == "Error"
    assert utility["info"].description == c.UTILITY_DEFS["info"][1]
    assert not any(u.locked for u in utility.values())


def test_empty_palette_uses_defaults():
    utility = generate_utility_colors([])
    assert set(utility) == set(c.UTILITY_ROLES)
    _, _, focus_hue = utility["focus"].color.oklch
    assert focus_hue == pytest.approx(230.0, abs=3.0)


def test_error_is_pushed_away_from_red_palette():
    red = hex_to_stop("#ff0000")
    palette_hue = red.oklch[2]
    utility = generate_utility_colors([red])
    error_hue = utility["error"].color.oklch[2]
    assert hue_distance(error_hue, palette_hue) >= 15.0


def test_focus_takes_primary_hue():
    palette = [hex_to_stop("#bbbbbb"), hex_to_stop("#7c3aed")]
    utility = generate_utility_colors(palette)
    assert utility["focus"].color.oklch[2] == pytest.approx(palette[1].oklch[2], abs=2.0)


def test_locked_role_survives_regeneration():
    existing = lock_utility_role(generate_utility_colors(["#3366ff"]), "success")
    fresh = generate_utility_colors(["#ff8800", "#00aa55"])
    merged = merge_utility_colors(existing, fresh)
    assert merged["success"] is existing["success"]
    assert merged["info"] is fresh["info"]


def test_lock_mask_argument():
    existing = generate_utility_colors(["#3366ff"])
    fresh = generate_utility_colors(["#ff8800"])
    merged = merge_utility_colors(existing, fresh, locked={"warning"})
    assert merged["warning"] is existing["warning"]
    assert merged["error"] is fresh["error"]


def test_lock_toggle_is_pure():
    utility = generate_utility_colors(["#3366ff"])
    locked = lock_utility_role(utility, "info")
    assert locked["info"].locked
    assert not utility["info"].locked


def test_manual_color_is_locked():
    utility = set_utility_color(generate_utility_colors([]), "error", hex_to_stop("#d92d20"))
    assert utility["error"].color.hex == "#d92d20"
    assert utility["error"].locked
