"""Test dominant-color extraction from images.

Tests for chromalab.logic.extract.engine:
    - median cut bucketing and bucket averages
    - transparent, gray and out-of-band pixels are ignored
    - near-duplicate merging and saturation ordering
    - Pillow loading and downscaling
"""

import pytest
from PIL import Image

from chromalab.logic.extract.engine import (
    average_bucket,
    dedup_colors,
    extract_colors,
    extract_from_pixels,
    image_pixels,
    is_usable,
    load_image,
    median_cut,
)

RED = (230, 30, 30)
GREEN = (30, 200, 60)
BLUE = (40, 60, 220)
YELLOW = (240, 200, 20)


def quadrant_image(colors, size=100, mode="RGBA"):
    img = Image.new(mode, (size, size))
    half = size // 2
    boxes = [(0, 0, half, half), (half, 0, size, half), (0, half, half, size), (half, half, size, size)]
    for color, box in zip(colors, boxes):
        img.paste(color, box)
    return img


@pytest.fixture
def four_colors():
    return quadrant_image([c + (255,) for c in (RED, GREEN, BLUE, YELLOW)])


class TestMedianCut:
    def test_bucket_count(self):
        pixels = [(i, 255 - i, 0) for i in range(64)]
        assert len(median_cut(pixels, 3)) == 8

    def test_depth_zero_and_empty(self):
        assert median_cut([RED, GREEN], 0) == [[RED, GREEN]]
        assert median_cut([], 2) == [[]]

    def test_splits_on_widest_channel(self):
        low, high = median_cut([(10, 0, 0), (200, 5, 5), (12, 3, 0), (210, 0, 9)], 1)
        assert sorted(low) == [(10, 0, 0), (12, 3, 0)]
        assert sorted(high) == [(200, 5, 5), (210, 0, 9)]

    def test_average(self):
        assert average_bucket([(0, 0, 0), (255, 101, 3)]) == (128, 51, 2)
        assert average_bucket([]) == (128, 128, 128)


class TestFilters:
    @pytest.mark.parametrize("rgb, usable", [
        (RED, True),
        ((128, 128, 128), False),
        ((5, 0, 10), False),
        ((250, 245, 252), False),
    ])
    def test_is_usable(self, rgb, usable):
        assert is_usable(rgb) is usable

    def test_dedup_keeps_first(self):
        assert dedup_colors([(200, 30, 30), (202, 31, 30), (30, 30, 200)]) == [(200, 30, 30), (30, 30, 200)]


class TestExtraction:
    def test_finds_every_block_most_saturated_first(self, four_colors):
        assert extract_from_pixels(image_pixels(four_colors), 4) == [YELLOW, RED, GREEN, BLUE]

    def test_count_limits_result(self, four_colors):
        assert extract_from_pixels(image_pixels(four_colors), 2) == [YELLOW, RED]

    def test_transparent_pixels_are_skipped(self):
        img = Image.new("RGBA", (80, 40), GREEN + (0,))
        img.paste(RED + (255,), (0, 0, 40, 40))
        assert extract_from_pixels(image_pixels(img), 3) == [RED]

    def test_rgb_pixels_count_as_opaque(self):
        assert extract_from_pixels([BLUE] * 10, 1) == [BLUE]

    @pytest.mark.parametrize("img", [
        Image.new("RGB", (20, 20), (128, 128, 128)),
        Image.new("RGBA", (20, 20), (255, 0, 0, 0)),
    ])
    def test_nothing_usable(self, img):
        assert extract_from_pixels(image_pixels(img)) == []

    def test_downscales_longest_side(self):
        pixels = image_pixels(Image.new("RGB", (400, 300), RED))
        assert len(pixels) == 200 * 150
        assert pixels[0] == RED + (255,)

    def test_small_images_keep_their_size(self):
        assert len(image_pixels(Image.new("L", (30, 10), 200))) == 300

    def test_stops(self, four_colors):
        stops = extract_colors(four_colors, 4)
        assert [s.hex for s in stops] == ["#f0c814", "#e61e1e", "#1ec83c", "#283cdc"]


class TestLoading:
    def test_round_trip_png(self, tmp_path, four_colors):
        path = tmp_path / "blocks.png"
        four_colors.save(path)
        img = load_image(str(path))
        assert img.size == (100, 100)
        assert len(extract_colors(img, 4)) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(str(tmp_path / "nope.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("not pixels", encoding="utf-8")
        with pytest.raises(ValueError):
            load_image(str(path))
