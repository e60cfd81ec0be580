"""Tests for place_pixels.quantize: nearest palette colour per pixel."""

import numpy as np
import pytest

from place_pixels.colour_distance import cube_distance
from place_pixels.core_types import Palette
from place_pixels.errors import EmptyPaletteError, InvalidInputError
from place_pixels.palette_data import default_palette, palette_from_rgb
from place_pixels.quantize import (
    nearest_palette_index,
    nearest_palette_indices,
    quantize_rgba,
)


def _one_pixel(rgba):
    return np.array([[rgba]], dtype=np.uint8)


class TestNearestPaletteIndex:
    def test_exact_match(self):
        pal = default_palette()
        assert nearest_palette_index((0, 0, 0), pal) == 27
        assert nearest_palette_index((255, 255, 255), pal) == 31

    def test_first_of_equal_entries_wins(self):
        # (100, 0, 0) is 10 away from both entries.
        pal = palette_from_rgb([(110, 0, 0), (90, 0, 0)])
        assert nearest_palette_index((100, 0, 0), pal) == 0
        pal_rev = palette_from_rgb([(90, 0, 0), (110, 0, 0)])
        assert nearest_palette_index((100, 0, 0), pal_rev) == 0

    def test_duplicate_entries_pick_first(self):
        pal = palette_from_rgb([(1, 1, 1), (50, 50, 50), (50, 50, 50)])
        assert nearest_palette_index((50, 50, 50), pal) == 1

    def test_empty_palette(self):
        with pytest.raises(EmptyPaletteError):
            nearest_palette_index((0, 0, 0), Palette(items=()))

    def test_vectorised_agrees_with_scalar(self):
        pal = default_palette()
        rng = np.random.default_rng(7)
        src = rng.integers(0, 256, size=(500, 3), dtype=np.uint8)
        got = nearest_palette_indices(src, pal, chunk=64)
        expected = [nearest_palette_index(row, pal) for row in src]
        assert got.tolist() == expected

    def test_vectorised_tie_break(self):
        pal = palette_from_rgb([(110, 0, 0), (90, 0, 0)])
        src = np.array([[100, 0, 0]], dtype=np.uint8)
        assert nearest_palette_indices(src, pal).tolist() == [0]


class TestQuantizeRgba:
    def test_opaque_red_maps_to_nearer_red(self, red_blue_palette):
        out = quantize_rgba(_one_pixel((255, 0, 0, 255)), red_blue_palette)
        assert out[0, 0].tolist() == [200, 0, 0, 255]

    def test_transparent_pixel_untouched(self, red_blue_palette):
        out = quantize_rgba(_one_pixel((10, 10, 10, 0)), red_blue_palette)
        assert out[0, 0].tolist() == [10, 10, 10, 0]

    def test_partial_alpha_preserved(self, red_blue_palette):
        out = quantize_rgba(_one_pixel((0, 10, 180, 7)), red_blue_palette)
        assert out[0, 0].tolist() == [0, 0, 200, 7]

    def test_output_is_palette_colour_with_input_alpha(self):
        pal = default_palette()
        rng = np.random.default_rng(3)
        img = rng.integers(0, 256, size=(9, 11, 4), dtype=np.uint8)
        out = quantize_rgba(img, pal)
        pal_set = {it.rgb for it in pal}
        assert out.shape == img.shape
        assert np.array_equal(out[..., 3], img[..., 3])
        for y in range(img.shape[0]):
            for x in range(img.shape[1]):
                if img[y, x, 3] == 0:
                    assert np.array_equal(out[y, x], img[y, x])
                else:
                    assert tuple(out[y, x, :3].tolist()) in pal_set

    def test_matches_brute_force_minimum(self):
        pal = default_palette()
        rng = np.random.default_rng(11)
        img = rng.integers(0, 256, size=(6, 6, 4), dtype=np.uint8)
        img[..., 3] = 255
        out = quantize_rgba(img, pal, chunk=5)
        for y in range(6):
            for x in range(6):
                best = min(cube_distance(img[y, x], it.rgb) for it in pal)
                assert cube_distance(img[y, x], out[y, x]) == best

    def test_input_not_modified(self, red_blue_palette):
        img = _one_pixel((255, 0, 0, 255))
        before = img.copy()
        quantize_rgba(img, red_blue_palette)
        assert np.array_equal(img, before)

    def test_all_transparent(self, red_blue_palette):
        img = np.zeros((3, 4, 4), dtype=np.uint8)
        img[..., :3] = 99
        assert np.array_equal(quantize_rgba(img, red_blue_palette), img)

    def test_empty_palette(self):
        with pytest.raises(EmptyPaletteError):
            quantize_rgba(_one_pixel((1, 2, 3, 255)), Palette(items=()))

    def test_empty_palette_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            quantize_rgba(_one_pixel((1, 2, 3, 255)), Palette(items=()))

    def test_rejects_rgb_without_alpha(self, red_blue_palette):
        with pytest.raises(InvalidInputError):
            quantize_rgba(np.zeros((2, 2, 3), dtype=np.uint8), red_blue_palette)
