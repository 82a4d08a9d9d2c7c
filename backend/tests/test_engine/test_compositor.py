"""Tests for the 3x3 compositor."""

from __future__ import annotations

import numpy as np
import pytest

from identicon.engine.compositor import CORNER_CELLS, SIDE_CELLS, compose, place_rotations
from identicon.engine.params import extract
from identicon.engine.sprite import new_canvas, render_center_sprite, render_ring_sprite
from tests.conftest import DEFAULT_HASH, SAMPLE_HASH, WHITE, make_hash, tile


def _compose_array(hash_value, config) -> np.ndarray:
    params = extract(hash_value)
    corner = render_ring_sprite(params.corner, config)
    side = render_ring_sprite(params.side, config)
    center = render_center_sprite(params, config)
    try:
        with compose(corner, side, center, config) as base:
            return np.array(base)
    finally:
        corner.close()
        side.close()
        center.close()


class TestCompose:
    def test_canvas_size(self, small_config):
        arr = _compose_array(DEFAULT_HASH, small_config)
        assert arr.shape == (96, 96, 3)

    @pytest.mark.parametrize("hash_value", [DEFAULT_HASH, SAMPLE_HASH])
    def test_corner_tiles_are_quarter_turns(self, small_config, hash_value):
        arr = _compose_array(hash_value, small_config)
        cell = small_config.sprite_size
        first = tile(arr, *CORNER_CELLS[0], cell)
        for turns, (col, row) in enumerate(CORNER_CELLS):
            assert np.array_equal(tile(arr, col, row, cell), np.rot90(first, turns))

    @pytest.mark.parametrize("hash_value", [DEFAULT_HASH, SAMPLE_HASH])
    def test_side_tiles_are_quarter_turns(self, small_config, hash_value):
        arr = _compose_array(hash_value, small_config)
        cell = small_config.sprite_size
        first = tile(arr, *SIDE_CELLS[0], cell)
        for turns, (col, row) in enumerate(SIDE_CELLS):
            assert np.array_equal(tile(arr, col, row, cell), np.rot90(first, turns))

    def test_top_left_is_corner_sprite(self, small_config):
        params = extract(SAMPLE_HASH)
        with render_ring_sprite(params.corner, small_config) as sprite:
            expected = np.array(sprite)
        arr = _compose_array(SAMPLE_HASH, small_config)
        assert np.array_equal(tile(arr, 0, 0, small_config.sprite_size), expected)

    def test_top_is_side_sprite(self, small_config):
        params = extract(SAMPLE_HASH)
        with render_ring_sprite(params.side, small_config) as sprite:
            expected = np.array(sprite)
        arr = _compose_array(SAMPLE_HASH, small_config)
        assert np.array_equal(tile(arr, 1, 0, small_config.sprite_size), expected)

    def test_default_hash_center_uses_side_colour(self, small_config):
        arr = _compose_array(DEFAULT_HASH, small_config)
        center = tile(arr, 1, 1, small_config.sprite_size)
        assert (center == (211, 115, 202)).all()

    def test_whole_canvas_has_fourfold_symmetry(self, small_config):
        # Blank white center, so every quarter turn of the canvas maps it onto itself
        h = make_hash(corner_shape=4, side_shape=11, center_shape=0, corner_rotation=1,
                      side_rotation=2, flag=0, corner_rgb=(10, 90, 160), side_rgb=(240, 20, 20))
        arr = _compose_array(h, small_config)
        assert (tile(arr, 1, 1, small_config.sprite_size) == WHITE).all()
        assert np.array_equal(np.rot90(arr), arr)

    def test_deterministic(self, small_config):
        assert np.array_equal(_compose_array(SAMPLE_HASH, small_config), _compose_array(SAMPLE_HASH, small_config))


def test_place_rotations_leaves_sprite_open(small_config):
    params = extract(SAMPLE_HASH)
    with new_canvas(96, 96, WHITE) as base, render_ring_sprite(params.corner, small_config) as sprite:
        before = np.array(sprite)
        place_rotations(base, sprite, CORNER_CELLS, small_config.sprite_size)
        assert np.array_equal(np.array(sprite), before)
