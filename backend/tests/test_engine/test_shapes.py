"""Tests for the default shape table."""

import pytest

from identicon.engine import Region, get_catalog

RING_NAMES = [
    "triangle", "parallelogram", "mouse-ears", "ribbon", "sails", "fins", "beak",
    "chevron", "fish", "kite", "trough", "rays", "double-rhombus", "crown",
    "radioactive", "tiles",
]
CENTER_NAMES = [
    "fill", "diamond", "reverse-diamond", "cross", "morning-star",
    "small-square", "checkerboard", "blank",
]


class TestDefaultCatalog:
    def test_counts(self):
        cat = get_catalog()
        assert cat.count(Region.RING) == 16
        assert cat.count(Region.CENTER) == 8

    def test_names(self):
        cat = get_catalog()
        assert [s.name for s in cat.all(Region.RING)] == RING_NAMES
        assert [s.name for s in cat.all(Region.CENTER)] == CENTER_NAMES

    @pytest.mark.parametrize("shape_id", [15, 16, 35, 595])
    def test_ring_fallback_is_tiles(self, shape_id):
        assert get_catalog().get(Region.RING, shape_id).name == "tiles"

    def test_center_zero_is_blank(self):
        shape = get_catalog().get(Region.CENTER, 0)
        assert shape.name == "blank"
        assert shape.is_blank

    def test_only_blank_is_empty(self):
        cat = get_catalog()
        for region in Region:
            for shape in cat.all(region):
                assert shape.is_blank == (shape.name == "blank")

    def test_vertices_in_unit_square(self):
        cat = get_catalog()
        for region in Region:
            for shape in cat.all(region):
                for x, y in shape.points:
                    assert 0 <= x <= 1 and 0 <= y <= 1, shape.name

    def test_polygons_have_at_least_three_vertices(self):
        cat = get_catalog()
        for region in Region:
            for shape in cat.all(region):
                if not shape.is_blank:
                    assert len(shape.points) >= 3, shape.name

    def test_checkerboard_keeps_odd_vertex(self):
        shape = get_catalog().get(Region.CENTER, 7)
        assert shape.points[3] == (0.66, 0.33)
