"""Identicon shape table.

Ring shapes fill the corner and side tiles; ids 0-14 are explicit and
``tiles`` answers for every other id. Center shapes fill the middle tile;
``blank`` draws nothing and answers for id 0.

Vertex lists are (x, y) fractions of the tile, y pointing down. Several
shapes are self-intersecting on purpose: they are filled as a single
polygon, so overlapping lobes cancel out (even-odd fill).
"""

from __future__ import annotations

from identicon.engine.registry import Region, register_shape

RING, CENTER = Region.RING, Region.CENTER

# ── Ring shapes ──

register_shape(RING, 0, "triangle", [
    (0.5, 1), (1, 0), (1, 1),
])

register_shape(RING, 1, "parallelogram", [
    (0.5, 0), (1, 0), (0.5, 1), (0, 1),
])

register_shape(RING, 2, "mouse-ears", [
    (0.5, 0), (1, 0), (1, 1), (0.5, 1), (1, 0.5),
])

register_shape(RING, 3, "ribbon", [
    (0, 0.5), (0.5, 0), (1, 0.5), (0.5, 1), (0.5, 0.5),
])

register_shape(RING, 4, "sails", [
    (0, 0.5), (1, 0), (1, 1), (0, 1), (1, 0.5),
])

register_shape(RING, 5, "fins", [
    (1, 0), (1, 1), (0.5, 1), (1, 0.5), (0.5, 0.5),
])

register_shape(RING, 6, "beak", [
    (0, 0), (1, 0), (1, 0.5), (0, 0), (0.5, 1), (0, 1),
])

register_shape(RING, 7, "chevron", [
    (0, 0), (0.5, 0), (1, 0.5), (0.5, 1), (0, 1), (0.5, 0.5),
])

register_shape(RING, 8, "fish", [
    (0.5, 0), (0.5, 0.5), (1, 0.5), (1, 1), (0.5, 1), (0.5, 0.5), (0, 0.5),
])

register_shape(RING, 9, "kite", [
    (0, 0), (1, 0), (0.5, 0.5), (1, 0.5), (0.5, 1), (0.5, 0.5), (0, 1),
])

register_shape(RING, 10, "trough", [
    (0, 0.5), (0.5, 1), (1, 0.5), (0.5, 0), (1, 0), (1, 1), (0, 1),
])

register_shape(RING, 11, "rays", [
    (0.5, 0), (1, 0), (1, 1), (0.5, 1), (1, 0.75), (0.5, 0.5), (1, 0.25),
])

register_shape(RING, 12, "double-rhombus", [
    (0, 0.5), (0.5, 0), (0.5, 0.5), (1, 0), (1, 0.5), (0.5, 1), (0.5, 0.5), (0, 1),
])

register_shape(RING, 13, "crown", [
    (0, 0), (1, 0), (1, 1), (0, 1), (1, 0.5),
    (0.5, 0.25), (0.5, 0.75), (0, 0.5), (0.5, 0.25),
])

register_shape(RING, 14, "radioactive", [
    (0, 0.5), (0.5, 0.5), (0.5, 0), (1, 0), (0.5, 0.5),
    (1, 0.5), (0.5, 1), (0.5, 0.5), (0, 1),
])

register_shape(RING, None, "tiles", [
    (0, 0), (1, 0), (0.5, 0.5), (0.5, 0), (0, 0.5),
    (1, 0.5), (0.5, 1), (0.5, 0.5), (0, 1),
])

# ── Center shapes ──

register_shape(CENTER, None, "blank", [])

register_shape(CENTER, 1, "fill", [
    (0, 0), (1, 0), (1, 1), (0, 1),
])

register_shape(CENTER, 2, "diamond", [
    (0.5, 0), (1, 0.5), (0.5, 1), (0, 0.5),
])

register_shape(CENTER, 3, "reverse-diamond", [
    (0, 0), (1, 0), (1, 1), (0, 1), (0, 0.5),
    (0.5, 1), (1, 0.5), (0.5, 0), (0, 0.5),
])

register_shape(CENTER, 4, "cross", [
    (0.25, 0), (0.75, 0), (0.5, 0.5),
    (1, 0.25), (1, 0.75), (0.5, 0.5),
    (0.75, 1), (0.25, 1), (0.5, 0.5),
    (0, 0.75), (0, 0.25), (0.5, 0.5),
])

register_shape(CENTER, 5, "morning-star", [
    (0, 0), (0.5, 0.25), (1, 0), (0.75, 0.5),
    (1, 1), (0.5, 0.75), (0, 1), (0.25, 0.5),
])

register_shape(CENTER, 6, "small-square", [
    (0.33, 0.33), (0.67, 0.33), (0.67, 0.67), (0.33, 0.67),
])

# fourth vertex is (0.66, 0.33), not 0.67
register_shape(CENTER, 7, "checkerboard", [
    (0, 0), (0.33, 0), (0.33, 0.33), (0.66, 0.33), (0.67, 0),
    (1, 0), (1, 0.33), (0.67, 0.33), (0.67, 0.67), (1, 0.67),
    (0.67, 1), (0.67, 0.67), (0.33, 0.67), (0.33, 1), (0, 1),
    (0, 0.67), (0.33, 0.67), (0.33, 0.33), (0, 0.33),
])
