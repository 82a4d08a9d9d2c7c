"""Compositor: assembles corner, side and center sprites into the 3x3 base canvas.

Cells are (column, row). The corner sprite goes to the top-left cell and is
then turned one quarter at a time for the bottom-left, bottom-right and
top-right cells; the side sprite walks top, left, bottom, right the same
way, so all four placements are bit-identical rotations of each other.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from PIL import Image

from identicon.engine.config import RenderConfig
from identicon.engine.sprite import new_canvas, rotate_quarter_turns
from identicon.utils.geometry import cell_origin

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

CORNER_CELLS: tuple[Cell, ...] = ((0, 0), (0, 2), (2, 2), (2, 0))
SIDE_CELLS: tuple[Cell, ...] = ((1, 0), (0, 1), (1, 2), (2, 1))
CENTER_CELL: Cell = (1, 1)


def place_rotations(
    base: Image.Image,
    sprite: Image.Image,
    cells: Sequence[Cell],
    cell_size: int,
) -> None:
    """Paste ``sprite`` into the first cell, then a quarter turn more into each next one.

    ``sprite`` itself is left untouched; every intermediate turn is owned
    here and closed once pasted.
    """
    current = sprite.copy()
    try:
        for i, (col, row) in enumerate(cells):
            if i > 0:
                current = rotate_quarter_turns(current, 1)
            base.paste(current, cell_origin(col, row, cell_size))
    finally:
        current.close()


def compose(
    corner: Image.Image,
    side: Image.Image,
    center: Image.Image,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Build the base canvas (3 * sprite_size square) from the three sprites."""
    config = config or RenderConfig()
    cell = config.sprite_size

    base = new_canvas(config.canvas_size, config.canvas_size, config.background)
    try:
        place_rotations(base, corner, CORNER_CELLS, cell)
        place_rotations(base, side, SIDE_CELLS, cell)
        base.paste(center, cell_origin(*CENTER_CELL, cell))
    except Exception:
        base.close()
        raise

    logger.debug("Composed %dx%d base canvas", config.canvas_size, config.canvas_size)
    return base
