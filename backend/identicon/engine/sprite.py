"""Sprite rendering: one shape drawn into one square tile.

Each sprite is filled with its background, the shape polygon is drawn in the
foreground colour on a supersampled canvas, and the result is box-reduced
to the sprite size. Ring sprites are then turned by their rotation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from PIL import Image, ImageDraw

from identicon.engine.config import RenderConfig
from identicon.engine.errors import AllocationError
from identicon.engine.params import ImageParams, ShapeSpec
from identicon.engine.registry import Region, ShapeCatalog, ShapeDef, get_catalog
from identicon.utils.geometry import channels_differ, scale_points

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]

# Quarter turns, counter-clockwise as displayed (y axis down)
_QUARTER_TURNS = {
    1: Image.Transpose.ROTATE_90,
    2: Image.Transpose.ROTATE_180,
    3: Image.Transpose.ROTATE_270,
}


@contextmanager
def _allocating(what: str) -> Iterator[None]:
    try:
        yield
    except (MemoryError, ValueError) as e:
        raise AllocationError(f"Could not allocate {what}: {e}") from e


def new_canvas(width: int, height: int, color: Color) -> Image.Image:
    """Allocate an RGB canvas filled with ``color``."""
    with _allocating(f"{width}x{height} canvas"):
        return Image.new("RGB", (width, height), color)


def rotate_quarter_turns(img: Image.Image, turns: int) -> Image.Image:
    """Return ``img`` turned by ``turns`` quarter turns and close the source.

    Transposes are lossless, so four single turns give back the original
    pixels exactly. Zero turns returns ``img`` itself.
    """
    turns %= 4
    if turns == 0:
        return img
    try:
        with _allocating("rotated sprite"):
            return img.transpose(_QUARTER_TURNS[turns])
    finally:
        img.close()


def draw_shape(
    shape: ShapeDef,
    size: int,
    foreground: Color,
    background: Color,
    supersample: int = 1,
) -> Image.Image:
    """Draw ``shape`` into a new ``size`` x ``size`` tile."""
    hi = new_canvas(size * supersample, size * supersample, background)
    try:
        if not shape.is_blank:
            points = scale_points(shape.points, size, supersample)
            ImageDraw.Draw(hi).polygon(points, fill=foreground)
        if supersample == 1:
            return hi.copy()
        with _allocating("sprite"):
            return hi.reduce(supersample)
    finally:
        hi.close()


def render_ring_sprite(
    spec: ShapeSpec,
    config: RenderConfig | None = None,
    catalog: ShapeCatalog | None = None,
) -> Image.Image:
    """Corner or side sprite: spec colour on the canvas background, then rotated."""
    config = config or RenderConfig()
    catalog = catalog or get_catalog()

    shape = catalog.get(Region.RING, spec.shape_id)
    img = draw_shape(
        shape,
        config.sprite_size,
        foreground=spec.color,
        background=config.background,
        supersample=config.supersample,
    )
    logger.debug("Ring sprite %s (id %d), %d quarter turns", shape.name, spec.shape_id, spec.rotation)
    if spec.rotation > 0:
        img = rotate_quarter_turns(img, spec.rotation)
    return img


def center_background(params: ImageParams, default: Color) -> Color:
    """Side colour when the flag is set and corner/side contrast strongly, else ``default``."""
    if params.center.use_side_background and channels_differ(
        (params.corner.red, params.corner.green, params.corner.blue),
        (params.side.red, params.side.green, params.side.blue),
    ):
        return params.side.color
    return default


def render_center_sprite(
    params: ImageParams,
    config: RenderConfig | None = None,
    catalog: ShapeCatalog | None = None,
) -> Image.Image:
    """Center sprite: corner colour on white or on the side colour. Never rotated."""
    config = config or RenderConfig()
    catalog = catalog or get_catalog()

    shape = catalog.get(Region.CENTER, params.center.shape_id)
    background = center_background(params, config.background)
    logger.debug("Center sprite %s (id %d), background %s", shape.name, params.center.shape_id, background)
    return draw_shape(
        shape,
        config.sprite_size,
        foreground=params.corner.color,
        background=background,
        supersample=config.supersample,
    )
