"""Render orchestrator: hash in, PNG bytes out.

Extractor -> sprite renderer -> compositor -> finisher, in one synchronous
pass. Nothing is kept between calls, so one renderer can serve any number
of threads at once.
"""

from __future__ import annotations

import logging
import time
from contextlib import ExitStack

from identicon.engine.compositor import compose
from identicon.engine.config import RenderConfig
from identicon.engine.errors import InvalidSizeError
from identicon.engine.finisher import EncodedImage, finish
from identicon.engine.params import extract
from identicon.engine.registry import ShapeCatalog, get_catalog
from identicon.engine.sprite import render_center_sprite, render_ring_sprite

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 80


def resolve_size(size: int | None, max_size: int) -> int:
    """``None`` and 0 mean the default size; negatives and oversize are rejected."""
    if not size:
        return DEFAULT_SIZE
    if size < 0:
        raise InvalidSizeError(f"Size must be positive, got {size}")
    if size > max_size:
        raise InvalidSizeError(f"Size {size} exceeds maximum {max_size}")
    return size


class IdenticonRenderer:
    """Renders identicons with a fixed config and shape catalog."""

    def __init__(
        self,
        config: RenderConfig | None = None,
        catalog: ShapeCatalog | None = None,
    ) -> None:
        self.config = config or RenderConfig()
        self.catalog = catalog or get_catalog()

    def render(
        self,
        hash_value: str | None,
        size: int | None = DEFAULT_SIZE,
        transparent: bool = False,
    ) -> EncodedImage:
        start = time.perf_counter()
        size = resolve_size(size, self.config.max_size)
        params = extract(hash_value)

        with ExitStack() as sprites:
            corner = render_ring_sprite(params.corner, self.config, self.catalog)
            sprites.callback(corner.close)
            side = render_ring_sprite(params.side, self.config, self.catalog)
            sprites.callback(side.close)
            center = render_center_sprite(params, self.config, self.catalog)
            sprites.callback(center.close)
            base = compose(corner, side, center, self.config)

        try:
            image = finish(base, size, size, transparent, self.config)
        finally:
            base.close()

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "Rendered identicon corner=%d side=%d center=%d size=%d in %.1fms",
            params.corner.shape_id,
            params.side.shape_id,
            params.center.shape_id,
            size,
            elapsed,
        )
        return image


def create_renderer(config: RenderConfig | None = None) -> IdenticonRenderer:
    """Factory function for creating a renderer instance."""
    return IdenticonRenderer(config=config)


def render(
    hash_value: str | None,
    size: int | None = DEFAULT_SIZE,
    transparent: bool = False,
    config: RenderConfig | None = None,
) -> EncodedImage:
    """Render one identicon with a throwaway renderer."""
    return IdenticonRenderer(config=config).render(hash_value, size, transparent)
