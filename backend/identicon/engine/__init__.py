"""Identicon render engine."""

from identicon.engine.registry import Region, ShapeCatalog, get_catalog
from identicon.engine import shapes  # noqa: F401  (fills the default catalog)
from identicon.engine.config import RenderConfig
from identicon.engine.errors import (
    AllocationError,
    EncodingError,
    IdenticonError,
    InvalidSizeError,
    RenderError,
)
from identicon.engine.finisher import EncodedImage
from identicon.engine.params import DEFAULT_HASH, ImageParams, extract
from identicon.engine.pipeline import DEFAULT_SIZE, IdenticonRenderer, create_renderer, render

__all__ = [
    "Region",
    "ShapeCatalog",
    "get_catalog",
    "RenderConfig",
    "AllocationError",
    "EncodingError",
    "IdenticonError",
    "InvalidSizeError",
    "RenderError",
    "EncodedImage",
    "DEFAULT_HASH",
    "ImageParams",
    "extract",
    "DEFAULT_SIZE",
    "IdenticonRenderer",
    "create_renderer",
    "render",
]
