"""Image finishing: final resize, transparency key and PNG encoding."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image

from identicon.engine.config import RenderConfig
from identicon.engine.errors import AllocationError, EncodingError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "image/png"


@dataclass(frozen=True)
class EncodedImage:
    data: bytes
    width: int
    height: int
    transparent: bool = False
    content_type: str = CONTENT_TYPE

    @property
    def length(self) -> int:
        return len(self.data)


def resize(canvas: Image.Image, width: int, height: int, config: RenderConfig) -> Image.Image:
    """Resample to ``width`` x ``height``; returns ``canvas`` itself when already that size."""
    if canvas.size == (width, height):
        return canvas
    try:
        return canvas.resize((width, height), resample=config.resample)
    except (MemoryError, ValueError) as e:
        raise AllocationError(f"Could not allocate {width}x{height} output: {e}") from e


def encode_png(img: Image.Image, transparent_color: tuple[int, int, int] | None = None) -> bytes:
    """Lossless PNG encoding, optionally with a tRNS colour key."""
    buf = io.BytesIO()
    options = {}
    if transparent_color is not None:
        options["transparency"] = transparent_color
    try:
        img.save(buf, format="PNG", **options)
    except (OSError, ValueError) as e:
        raise EncodingError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


def finish(
    canvas: Image.Image,
    width: int,
    height: int,
    transparent: bool = False,
    config: RenderConfig | None = None,
) -> EncodedImage:
    """Resize, key out the background if asked, and encode.

    The transparency key only marks the background colour; pixel values are
    the same with and without it.
    """
    config = config or RenderConfig()

    out = resize(canvas, width, height, config)
    try:
        data = encode_png(out, config.background if transparent else None)
    finally:
        if out is not canvas:
            out.close()

    logger.debug("Encoded %dx%d PNG (%d bytes, transparent=%s)", width, height, len(data), transparent)
    return EncodedImage(data=data, width=width, height=height, transparent=transparent)
