"""Render configuration: fixed geometry and resampling knobs."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

WHITE = (0xFF, 0xFF, 0xFF)


@dataclass(frozen=True)
class RenderConfig:
    """Controls how sprites are drawn and how the base canvas is finished."""

    # Sprite edge in pixels. Independent of the requested output size:
    # the composed canvas is resized exactly once, at the very end.
    sprite_size: int = 128

    # Polygons are drawn at sprite_size * supersample and box-reduced,
    # which anti-aliases edges while flat regions keep their exact colour.
    supersample: int = 4

    # Canvas background, also the colour keyed out for transparency
    background: tuple[int, int, int] = WHITE

    # Filter for the final resize. Nearest neighbour only picks existing
    # pixels, so background stays exactly the keyed-out colour.
    resample: Image.Resampling = Image.Resampling.NEAREST

    # Largest accepted output edge
    max_size: int = 4096

    @property
    def canvas_size(self) -> int:
        return self.sprite_size * 3
