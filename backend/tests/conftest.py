"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from identicon.engine import RenderConfig

DEFAULT_HASH = "098f6bcd4621d373cade4e832627b4f6"

# Arbitrary 32-character hex hash
SAMPLE_HASH = "5c1ff1e9a1ef4bd2a5f9f82d1e35f1b4"

WHITE = (255, 255, 255)


def make_hash(
    corner_shape: int = 0,
    side_shape: int = 0,
    center_shape: int = 0,
    corner_rotation: int = 0,
    side_rotation: int = 0,
    flag: int = 0,
    corner_rgb: tuple[int, int, int] = (0, 0, 0),
    side_rgb: tuple[int, int, int] = (0, 0, 0),
) -> str:
    """Build a 32-character hex hash that decodes to exactly these parameters."""
    head = f"{corner_shape:x}{side_shape:x}{center_shape:x}{corner_rotation:x}{side_rotation:x}{flag:x}"
    colors = "".join(f"{c:02x}" for c in (*corner_rgb, *side_rgb))
    return (head + colors).ljust(32, "0")


def png_array(data: bytes) -> np.ndarray:
    """Decode PNG bytes to an RGB uint8 array (transparency key ignored)."""
    with Image.open(io.BytesIO(data)) as img:
        return np.array(img.convert("RGB"))


def tile(arr: np.ndarray, col: int, row: int, cell: int) -> np.ndarray:
    return arr[row * cell:(row + 1) * cell, col * cell:(col + 1) * cell]


@pytest.fixture
def config() -> RenderConfig:
    return RenderConfig()


@pytest.fixture
def small_config() -> RenderConfig:
    """Smaller sprites for faster pixel tests; same geometry."""
    return RenderConfig(sprite_size=32, supersample=2)


@pytest.fixture
def default_hash() -> str:
    return DEFAULT_HASH


class FakeMemcacheClient:
    """Stands in for a pymemcache client; records the expire of each set."""

    def __init__(self, accept: bool = True) -> None:
        self.data: dict[str, bytes] = {}
        self.expires: dict[str, int] = {}
        self.accept = accept

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, expire=0, noreply=None):
        if self.accept:
            self.data[key] = value
            self.expires[key] = expire
        return self.accept
