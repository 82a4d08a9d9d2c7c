"""Leaf-node geometry and colour helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

# A channel difference above this counts as strong contrast (half of 255).
CONTRAST_THRESHOLD = 127


def scale_points(
    fractions: Sequence[tuple[float, float]],
    size: int,
    factor: int = 1,
) -> list[tuple[int, int]]:
    """Scale unit-square fractions to integer pixel vertices.

    Each coordinate is truncated toward zero at ``size`` (so 0.67 * 128 gives
    85, not 86) and only then multiplied by ``factor``. Supersampled drawing
    therefore lands on exactly the same vertices as a direct draw.
    """
    if len(fractions) == 0:
        return []
    pts: NDArray[np.int64] = (np.asarray(fractions, dtype=np.float64) * size).astype(np.int64)
    pts *= factor
    return [(int(x), int(y)) for x, y in pts]


def channels_differ(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = CONTRAST_THRESHOLD,
) -> bool:
    """True if any channel of ``a`` and ``b`` differs by more than ``threshold``."""
    diff = np.abs(np.asarray(a, dtype=np.int64) - np.asarray(b, dtype=np.int64))
    return bool(np.any(diff > threshold))


def cell_origin(col: int, row: int, cell: int) -> tuple[int, int]:
    """Top-left pixel of grid cell (col, row)."""
    return (col * cell, row * cell)
