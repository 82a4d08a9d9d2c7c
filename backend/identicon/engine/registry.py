"""Shape catalog: every shape is a vertex table registered under (region, id).

Usage:
    register_shape(Region.RING, 0, "triangle", [(0.5, 1.0), (1.0, 0.0), (1.0, 1.0)])

Vertices are fractions of a unit square; the sprite renderer scales them to
pixels. Each region has one fallback shape that answers for any id not
registered explicitly.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class Region(enum.Enum):
    RING = "ring"
    CENTER = "center"


@dataclass(frozen=True)
class ShapeDef:
    region: Region
    id: int | None
    name: str
    points: tuple[Point, ...]

    @property
    def is_blank(self) -> bool:
        return not self.points


class ShapeCatalog:
    """Lookup table of shapes per region, with a fallback per region."""

    def __init__(self) -> None:
        self._shapes: dict[Region, dict[int, ShapeDef]] = {r: {} for r in Region}
        self._fallbacks: dict[Region, ShapeDef] = {}

    def register(self, shape: ShapeDef) -> None:
        table = self._shapes[shape.region]
        if shape.id is None:
            if shape.region in self._fallbacks:
                raise ValueError(f"Duplicate fallback for region {shape.region.value}")
            self._fallbacks[shape.region] = shape
        else:
            if shape.id in table:
                raise ValueError(f"Duplicate shape ID: {shape.region.value}/{shape.id}")
            table[shape.id] = shape
        logger.debug("Registered shape %s/%s (%s)", shape.region.value, shape.id, shape.name)

    def get(self, region: Region, shape_id: int) -> ShapeDef:
        shape = self._shapes[region].get(shape_id)
        if shape is not None:
            return shape
        try:
            return self._fallbacks[region]
        except KeyError:
            raise KeyError(f"No shape {shape_id} and no fallback in region {region.value}") from None

    def fallback(self, region: Region) -> ShapeDef:
        return self._fallbacks[region]

    def all(self, region: Region) -> list[ShapeDef]:
        """Explicit shapes by id, then the fallback."""
        shapes = sorted(self._shapes[region].values(), key=lambda s: s.id)
        if region in self._fallbacks:
            shapes.append(self._fallbacks[region])
        return shapes

    def count(self, region: Region) -> int:
        return len(self.all(region))


# Module-level default catalog, filled by identicon.engine.shapes
_catalog = ShapeCatalog()


def get_catalog() -> ShapeCatalog:
    return _catalog


def register_shape(
    region: Region,
    shape_id: int | None,
    name: str,
    points: list[Point],
) -> ShapeDef:
    """Register a shape in the default catalog. ``shape_id=None`` marks the fallback."""
    shape = ShapeDef(region=region, id=shape_id, name=name, points=tuple(points))
    _catalog.register(shape)
    return shape
