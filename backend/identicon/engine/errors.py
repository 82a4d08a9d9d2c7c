"""Render error hierarchy."""

from __future__ import annotations


class IdenticonError(Exception):
    """Base class for everything the render core raises."""


class RenderError(IdenticonError):
    """The render pass aborted; no image was produced."""


class AllocationError(RenderError):
    """A sprite or canvas could not be allocated."""


class EncodingError(RenderError):
    """The finished canvas could not be encoded."""


class InvalidSizeError(IdenticonError, ValueError):
    """Requested output size is negative or above the configured ceiling."""
