"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    ring_shapes: int = 0
    center_shapes: int = 0
    ring_fallback: str = ""
    center_fallback: str = ""
    cache: str = "disabled"
