"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from identicon.cache.store import ResponseCache
from identicon.dependencies import get_cache
from identicon.engine import Region, get_catalog
from identicon.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cache: ResponseCache = Depends(get_cache)) -> HealthResponse:
    catalog = get_catalog()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        ring_shapes=catalog.count(Region.RING),
        center_shapes=catalog.count(Region.CENTER),
        ring_fallback=catalog.fallback(Region.RING).name,
        center_fallback=catalog.fallback(Region.CENTER).name,
        cache=cache.name,
    )
