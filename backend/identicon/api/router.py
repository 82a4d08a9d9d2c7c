"""Master API router: mounts the meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from identicon.api import health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
