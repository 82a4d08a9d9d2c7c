"""FastAPI dependency injection.

Settings, the response cache and the renderer are built once by the app
factory and kept on ``app.state``; handlers receive them from here.
"""

from __future__ import annotations

from fastapi import Request

from identicon.cache.store import ResponseCache
from identicon.config import Settings
from identicon.engine import IdenticonRenderer


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache(request: Request) -> ResponseCache:
    return request.app.state.cache


def get_renderer(request: Request) -> IdenticonRenderer:
    return request.app.state.renderer
