"""GET/HEAD {identicon_path}: render (or replay from cache) one identicon PNG."""

from __future__ import annotations

import asyncio
import logging
from functools import partial

from fastapi import APIRouter, Depends, Request, Response

from identicon.cache.store import ResponseCache, cache_key
from identicon.config import Settings
from identicon.dependencies import get_cache, get_renderer, get_settings
from identicon.engine import IdenticonRenderer
from identicon.engine.finisher import CONTENT_TYPE
from identicon.models.requests import IdenticonRequest

router = APIRouter()
logger = logging.getLogger(__name__)


def _request_uri(request: Request) -> str:
    """Path plus raw query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _png_response(data: bytes) -> Response:
    return Response(
        content=data,
        media_type=CONTENT_TYPE,
        headers={"Content-Length": str(len(data))},
    )


@router.head("")
async def identicon_head() -> Response:
    return Response(media_type=CONTENT_TYPE)


@router.get(
    "",
    response_class=Response,
    responses={200: {"content": {CONTENT_TYPE: {}}, "description": "Identicon PNG"}},
)
async def identicon(
    request: Request,
    settings: Settings = Depends(get_settings),
    cache: ResponseCache = Depends(get_cache),
    renderer: IdenticonRenderer = Depends(get_renderer),
) -> Response:
    key = cache_key(_request_uri(request))

    try:
        cached = cache.get(key)
    except Exception as e:
        logger.warning("Cache lookup failed for %s: %s", key, e)
        cached = None
    if cached is not None:
        logger.debug("Cache hit %s", key)
        return _png_response(cached)

    req = IdenticonRequest.from_query(request.query_params)

    # Rendering is CPU-bound; keep it off the event loop
    loop = asyncio.get_running_loop()
    image = await loop.run_in_executor(
        None,
        partial(renderer.render, req.hash, req.size, req.transparent),
    )

    try:
        cache.set(key, image.data, settings.identicon_cache_expire)
    except Exception as e:
        logger.warning("Cache store failed for %s: %s", key, e)

    return _png_response(image.data)
