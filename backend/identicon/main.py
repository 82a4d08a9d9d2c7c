"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from identicon.cache.store import build_cache
from identicon.config import Settings, settings as default_settings
from identicon.engine import InvalidSizeError, RenderConfig, RenderError, create_renderer

load_dotenv()

logging.basicConfig(
    level=getattr(logging, default_settings.identicon_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Identicon",
        description="Deterministic hash-derived avatar images",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Per-app collaborators; handlers get them through identicon.dependencies
    app.state.settings = settings
    app.state.cache = build_cache(settings)
    app.state.renderer = create_renderer(RenderConfig(max_size=settings.identicon_max_size))

    _register_error_handlers(app)

    from identicon.api import identicon
    from identicon.api.router import api_router

    app.include_router(api_router)
    app.include_router(identicon.router, prefix=settings.identicon_path)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidSizeError)
    async def invalid_size(request: Request, exc: InvalidSizeError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(RenderError)
    async def render_failed(request: Request, exc: RenderError) -> PlainTextResponse:
        logger.error("Render failed for %s: %s", request.url, exc, exc_info=exc)
        return PlainTextResponse("Internal Server Error", status_code=500)


app = create_app()
