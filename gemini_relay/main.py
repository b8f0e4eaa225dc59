"""Gemini Relay API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly; health before the catch-all relay route
    - Origin allow-list read from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory so tests can build an app with their own Settings;
      the module-level `app` is what uvicorn serves
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gemini_relay.api.error_handlers import register_error_handlers
from gemini_relay.api.origin_policy import register_origin_policy
from gemini_relay.api.routes import ask, health
from gemini_relay.config import Settings, get_settings
from gemini_relay.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; relay requests will fail")
    logger.info("Gemini Relay API started")
    yield
    logger.info("Gemini Relay API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Gemini Relay API", version="1.0.0", lifespan=lifespan)

    register_origin_policy(app, settings.allowed_origins)
    register_error_handlers(app, settings.allowed_origins)

    app.include_router(health.router)
    app.include_router(ask.router)
    return app


app = create_app()
