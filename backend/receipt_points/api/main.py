"""Entry point for the FastAPI application.

This module constructs the FastAPI app, includes the routers and sets
up startup and shutdown events.  When run with uvicorn it serves the
module-level ``app``; tests call :func:`create_app` to get an
application with its own empty score store.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from receipt_points.api.endpoints.health import router as health_router
from receipt_points.api.error_handlers import generic_exception_handler, validation_exception_handler
from receipt_points.api.routes.receipts import router as receipts_router
from receipt_points.core.config import settings
from receipt_points.core.observability import init_sentry
from receipt_points.services.score_store import ScoreStore

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info("Starting %s on %s:%s", settings.PROJECT_NAME, settings.HOST, settings.PORT)
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    # Shutdown
    logger.info("Shutting down with %d scored receipt(s) in memory", len(app.state.score_store))


def _cors_origins() -> list[str]:
    """In development allow all origins, otherwise the configured list."""
    env_is_dev = (settings.ENVIRONMENT or "development").lower() == "development"
    if env_is_dev:
        return ["*"]
    # Deduplicate preserving order
    seen: set[str] = set()
    return [o for o in settings.BACKEND_CORS_ORIGINS if not (o in seen or seen.add(o))]


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    # Scores live as long as the app; nothing is persisted
    app.state.score_store = ScoreStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Register custom exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(receipts_router)
    app.include_router(health_router)
    return app


app = create_app()
