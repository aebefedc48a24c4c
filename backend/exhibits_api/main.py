"""Exhibits API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExhibitsApiError → plain-text responses
    - CORS configured from settings (not hardcoded)
    - No shared mutable state: every request reads its dataset fresh

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - CORSMiddleware answers browser preflight OPTIONS; dataset routes also set
      their fixed CORS headers so non-browser clients see them too
    - run() binds the configured port; the Docker image exposes the same one
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exhibits_api.api.error_handlers import register_error_handlers
from exhibits_api.api.routes import artefacts, exhibits, health
from exhibits_api.config import get_settings
from exhibits_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Exhibits API started (port {settings.port})")
    yield
    logger.info("Exhibits API shutting down")


app = FastAPI(title="Exhibits API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_methods,
    allow_headers=settings.cors_headers,
)

app.include_router(health.router)
app.include_router(exhibits.router)
app.include_router(artefacts.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn on the configured host/port."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
