"""Error Handlers — global exception handlers for the exhibits API.

Invariants:
    - ExhibitsApiError → plain-text body (exc.message) with exc.http_status
    - Exception (catch-all) → 500 plain text, never leaks internal details
    - Every handled error is logged server-side with its detail

Design Decisions:
    - Error bodies are plain text; no JSON error envelope, no error codes on the wire
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from exhibits_api.core.errors import ExhibitsApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register data file / domain error handler."""

    @app.exception_handler(ExhibitsApiError)
    async def api_error_handler(request: Request, exc: ExhibitsApiError):
        """Handle all service errors."""
        detail = f" ({exc.detail})" if exc.detail else ""
        logger.error(
            f"{exc.code}: {exc.message}{detail}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return PlainTextResponse(exc.to_text(), status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
