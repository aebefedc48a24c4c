"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET / always returns 200 "Hello, world!" if the process is up (liveness)
    - GET /health/ready returns 503 if either data file cannot be located

Design Decisions:
    - Liveness never touches the data files: a bad dataset fails its own route,
      not the whole container
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from exhibits_api.config import Settings, get_settings
from exhibits_api.services.dataset_loader import data_file_available

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def hello():
    """Basic liveness probe."""
    return "Hello, world!"


@router.get("/health/ready")
def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — both datasets must be locatable."""
    checks = {
        name: "available" if data_file_available(name, settings.data_dir) else "missing"
        for name in (settings.exhibits_file, settings.artefacts_file)
    }
    if "missing" in checks.values():
        logger.warning(f"Readiness check failed: {checks}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
