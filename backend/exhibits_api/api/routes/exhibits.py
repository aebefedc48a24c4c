"""Exhibits Route — GET /exhibits with optional id filtering.

Invariants:
    - No ids (or empty ids) returns every exhibit in file order
    - ids is comma-separated integers; malformed tokens are skipped
    - Data file failures propagate as DataFile*Error (500, plain text)
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response

from exhibits_api.api.cors import apply_cors_headers
from exhibits_api.config import Settings, get_settings
from exhibits_api.core.filtering import apply_filter, parse_int_keys
from exhibits_api.schemas.exhibit import Exhibit
from exhibits_api.services.dataset_loader import load_exhibits

logger = logging.getLogger(__name__)
router = APIRouter(tags=["exhibits"])


@router.get("/exhibits", response_model=list[Exhibit])
def list_exhibits(
    request: Request,
    response: Response,
    ids: str | None = Query(default=None),
    settings: Settings = Depends(get_settings),
):
    """Return exhibits, filtered to the requested ids when given."""
    client = request.client.host if request.client else None
    logger.info(
        f"Received request: {request.method} {request.url.path} from {client}",
        extra={"method": request.method, "path": request.url.path, "client": client},
    )
    exhibits = load_exhibits(settings.exhibits_file, settings.data_dir)
    selected = apply_filter(exhibits, ids, parse_int_keys, lambda e: e.exhibit_id)
    apply_cors_headers(response)
    return selected
