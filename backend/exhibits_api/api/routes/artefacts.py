"""Artefacts Route — GET /artefacts with optional object-number filtering.

Invariants:
    - Response is the bare results list; the envelope is never rebuilt
    - objectNumbers tokens are trimmed and compared by exact string equality
    - Data file failures propagate as DataFile*Error (500, plain text)
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response

from exhibits_api.api.cors import apply_cors_headers
from exhibits_api.config import Settings, get_settings
from exhibits_api.core.filtering import apply_filter, parse_str_keys
from exhibits_api.schemas.artefact import Artefact
from exhibits_api.services.dataset_loader import load_artefacts

logger = logging.getLogger(__name__)
router = APIRouter(tags=["artefacts"])


@router.get("/artefacts", response_model=list[Artefact])
def list_artefacts(
    request: Request,
    response: Response,
    object_numbers: str | None = Query(default=None, alias="objectNumbers"),
    settings: Settings = Depends(get_settings),
):
    client = request.client.host if request.client else None
    logger.info(
        f"Received request: {request.method} {request.url.path} from {client}",
        extra={"method": request.method, "path": request.url.path, "client": client},
    )
    artefacts = load_artefacts(settings.artefacts_file, settings.data_dir)
    selected = apply_filter(
        artefacts, object_numbers, parse_str_keys, lambda a: a.object_number,
    )
    apply_cors_headers(response)
    return selected
