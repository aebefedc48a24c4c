"""Dataset Loader — locate, read and decode the static JSON datasets.

Invariants:
    - Every call reads the file fresh from disk; nothing is cached
    - Failures surface as DataFile*Error, never as raw OSError/ValidationError
    - load_artefacts returns only the envelope's results list

Design Decisions:
    - Synchronous IO: routes are plain `def` handlers, so FastAPI runs each
      request in its threadpool and a slow disk never blocks the event loop
    - Strict JSON decode in one pass (pydantic-core parser): no type coercion
"""

import logging

from pydantic import ValidationError

from exhibits_api.core.errors import (
    DataFileDecodeError, DataFileNotFoundError, DataFileReadError,
)
from exhibits_api.infrastructure.file_locator import find_file
from exhibits_api.schemas.artefact import Artefact, decode_artefact_envelope
from exhibits_api.schemas.exhibit import Exhibit, decode_exhibits

logger = logging.getLogger(__name__)


def read_data_file(filename: str, data_dir: str | None = None) -> bytes:
    """Locate filename and return its raw bytes."""
    path = find_file(filename, data_dir)
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        raise DataFileReadError(filename, path, e.strerror or str(e)) from e


def load_exhibits(filename: str, data_dir: str | None = None) -> list[Exhibit]:
    data = read_data_file(filename, data_dir)
    try:
        exhibits = decode_exhibits(data)
    except ValidationError as e:
        raise DataFileDecodeError(filename, str(e)) from e
    logger.debug(
        f"Decoded {len(exhibits)} exhibits",
        extra={"data_file": filename, "result_count": len(exhibits)},
    )
    return exhibits


def load_artefacts(filename: str, data_dir: str | None = None) -> list[Artefact]:
    data = read_data_file(filename, data_dir)
    try:
        envelope = decode_artefact_envelope(data)
    except ValidationError as e:
        raise DataFileDecodeError(filename, str(e)) from e
    logger.debug(
        f"Decoded {len(envelope.results)} of {envelope.count} artefacts",
        extra={"data_file": filename, "result_count": len(envelope.results)},
    )
    return envelope.results


def data_file_available(filename: str, data_dir: str | None = None) -> bool:
    """Readiness check: True when filename can be located."""
    try:
        find_file(filename, data_dir)
    except DataFileNotFoundError:
        return False
    return True
