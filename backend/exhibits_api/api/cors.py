"""CORS Headers — fixed permissive headers attached to every dataset response.

Invariants:
    - Dataset responses carry these headers whether or not the request sent Origin
    - Error responses do not carry them (they are set only on success)
"""

from fastapi import Response

DATASET_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def apply_cors_headers(response: Response) -> None:
    response.headers.update(DATASET_CORS_HEADERS)
