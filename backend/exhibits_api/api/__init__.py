"""API Layer — FastAPI routes, CORS headers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Dataset endpoints return JSON arrays; failures return plain text

Design Decisions:
    - Thin routes delegate to services (load) and core (filter)
"""
