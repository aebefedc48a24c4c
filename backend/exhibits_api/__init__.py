"""Exhibits API — read-only HTTP service for museum exhibit and artefact datasets.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
