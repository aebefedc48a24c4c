"""Pydantic Schemas — typed records for the exhibits and artefacts datasets.

Invariants:
    - Wire key names are preserved exactly on decode and encode
    - Records are read-only value objects; nothing is persisted back

Design Decisions:
    - One module per record family; shared value objects live in common.py
"""
