"""Services Layer — dataset loading (locate, read, decode).

Invariants:
    - Services return typed records or raise core errors; never HTTP responses

Design Decisions:
    - One loader per dataset file, sharing the read step
"""
