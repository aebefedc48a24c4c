"""Infrastructure Layer — filesystem lookup and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Filesystem failures mapped to the core error hierarchy

Design Decisions:
    - Thin wrappers over os / logging: nothing here holds state between requests
"""
