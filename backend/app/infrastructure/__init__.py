"""Infrastructure Layer — process wiring and cross-cutting concerns.

Invariants:
    - Holds process-wide singletons (store registry) and logging setup
    - Never contains activity/participation rules (those live in core/)

Design Decisions:
    - Singletons initialized in the FastAPI lifespan, never at import time
"""
