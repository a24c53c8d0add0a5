"""Core Layer — activity/participation rules, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Stores own their collections; errors are raised, never returned

Design Decisions:
    - Domain logic separated from the HTTP shell so it is unit-testable without a client
"""
