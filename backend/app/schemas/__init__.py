"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Domain records from core/ converted explicitly (from_activity / to_fields)

Design Decisions:
    - Separate from core records: schemas are API contracts, dataclasses are domain state
"""
