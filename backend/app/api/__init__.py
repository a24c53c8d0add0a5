"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors always carry an `erro` string

Design Decisions:
    - Thin routes delegate to ActivityStore/ParticipationLedger injected via Depends
"""
