"""Store Registry — process-wide holder of the in-memory ActivityStore and ParticipationLedger.

Invariants:
    - One ActivityStore and one ParticipationLedger per process, created on startup
    - The ledger always reads the same ActivityStore instance the routes write to
    - Resource routes receive stores through FastAPI dependencies; only readiness reads the registry

Design Decisions:
    - Registry initialized in lifespan, like a DB session manager: no import side effects
    - In-memory, single process: state lost on restart, no multi-worker support
      (ADR: no persistence layer)
    - Dependencies are overridable, so tests inject fresh stores per test
"""

from app.core.activity_store import ActivityStore
from app.core.participation_ledger import ParticipationLedger


class StoreRegistry:
    """Owns the store/ledger pair for the running application."""

    def __init__(self) -> None:
        self.activity_store = ActivityStore()
        self.participation_ledger = ParticipationLedger(self.activity_store)

    def stats(self) -> dict[str, int]:
        return {
            "activities": len(self.activity_store),
            "participations": len(self.participation_ledger),
        }


# Singleton (initialized on startup)
store_registry: StoreRegistry | None = None


def init_stores() -> StoreRegistry:
    global store_registry
    store_registry = StoreRegistry()
    return store_registry


def _registry() -> StoreRegistry:
    if not store_registry:
        raise RuntimeError("Stores not initialized")
    return store_registry


def get_activity_store() -> ActivityStore:
    """FastAPI dependency for the activity store."""
    return _registry().activity_store


def get_participation_ledger() -> ParticipationLedger:
    """FastAPI dependency for the participation ledger."""
    return _registry().participation_ledger
