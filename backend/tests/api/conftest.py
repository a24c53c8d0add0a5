"""API test fixtures — fresh in-memory stores + FastAPI test client.

Invariants:
    - Every test gets a brand-new StoreRegistry (no state leaks between tests)
    - Store dependencies overridden to use that registry
    - stores.store_registry patched for routes that read the registry directly (readiness)

Design Decisions:
    - ASGITransport does not run the lifespan, so the registry is injected here
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.stores as stores_module
from app.infrastructure.stores import (
    StoreRegistry, get_activity_store, get_participation_ledger,
)
from app.main import app


@pytest.fixture
def registry() -> StoreRegistry:
    return StoreRegistry()


@pytest.fixture
async def client(registry):
    """FastAPI test client with store dependencies overridden."""
    app.dependency_overrides[get_activity_store] = lambda: registry.activity_store
    app.dependency_overrides[get_participation_ledger] = (
        lambda: registry.participation_ledger
    )
    original_registry = stores_module.store_registry
    stores_module.store_registry = registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    stores_module.store_registry = original_registry


@pytest.fixture
async def yoga(client):
    """Create the 'Yoga' activity through the API."""
    res = await client.post(
        "/atividades", json={"name": "Yoga", "creatorName": "Ana"},
    )
    assert res.status_code == 201
    return res.json()
