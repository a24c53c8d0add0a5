"""Health probes — liveness always up, readiness reports store sizes."""

import app.infrastructure.stores as stores_module


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_counts(client, yoga):
    await client.post(f"/atividades/{yoga['id']}/join", json={"userId": 1})
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"activities": 1, "participations": 1}


async def test_readiness_503_without_stores(client, monkeypatch):
    monkeypatch.setattr(stores_module, "store_registry", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
