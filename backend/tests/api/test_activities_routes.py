"""Activities routes — HTTP contract for /atividades.

Invariants:
    - POST returns 201 with the stored record and a store-assigned id
    - GET /{id} and DELETE /{id} return 404 {"erro"} for unknown ids
    - `participa` appears only when userId is passed
"""


async def test_create_returns_201_with_id(client):
    res = await client.post("/atividades", json={
        "name": "Yoga", "description": "Alongamento", "category": "bem-estar",
        "creatorName": "Ana", "durationMinutes": 30,
    })
    assert res.status_code == 201
    assert res.json() == {
        "id": 1, "name": "Yoga", "description": "Alongamento",
        "category": "bem-estar", "creatorName": "Ana", "durationMinutes": 30,
    }


async def test_create_partial_body_returns_201(client):
    res = await client.post("/atividades", json={"name": "Yoga"})
    assert res.status_code == 201
    assert res.json()["id"] == 1
    assert res.json()["creatorName"] is None


async def test_create_empty_body_returns_201(client):
    res = await client.post("/atividades", json={})
    assert res.status_code == 201
    assert res.json()["name"] is None


async def test_create_wrong_type_returns_400(client):
    res = await client.post("/atividades", json={"durationMinutes": "muito"})
    assert res.status_code == 400
    body = res.json()
    assert body["erro"] == "Dados inválidos"
    assert any(d["campo"].endswith("durationMinutes") for d in body["detalhes"])


async def test_get_returns_created_activity(client, yoga):
    res = await client.get(f"/atividades/{yoga['id']}")
    assert res.status_code == 200
    assert res.json() == yoga
    assert "participa" not in res.json()


async def test_get_unknown_returns_404(client):
    res = await client.get("/atividades/99")
    assert res.status_code == 404
    assert res.json() == {"erro": "Atividade não encontrada"}


async def test_get_non_integer_id_returns_400(client):
    res = await client.get("/atividades/abc")
    assert res.status_code == 400


async def test_list_all(client, yoga):
    await client.post("/atividades", json={"name": "Corrida", "creatorName": "Bruno"})
    res = await client.get("/atividades")
    assert res.status_code == 200
    assert [a["name"] for a in res.json()] == ["Yoga", "Corrida"]


async def test_list_empty(client):
    res = await client.get("/atividades")
    assert res.json() == []


async def test_list_filters_by_creator_case_insensitive(client, yoga):
    await client.post("/atividades", json={"name": "Corrida", "creatorName": "Bruno"})
    res = await client.get("/atividades", params={"creatorName": "ANA"})
    assert [a["name"] for a in res.json()] == ["Yoga"]


async def test_list_unmatched_filter_returns_empty(client, yoga):
    res = await client.get("/atividades", params={"creatorName": "Zé"})
    assert res.status_code == 200
    assert res.json() == []


async def test_list_with_user_id_adds_participa(client, yoga):
    await client.post("/atividades", json={"name": "Corrida", "creatorName": "Bruno"})
    await client.post(f"/atividades/{yoga['id']}/join", json={"userId": 42})
    res = await client.get("/atividades", params={"userId": 42})
    assert [a["participa"] for a in res.json()] == [True, False]


async def test_delete_returns_removed(client, yoga):
    res = await client.delete(f"/atividades/{yoga['id']}")
    assert res.status_code == 200
    assert res.json() == {"mensagem": "Atividade removida", "removida": [yoga]}


async def test_delete_then_get_returns_404(client, yoga):
    await client.delete(f"/atividades/{yoga['id']}")
    res = await client.get(f"/atividades/{yoga['id']}")
    assert res.status_code == 404


async def test_delete_unknown_returns_404(client):
    res = await client.delete("/atividades/5")
    assert res.status_code == 404
    assert res.json() == {"erro": "Atividade não encontrada"}


async def test_ids_not_reused_after_delete(client, yoga):
    await client.delete(f"/atividades/{yoga['id']}")
    res = await client.post("/atividades", json={"name": "Pilates", "creatorName": "Ana"})
    assert res.json()["id"] == yoga["id"] + 1


async def test_openapi_schema_published(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    paths = res.json()["paths"]
    assert "/atividades" in paths
    assert "/atividades/{activity_id}/join" in paths
