# backend/tests/test_clients_router.py

from fastapi.testclient import TestClient


def _create_client(client: TestClient, **overrides) -> dict:
    payload = {"name": "Acme", "email": "a@x.com", "phone": "123"}
    payload.update(overrides)
    resp = client.post("/api/clients", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_create_then_list_returns_new_client(client: TestClient) -> None:
    created = _create_client(client)
    other = _create_client(client, name="Globex")

    resp = client.get("/api/clients")
    assert resp.status_code == 200

    data = resp.json()
    assert created == {"id": created["id"], "name": "Acme", "email": "a@x.com", "phone": "123"}
    assert other["id"] != created["id"]
    assert [c for c in data if c["id"] == created["id"]] == [created]


def test_update_replaces_all_fields(client: TestClient) -> None:
    created = _create_client(client)

    resp = client.put(f"/api/clients/{created['id']}", json={"name": "Acme Corp"})
    assert resp.status_code == 200

    # 全項目置き換えなので、送らなかった email / phone は null になる
    assert resp.json() == {"id": created["id"], "name": "Acme Corp", "email": None, "phone": None}


def test_update_missing_client_returns_404(client: TestClient) -> None:
    resp = client.put("/api/clients/999", json={"name": "Ghost"})

    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_delete_missing_client_returns_404(client: TestClient) -> None:
    resp = client.delete("/api/clients/999")

    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_create_without_name_returns_400(client: TestClient) -> None:
    resp = client.post("/api/clients", json={"email": "a@x.com"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "validation_error"
    assert "name" in body["message"]


def test_non_integer_id_returns_400(client: TestClient) -> None:
    resp = client.delete("/api/clients/abc")

    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"


def test_delete_client_cascades_to_its_projects_only(client: TestClient) -> None:
    acme = _create_client(client)
    globex = _create_client(client, name="Globex")

    site = client.post(
        "/api/projects",
        json={"title": "Site", "clientId": acme["id"], "status": "active", "deadline": "2025-01-01"},
    ).json()
    app_project = client.post("/api/projects", json={"title": "App", "clientId": globex["id"]}).json()

    resp = client.delete(f"/api/clients/{acme['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Client deleted"}

    project_ids = [p["id"] for p in client.get("/api/projects").json()]
    client_ids = [c["id"] for c in client.get("/api/clients").json()]

    assert site["id"] not in project_ids
    assert app_project["id"] in project_ids
    assert client_ids == [globex["id"]]
