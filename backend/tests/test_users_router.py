# backend/tests/test_users_router.py

from fastapi.testclient import TestClient


def test_seeded_admin_is_listed(client: TestClient) -> None:
    users = client.get("/api/users").json()

    assert users == [{"id": "1", "username": "admin", "password": "admin123", "name": "Admin User"}]


def test_register_user(client: TestClient) -> None:
    resp = client.post(
        "/api/users/register",
        json={"username": "ana", "password": "secret", "name": "Ana"},
    )
    assert resp.status_code == 200

    body = resp.json()
    assert body["username"] == "ana"
    assert body["name"] == "Ana"
    assert "password" not in body
    assert body["id"] and body["id"] != "1"

    ids = [u["id"] for u in client.get("/api/users").json()]
    assert body["id"] in ids


def test_register_duplicate_username_is_conflict(client: TestClient) -> None:
    first = client.post(
        "/api/users/register",
        json={"username": "ana", "password": "secret", "name": "Ana"},
    ).json()

    resp = client.post(
        "/api/users/register",
        json={"username": "ana", "password": "other", "name": "Impostor"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "conflict"

    anas = [u for u in client.get("/api/users").json() if u["username"] == "ana"]
    assert anas == [{"id": first["id"], "username": "ana", "password": "secret", "name": "Ana"}]


def test_register_existing_admin_username_is_conflict(client: TestClient) -> None:
    resp = client.post(
        "/api/users/register",
        json={"username": "admin", "password": "x", "name": "X"},
    )

    assert resp.status_code == 400
    assert resp.json()["error"] == "conflict"


def test_register_requires_all_fields(client: TestClient) -> None:
    resp = client.post("/api/users/register", json={"username": "ana"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"
