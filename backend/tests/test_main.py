# backend/tests/test_main.py

from fastapi.testclient import TestClient

from app.config import AppSettings
from app.main import create_app


def test_health(client: TestClient) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_frontend_is_served_when_configured(tmp_path, db_settings) -> None:
    frontend = tmp_path / "public"
    frontend.mkdir()
    (frontend / "index.html").write_text("<h1>CRM</h1>", encoding="utf-8")

    app = create_app(
        database_settings=db_settings,
        app_settings=AppSettings(cors_allow_origins=["*"], frontend_dir=str(frontend)),
    )
    with TestClient(app) as client:
        page = client.get("/")
        api = client.get("/api/clients")

    assert page.status_code == 200
    assert "CRM" in page.text
    assert api.status_code == 200
    assert api.json() == []


def test_cors_header_is_returned(client: TestClient) -> None:
    resp = client.get("/api/clients", headers={"Origin": "http://frontend.test"})

    assert resp.headers.get("access-control-allow-origin") == "*"
