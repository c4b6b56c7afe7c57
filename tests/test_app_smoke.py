from __future__ import annotations

from fastapi.testclient import TestClient


def test_app_smoke_routes(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    r = client.get("/api/restaurants")
    assert r.status_code == 200
    assert r.json() == []


def test_cors_allows_only_frontend_origin(data_file, monkeypatch):
    monkeypatch.setenv("FRONTEND_URL", "http://frontend.test")
    import app as app_module

    client = TestClient(app_module.create_app())

    r = client.get("/api/restaurants", headers={"Origin": "http://frontend.test"})
    assert r.headers.get("access-control-allow-origin") == "http://frontend.test"

    r = client.get("/api/restaurants", headers={"Origin": "http://evil.test"})
    assert "access-control-allow-origin" not in r.headers

    r = client.options(
        "/api/restaurants",
        headers={"Origin": "http://frontend.test", "Access-Control-Request-Method": "PATCH"},
    )
    assert r.status_code == 400


def test_unexpected_errors_become_500():
    import app as app_module

    class BrokenRepository:
        async def list_restaurants(self):
            raise RuntimeError("boom")

    client = TestClient(app_module.create_app(repository=BrokenRepository()), raise_server_exceptions=False)
    r = client.get("/api/restaurants")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}
    assert "boom" not in r.text
