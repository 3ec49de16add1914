from fastapi import HTTPException
from fastapi.testclient import TestClient

from core import db, errors
from main import app


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_malformed_json_is_400_with_details(client, auth_headers):
    resp = client.post(
        "/api/brand-monitor/generate-personas",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]


def test_error_body_shapes():
    plain = HTTPException(status_code=404, detail="Not found")
    typed = errors.ValidationError("Invalid request", {"field": "required"})

    assert errors.error_body(plain) == {"error": "Not found"}
    assert errors.error_body(typed) == {
        "error": "Invalid request",
        "code": "VALIDATION_ERROR",
        "details": {"field": "required"},
    }
    assert typed.status_code == 400


def test_unhandled_error_is_generic_500(auth_headers, monkeypatch):
    from geo_files import service

    async def broken(**_):
        raise KeyError("boom")

    monkeypatch.setattr(service, "file_history", broken)
    local = TestClient(app, raise_server_exceptions=False)

    resp = local.get("/api/geo-files/history", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}


def test_lifespan_skips_pool_without_database(monkeypatch):
    with TestClient(app) as local:
        assert local.get("/").status_code == 200
    assert db.is_configured() is False


def test_sanitize_database_url_drops_sslmode():
    url = "postgresql://u:p@host/db?sslmode=require&application_name=api"

    assert db._sanitize_database_url(url) == "postgresql://u:p@host/db?application_name=api"
