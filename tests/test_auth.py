import jwt
import pytest

from auth import security, service
from core import config


def test_session_from_bearer_token():
    token = security.build_session_token(user_id="u-42", email="a@example.com")

    session = service.resolve_session(f"Bearer {token}", None)

    assert session.user_id == "u-42"
    assert session.email == "a@example.com"


def test_no_credentials_means_no_session():
    assert service.resolve_session(None, None) is None
    assert service.resolve_session("   ", "") is None


def test_cookie_is_used_when_header_missing():
    token = security.build_session_token(user_id="u-7")

    session = service.resolve_session(None, token)

    assert session.user_id == "u-7"
    assert session.email is None


@pytest.mark.parametrize("header", ["Bearer", "Basic abc", "Token xyz"])
def test_malformed_authorization_header(header):
    with pytest.raises(security.AuthSecurityError):
        service.resolve_session(header, None)


def test_expired_token_rejected():
    token = security.build_session_token(user_id="u-1", expires_in_s=-10)

    with pytest.raises(security.AuthSecurityError, match="expired"):
        security.decode_session_token(token)


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode({"sub": "u-1", "exp": security.now_epoch_s() + 60}, "other-secret", algorithm="HS256")

    with pytest.raises(security.AuthSecurityError):
        security.decode_session_token(token)


def test_token_without_subject_rejected():
    token = jwt.encode({"exp": security.now_epoch_s() + 60}, config.session_secret(), algorithm="HS256")

    with pytest.raises(security.AuthSecurityError, match="subject"):
        service.session_from_token(token)


def test_session_cookie_accepted_by_gated_route(client, monkeypatch):
    from geo_files import repository

    async def no_rows(**_):
        return []

    monkeypatch.setattr(repository, "list_files_for_user", no_rows)
    token = security.build_session_token(user_id="u-9")
    client.cookies.set("session_token", token)

    resp = client.get("/api/geo-files/history")

    assert resp.status_code == 200
    assert resp.json() == {"files": []}
