"""
Session token helpers.

Tokens are issued by the external auth provider and signed with the shared
`SESSION_SECRET`. This service only verifies them; `build_session_token`
exists for provider integration and tests.
"""

from __future__ import annotations

import time
from typing import Any

import jwt

from core import config


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def build_session_token(*, user_id: str, email: str | None = None, expires_in_s: int | None = None) -> str:
    issued_at = now_epoch_s()
    lifetime = expires_in_s if expires_in_s is not None else config.session_expire_minutes() * 60

    payload: dict[str, Any] = {
        "sub": str(user_id),
        "type": "session",
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, config.session_secret(), algorithm=config.session_algorithm())


def decode_session_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Session token is empty.")

    try:
        payload = jwt.decode(raw, config.session_secret(), algorithms=[config.session_algorithm()])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Session token is expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid session token.") from exc

    token_type = str(payload.get("type") or "session").strip().lower()
    if token_type != "session":
        raise AuthSecurityError("Token is not a session token.")

    return payload
