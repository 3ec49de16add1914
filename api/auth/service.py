"""
Session resolution.
"""

from __future__ import annotations

from . import schemas, security


def extract_bearer_token(authorization: str | None) -> str | None:
    raw = (authorization or "").strip()
    if not raw:
        return None

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise security.AuthSecurityError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise security.AuthSecurityError("Authorization must be: Bearer <token>.")
    return token


def session_from_token(token: str) -> schemas.Session:
    payload = security.decode_session_token(token)

    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise security.AuthSecurityError("Session token has no subject.")

    email = str(payload.get("email") or "").strip() or None
    return schemas.Session(user_id=subject, email=email)


def resolve_session(authorization: str | None, cookie_token: str | None) -> schemas.Session | None:
    """
    Return the caller's session, or None when no credentials were sent.

    The Authorization header wins over the session cookie. Credentials that are
    present but invalid raise `AuthSecurityError`.
    """
    token = extract_bearer_token(authorization) or (cookie_token or "").strip()
    if not token:
        return None
    return session_from_token(token)
