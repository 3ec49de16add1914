"""
Session dependencies for protected FastAPI routes.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, Request, status

from core import config

from . import schemas, security, service

logger = logging.getLogger(__name__)


async def optional_session(
    request: Request,
    authorization: str | None = Header(default=None),
) -> schemas.Session | None:
    """
    Resolve the caller's session; bad or missing credentials yield None.
    """
    cookie_token = request.cookies.get(config.session_cookie_name())
    try:
        return service.resolve_session(authorization, cookie_token)
    except security.AuthSecurityError as exc:
        logger.info("session_ignored reason=%s", exc)
        return None


async def require_session(
    session: schemas.Session | None = Depends(optional_session),
) -> schemas.Session:
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return session
