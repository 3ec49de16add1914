"""
Brand-monitor API endpoints.

The login check is a dependency so it runs before body validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from auth.schemas import Session

from . import schemas, service

router = APIRouter(prefix="/api/brand-monitor")


async def require_login(
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> Session:
    return service.ensure_session(session)


@router.post("/generate-personas")
async def generate_personas(
    request: schemas.GeneratePersonasRequest | None = None,
    session: Session = Depends(require_login),
) -> dict:
    return await service.generate_personas(request, session=session)


@router.post("/generate-prompts")
async def generate_prompts(
    request: schemas.GeneratePromptsRequest | None = None,
    session: Session = Depends(require_login),
) -> dict:
    return await service.generate_prompts(request, session=session)
