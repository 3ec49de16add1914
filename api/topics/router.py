"""
Topic suggestion API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from auth.schemas import Session

from . import schemas, service

router = APIRouter(prefix="/api/topic-suggestion")


@router.get("")
async def list_topics(
    brand_name: str | None = Query(default=None, max_length=500),
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.list_topics(brand_name, session=session)


@router.post("")
async def suggest_topics(
    request: schemas.SuggestTopicsRequest | None = None,
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.suggest_topics(request, session=session)


@router.delete("")
async def delete_topic(
    request: schemas.DeleteTopicRequest | None = None,
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.delete_topic(request, session=session)
