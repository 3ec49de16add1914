"""
Blog writer API endpoints.

Session errors never reject these requests outright; each operation decides
what a missing session means.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from auth.schemas import Session

from . import schemas, service

router = APIRouter(prefix="/api/write-blog")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: schemas.CreateBlogRequest | None = None,
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.create_blog(request, session=session)


@router.get("/list")
async def list_blogs(
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.list_blogs(session=session)


@router.get("/view")
async def view_blog(
    id: str | None = Query(default=None),
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.view_blog(id, session=session)


@router.post("/update")
async def update_blog(
    request: schemas.UpdateBlogRequest | None = None,
    session: Session | None = Depends(auth_dependencies.optional_session),
) -> dict:
    return await service.update_blog(request, session=session)
