"""
GEO file API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from auth.schemas import Session

from . import schemas, service

router = APIRouter(prefix="/api/geo-files")


@router.post("")
async def trigger_geo_workflow(
    request: schemas.TriggerGeoRequest | None = None,
    session: Session = Depends(auth_dependencies.require_session),
) -> dict:
    return await service.trigger_geo_workflow(request, session=session)


@router.get("/history")
async def file_history(
    brand: str | None = Query(default=None, max_length=500),
    session: Session = Depends(auth_dependencies.require_session),
) -> dict:
    return await service.file_history(session=session, brand=brand)


@router.get("/{file_id}")
async def get_file(
    file_id: str,
    session: Session = Depends(auth_dependencies.require_session),
) -> dict:
    return await service.get_file(file_id, session=session)
