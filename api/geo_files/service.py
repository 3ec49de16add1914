"""
GEO file business logic.

Scope:
- owner-scoped file lookup and history
- GEO workflow trigger: create a file record, then notify the webhook
"""

from __future__ import annotations

import json
import logging
from typing import Any
from uuid import UUID

import httpx
from fastapi import HTTPException, status

from auth.schemas import Session
from core import config

from . import repository, schemas

logger = logging.getLogger(__name__)

_COMPETITOR_KEYS = ("competitors", "topCompetitors", "competitorList")


class WebhookError(RuntimeError):
    pass


def _parse_uuid(raw: str) -> UUID | None:
    try:
        return UUID(raw)
    except ValueError:
        return None


def _to_file_response(row: dict) -> dict:
    return {
        "id": str(row["id"]),
        "userId": row.get("user_id"),
        "userEmail": row.get("user_email"),
        "brand": row.get("brand"),
        "url": row.get("url"),
        "llms": row.get("llms"),
        "robots": row.get("robots"),
        "siteSchema": row.get("site_schema"),
        "faqs": row.get("faqs"),
        "createdAt": row.get("created_at"),
    }


def _to_history_item(row: dict) -> dict:
    return {
        "id": str(row["id"]),
        "brand": row.get("brand"),
        "url": row.get("url"),
        "createdAt": row.get("created_at"),
    }


def normalize_url(raw_url: str | None) -> str:
    trimmed = (raw_url or "").strip()
    if not trimmed:
        return ""
    if trimmed.startswith("http://") or trimmed.startswith("https://"):
        return trimmed
    return f"https://{trimmed}"


def extract_competitors(scraped_data: Any) -> list[str]:
    """
    Collect competitor names from the scraped-data lists, first seen wins.
    """
    if isinstance(scraped_data, str):
        # asyncpg returns jsonb as text unless a codec is registered.
        try:
            scraped_data = json.loads(scraped_data)
        except ValueError:
            return []
    if not isinstance(scraped_data, dict):
        return []

    seen: dict[str, None] = {}
    for key in _COMPETITOR_KEYS:
        entries = scraped_data.get(key)
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if isinstance(entry, str):
                name = entry
            elif isinstance(entry, dict):
                name = entry.get("name") or entry.get("title")
            else:
                continue
            if isinstance(name, str) and name.strip():
                seen.setdefault(name.strip(), None)
    return list(seen)


async def get_file(file_id: str, *, session: Session) -> dict:
    raw_id = (file_id or "").strip()
    if not raw_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File ID is required")

    parsed = _parse_uuid(raw_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")

    try:
        row = await repository.get_file_for_user(parsed, user_id=session.user_id)
    except Exception as exc:
        logger.exception("file_fetch_failed file_id=%s user_id=%s", raw_id, session.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return {"file": _to_file_response(row)}


async def file_history(*, session: Session, brand: str | None = None) -> dict:
    brand_filter = (brand or "").strip() or None
    try:
        rows = await repository.list_files_for_user(user_id=session.user_id, brand=brand_filter)
    except Exception as exc:
        logger.exception("file_history_failed user_id=%s", session.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from exc
    return {"files": [_to_history_item(row) for row in rows]}


async def _notify_webhook(payload: dict[str, Any]) -> None:
    url = config.geo_webhook_url()
    if not url:
        logger.warning("geo_webhook_skipped reason=WEBHOOK_URL_unset file_id=%s", payload["id"])
        return None

    async with httpx.AsyncClient(timeout=config.webhook_timeout_s()) as client:
        resp = await client.post(url, json=payload)

    if resp.status_code < 200 or resp.status_code >= 300:
        raise WebhookError(f"Webhook responded with {resp.status_code}: {resp.text[:300]}")


async def _resolve_brand(
    request: schemas.TriggerGeoRequest,
    *,
    session: Session,
) -> tuple[str, str, list[str]]:
    if isinstance(request.brand_id, str) and request.brand_id:
        brand = await repository.get_brand_for_user(request.brand_id, user_id=session.user_id)
        if brand is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand not found")
        return (
            str(brand.get("name") or ""),
            normalize_url(brand.get("url")),
            extract_competitors(brand.get("scraped_data")),
        )

    if request.brand_name and request.url:
        return request.brand_name.strip(), normalize_url(request.url), []

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Either brandId OR (brandName and url) is required",
    )


async def trigger_geo_workflow(
    request: schemas.TriggerGeoRequest | None,
    *,
    session: Session,
) -> dict:
    request = request or schemas.TriggerGeoRequest()
    try:
        brand_name, brand_url, competitors = await _resolve_brand(request, session=session)
        if not brand_url:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Valid URL is required",
            )

        record = await repository.insert_file(
            user_id=session.user_id,
            user_email=session.email or "",
            brand=brand_name,
            url=brand_url,
        )
        payload = {
            "flow": 2,
            "id": str(record["id"]),
            "brandName": brand_name,
            "brandUrl": brand_url,
            "competitors": competitors,
        }
        await _notify_webhook(payload)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("geo_workflow_failed user_id=%s", session.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to trigger GEO workflow",
        ) from exc

    logger.info("geo_workflow_triggered file_id=%s brand=%s", payload["id"], brand_name)
    return {"success": True, "fileId": payload["id"], "payload": payload}
