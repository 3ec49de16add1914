"""
Topic suggestion business logic.

New suggestions are merged into the stored list (first seen order, no
duplicates). Reads never fail: any error yields an empty list.
"""

from __future__ import annotations

import json
import logging
import re

from fastapi import HTTPException, status

from auth.schemas import Session
from core import config, db, llm

from . import repository, schemas

logger = logging.getLogger(__name__)

MAX_FALLBACK_TOPICS = 12

_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)
_BULLET_RE = re.compile(r"^[-*]\s*")

SYSTEM_PROMPT = (
    "You are an SEO strategist. Propose concise, high-CTR, search-intent aligned blog topics "
    "to improve SEO/AEO rankings."
)


def user_prompt(brand_name: str) -> str:
    return (
        f"Brand: {brand_name}\n"
        "Generate 8-12 SEO-rich, user-intent focused topics with variations (how-to, listicle, "
        "comparison, vs, best-of, mistakes, guides). Return ONLY a raw JSON array of strings. "
        "No markdown formatting, no code blocks, no introductory text."
    )


def _string_items(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def parse_topics(text: str) -> list[str]:
    """
    Read topics from a model reply: JSON array, embedded array, then bullet lines.
    """
    cleaned = (text or "").replace("```json", "").replace("```", "").strip()
    try:
        return _string_items(json.loads(cleaned or "[]"))
    except ValueError:
        pass

    match = _ARRAY_RE.search(text or "")
    if match:
        try:
            topics = _string_items(json.loads(match.group(0)))
        except ValueError:
            topics = []
        if topics:
            return topics

    lines = [_BULLET_RE.sub("", line).strip() for line in (text or "").splitlines()]
    return [line for line in lines if line][:MAX_FALLBACK_TOPICS]


def merge_topics(current: list[str], new: list[str]) -> list[str]:
    merged: dict[str, None] = {}
    for topic in [*current, *new]:
        value = topic.strip()
        if value:
            merged.setdefault(value, None)
    return list(merged)


def _session_email(session: Session | None) -> str | None:
    if session is None:
        return None
    return (session.email or "").strip() or None


async def list_topics(brand_name: str | None, *, session: Session | None) -> dict:
    brand = (brand_name or "").strip()
    if not db.is_configured() or not brand:
        return {"topics": []}
    try:
        topics = await repository.get_topics(email=_session_email(session), brand_name=brand)
    except Exception:
        logger.exception("topic_list_failed brand=%s", brand)
        return {"topics": []}
    return {"topics": topics or []}


async def suggest_topics(request: schemas.SuggestTopicsRequest | None, *, session: Session | None) -> dict:
    if not db.is_configured():
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="DB not configured",
        )
    brand = ((request.brand_name if request else None) or "").strip()
    if not brand:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing brand_name")

    email = _session_email(session)
    try:
        text = await llm.chat_text(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=user_prompt(brand),
            model=config.topic_model(),
            temperature=0.3,
            max_output_tokens=800,
        )
        topics = parse_topics(text)
        if not topics:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="No topics generated",
            )

        existing = await repository.get_topics(email=email, brand_name=brand)
        merged = merge_topics(existing or [], topics)
        await repository.upsert_topics(email=email, brand_name=brand, topics=merged)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("topic_suggestion_failed brand=%s", brand)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate topics",
        ) from exc

    logger.info("topics_suggested brand=%s count=%s", brand, len(merged))
    return {"topics": merged}


async def delete_topic(request: schemas.DeleteTopicRequest | None, *, session: Session | None) -> dict:
    if not db.is_configured():
        return {"ok": True}
    request = request or schemas.DeleteTopicRequest()
    brand = (request.brand_name or "").strip()
    topic = (request.topic or "").strip()
    if not brand or not topic:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing brand_name or topic",
        )

    email = _session_email(session)
    try:
        current = await repository.get_topics(email=email, brand_name=brand)
        if current is None:
            return {"ok": True}
        remaining = [t for t in current if t.strip() != topic]
        await repository.replace_topics(email=email, brand_name=brand, topics=remaining)
    except Exception as exc:
        logger.exception("topic_delete_failed brand=%s", brand)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete topic",
        ) from exc
    return {"ok": True}
