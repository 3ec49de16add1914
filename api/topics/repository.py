"""
Topic suggestion persistence helpers (raw SQL).

`topics` is a jsonb array of strings. Rows are keyed by (email_id, brand_name);
email_id may be NULL for anonymous callers.
"""

from __future__ import annotations

import json

from core import db


def _json_dumps(value: object) -> str:
    return json.dumps(value, ensure_ascii=True)


def _decode_topics(value: object) -> list[str]:
    # asyncpg returns jsonb as text unless a codec is registered.
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return []
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


async def get_topics(*, email: str | None, brand_name: str) -> list[str] | None:
    row = await db.fetch_one(
        """
        SELECT topics
        FROM topic_suggestions
        WHERE email_id IS NOT DISTINCT FROM $1
          AND brand_name = $2
        ORDER BY updated_at DESC
        LIMIT 1
        """,
        email,
        brand_name,
    )
    if row is None:
        return None
    return _decode_topics(row.get("topics"))


async def upsert_topics(*, email: str | None, brand_name: str, topics: list[str]) -> None:
    await db.execute(
        """
        INSERT INTO topic_suggestions (email_id, brand_name, topics, updated_at)
        VALUES ($1, $2, $3::jsonb, now())
        ON CONFLICT (email_id, brand_name) DO UPDATE
        SET topics = EXCLUDED.topics,
            updated_at = now()
        """,
        email,
        brand_name,
        _json_dumps(topics),
    )


async def replace_topics(*, email: str | None, brand_name: str, topics: list[str]) -> None:
    await db.execute(
        """
        UPDATE topic_suggestions
        SET topics = $3::jsonb,
            updated_at = now()
        WHERE email_id IS NOT DISTINCT FROM $1
          AND brand_name = $2
        """,
        email,
        brand_name,
        _json_dumps(topics),
    )
