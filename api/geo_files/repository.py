"""
GEO file persistence helpers (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db

_FILE_COLUMNS = """
    id, user_id, user_email, brand, url, llms, robots, site_schema, faqs, created_at
"""


async def get_file_for_user(file_id: UUID, *, user_id: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_FILE_COLUMNS}
        FROM files
        WHERE id = $1
          AND user_id = $2
        LIMIT 1
        """,
        file_id,
        user_id,
    )


async def list_files_for_user(*, user_id: str, brand: str | None = None) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, brand, url, created_at
        FROM files
        WHERE user_id = $1
          AND ($2::text IS NULL OR brand = $2)
        ORDER BY created_at DESC
        """,
        user_id,
        brand,
    )


async def get_brand_for_user(brand_id: str, *, user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, url, scraped_data
        FROM brandprofile
        WHERE id::text = $1
          AND user_id = $2
        LIMIT 1
        """,
        brand_id,
        user_id,
    )


async def insert_file(*, user_id: str, user_email: str, brand: str, url: str) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO files (user_id, user_email, brand, url)
        VALUES ($1, $2, $3, $4)
        RETURNING {_FILE_COLUMNS}
        """,
        user_id,
        user_email,
        brand,
        url,
    )
    if row is None:
        raise RuntimeError("Failed to create files record.")
    return row
