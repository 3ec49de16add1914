"""
Blog persistence helpers (raw SQL).
"""

from __future__ import annotations

from core import db

LIST_LIMIT = 100


async def list_blogs(*, email: str | None, limit: int = LIST_LIMIT) -> list[dict]:
    """
    Newest blogs first. `email=None` lists every owner's blogs.
    """
    return await db.fetch_all(
        """
        SELECT id,
               company_url AS "companyUrl",
               brand_name AS "brandName",
               topic,
               created_at AS "createdAt"
        FROM blogs
        WHERE ($1::text IS NULL OR email_id = $1)
        ORDER BY created_at DESC
        LIMIT $2
        """,
        email,
        limit,
    )


async def get_blog(blog_id: int, *, email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, company_url, brand_name, email_id, topic, blog, created_at
        FROM blogs
        WHERE id = $1
          AND email_id = $2
        """,
        blog_id,
        email,
    )


async def update_blog(
    blog_id: int,
    *,
    email: str,
    blog: str,
    company_url: str | None = None,
    brand_name: str | None = None,
    topic: str | None = None,
) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE blogs
        SET company_url = COALESCE($2, company_url),
            brand_name = COALESCE($3, brand_name),
            topic = COALESCE($4, topic),
            blog = $5
        WHERE id = $1
          AND email_id = $6
        RETURNING id, company_url, brand_name, topic, blog, created_at
        """,
        blog_id,
        company_url,
        brand_name,
        topic,
        blog,
        email,
    )


async def insert_blog(
    *,
    company_url: str,
    email: str | None,
    brand_name: str | None,
    topic: str,
    blog: str,
) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO blogs (company_url, email_id, brand_name, topic, blog)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, created_at
        """,
        company_url,
        email,
        brand_name,
        topic,
        blog,
    )
    if row is None:
        raise RuntimeError("Failed to insert blog.")
    return row
