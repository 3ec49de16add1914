"""
Blog business logic.

Blogs are owned by an email address. Emails listed in SUPERUSER_EMAILS
(exact match) can list every blog; view and update stay owner-scoped for
everyone. Creation scrapes the company page and has the LLM write the post.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from auth.schemas import Session
from core import config, db, llm
from core.errors import ExternalServiceError

from . import prompts, repository, schemas, scraper

logger = logging.getLogger(__name__)


def _session_email(session: Session | None) -> str | None:
    if session is None:
        return None
    return (session.email or "").strip() or None


def is_superuser(email: str) -> bool:
    return email in config.superuser_emails()


def _parse_blog_id(raw: int | str | None) -> int | None:
    if isinstance(raw, int):
        return raw
    text = str(raw or "").strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _blank_to_none(value: str | None) -> str | None:
    return value if value and value.strip() else None


def _db_not_configured() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="DB not configured",
    )


async def list_blogs(*, session: Session | None) -> dict:
    if not db.is_configured():
        return {"items": []}
    email = _session_email(session)
    if email is None:
        return {"items": []}

    owner = None if is_superuser(email) else email
    try:
        rows = await repository.list_blogs(email=owner)
    except Exception as exc:
        logger.exception("blog_list_failed email=%s", email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list blogs",
        ) from exc
    return {"items": rows}


async def view_blog(blog_id: str | None, *, session: Session | None) -> dict:
    if not (blog_id or "").strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing id")
    if not db.is_configured():
        raise _db_not_configured()
    email = _session_email(session)
    if email is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    parsed = _parse_blog_id(blog_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    try:
        row = await repository.get_blog(parsed, email=email)
    except Exception as exc:
        logger.exception("blog_view_failed blog_id=%s", parsed)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load blog",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return row


async def update_blog(request: schemas.UpdateBlogRequest | None, *, session: Session | None) -> dict:
    if not db.is_configured():
        raise _db_not_configured()
    email = _session_email(session)
    if email is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    request = request or schemas.UpdateBlogRequest()
    if not str(request.id or "").strip() or not request.blog:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: id and blog",
        )

    parsed = _parse_blog_id(request.id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    try:
        row = await repository.update_blog(
            parsed,
            email=email,
            blog=request.blog,
            company_url=_blank_to_none(request.company_url),
            brand_name=_blank_to_none(request.brand_name),
            topic=_blank_to_none(request.topic),
        )
    except Exception as exc:
        logger.exception("blog_update_failed blog_id=%s", parsed)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update blog",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    logger.info("blog_updated blog_id=%s", parsed)
    return {"item": row}


async def _write_blog(*, topic: str, brand: str, email: str | None, scraped_content: str) -> str:
    return await llm.chat_text(
        system_prompt=prompts.blog_system_prompt(),
        user_prompt=prompts.blog_user_prompt(
            topic=topic,
            brand=brand,
            email=email,
            scraped_content=scraped_content,
        ),
        model=config.blog_model(),
        timeout_s=config.blog_timeout_s(),
        temperature=0.0,
        max_output_tokens=config.blog_max_tokens(),
    )


async def create_blog(request: schemas.CreateBlogRequest | None, *, session: Session | None) -> dict:
    if not db.is_configured():
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server misconfiguration: missing DATABASE_URL",
        )

    request = request or schemas.CreateBlogRequest()
    company_url = (request.company_url or "").strip()
    topic = (request.topic or "").strip()
    if not company_url or not topic:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: company_url and topic",
        )

    try:
        html = await scraper.fetch_html(company_url)
    except scraper.ScrapeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to fetch company_url: {exc}",
        ) from exc

    page = scraper.extract_from_html(html, company_url)
    provided_brand = _blank_to_none(request.brand_name)
    brand = provided_brand or page.brand_name
    # Session email wins over anything the caller or the page supplies.
    email = _session_email(session) or _blank_to_none(request.email_id) or page.email

    logger.info("blog_generation_started brand=%s topic=%s", brand, topic)
    try:
        blog = await _write_blog(topic=topic, brand=brand, email=email, scraped_content=page.content)
    except llm.LLMError as exc:
        logger.exception("blog_generation_failed brand=%s", brand)
        raise ExternalServiceError("AI generation failed", {"reason": str(exc)}) from exc

    try:
        row = await repository.insert_blog(
            company_url=company_url,
            email=email,
            brand_name=brand,
            topic=topic,
            blog=blog,
        )
    except Exception as exc:
        logger.exception("blog_insert_failed brand=%s", brand)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc

    logger.info("blog_created blog_id=%s", row["id"])
    return {"id": row["id"], "created_at": row["created_at"], "blog": blog, "topic": topic}
