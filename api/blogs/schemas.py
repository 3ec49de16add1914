"""
Blog request models.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateBlogRequest(BaseModel):
    company_url: str | None = None
    topic: str | None = None
    brand_name: str | None = None
    email_id: str | None = None


class UpdateBlogRequest(BaseModel):
    id: int | str | None = None
    blog: str | None = None
    company_url: str | None = None
    brand_name: str | None = None
    topic: str | None = None
