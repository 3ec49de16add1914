"""
Topic suggestion request models.
"""

from __future__ import annotations

from pydantic import BaseModel


class SuggestTopicsRequest(BaseModel):
    brand_name: str | None = None


class DeleteTopicRequest(BaseModel):
    brand_name: str | None = None
    topic: str | None = None
