"""
Session schema.
"""

from __future__ import annotations

from pydantic import BaseModel


class Session(BaseModel):
    user_id: str
    email: str | None = None
