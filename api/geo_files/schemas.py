"""
GEO file request models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TriggerGeoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Non-string ids are ignored, not rejected.
    brand_id: Any = Field(default=None, alias="brandId")
    brand_name: str | None = Field(default=None, alias="brandName")
    url: str | None = None
