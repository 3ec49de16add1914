"""
Brand-monitor request/response models.

Request models accept unknown fields; the web client posts whole company
objects from its own state.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PromptCategory = Literal["ranking", "comparison", "alternatives", "recommendations"]


class Company(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    url: str | None = None
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    scraped_data: dict[str, Any] | None = Field(default=None, alias="scrapedData")


class Persona(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: str = Field(..., min_length=1)
    description: str = ""
    pain_points: list[str] = Field(default_factory=list, alias="painPoints")
    goals: list[str] = Field(default_factory=list)


class PersonaInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str = ""
    description: str = ""


class GeneratedPrompt(BaseModel):
    prompt: str = Field(..., min_length=1)
    category: PromptCategory
    persona: str | None = None


class GeneratePersonasRequest(BaseModel):
    company: Company | None = None


class GeneratePromptsRequest(BaseModel):
    company: Company | None = None
    competitors: list[str | dict[str, Any]] | None = None
    personas: list[PersonaInput] | None = None
