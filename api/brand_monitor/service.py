"""
Brand-monitor business logic.

Both generators forward a validated company to the LLM and keep only the
entries of the reply that parse into the expected shape.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from auth.schemas import Session
from core import llm
from core.errors import AuthenticationError, ExternalServiceError, ValidationError

from . import prompts, schemas

logger = logging.getLogger(__name__)

LOGIN_REQUIRED = "Please log in to use this feature"


def ensure_session(session: Session | None) -> Session:
    if session is None:
        raise AuthenticationError(LOGIN_REQUIRED)
    return session


def validate_company(company: schemas.Company | None) -> schemas.Company:
    if company is None or not (company.name or "").strip():
        raise ValidationError(
            "Invalid request",
            {"company": "Company object with name is required"},
        )
    return company


def competitor_names(competitors: list[Any] | None) -> list[str]:
    """
    Accept plain names or `{name: ...}` objects; drop blanks.
    """
    names: list[str] = []
    for item in competitors or []:
        if isinstance(item, str):
            name = item
        elif isinstance(item, dict):
            name = item.get("name")
        else:
            continue
        if isinstance(name, str) and name.strip():
            names.append(name.strip())
    return names


def _clean_strings(values: Any) -> list[str]:
    if not isinstance(values, list):
        return []
    return [str(v).strip() for v in values if isinstance(v, (str, int, float)) and str(v).strip()]


def parse_personas(data: dict[str, Any]) -> list[schemas.Persona]:
    items = data.get("personas")
    if not isinstance(items, list):
        return []

    personas: list[schemas.Persona] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        role = str(item.get("role") or "").strip()
        if not role:
            continue
        personas.append(
            schemas.Persona(
                role=role,
                description=str(item.get("description") or "").strip(),
                pain_points=_clean_strings(item.get("painPoints")),
                goals=_clean_strings(item.get("goals")),
            )
        )
    return personas


def parse_prompts(data: dict[str, Any]) -> list[schemas.GeneratedPrompt]:
    items = data.get("prompts")
    if not isinstance(items, list):
        return []

    parsed: list[schemas.GeneratedPrompt] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        candidate = {
            "prompt": str(item.get("prompt") or "").strip(),
            "category": str(item.get("category") or "").strip().lower(),
            "persona": str(item.get("persona") or "").strip() or None,
        }
        try:
            parsed.append(schemas.GeneratedPrompt.model_validate(candidate))
        except PydanticValidationError:
            continue
    return parsed


async def generate_personas_for_brand(company: schemas.Company) -> list[schemas.Persona]:
    try:
        data = await llm.chat_json(user_prompt=prompts.persona_prompt(company))
    except llm.LLMError as exc:
        logger.exception("persona_generation_failed brand=%s", company.name)
        raise ExternalServiceError("Failed to generate personas") from exc

    personas = parse_personas(data)
    if not personas:
        logger.warning("persona_generation_empty brand=%s", company.name)
        raise ExternalServiceError("Failed to generate personas")

    logger.info("personas_generated brand=%s count=%s", company.name, len(personas))
    return personas


async def generate_prompts_for_company(
    company: schemas.Company,
    competitors: list[str],
    personas: list[schemas.PersonaInput] | None = None,
) -> list[schemas.GeneratedPrompt]:
    try:
        data = await llm.chat_json(user_prompt=prompts.search_prompt(company, competitors, personas))
    except llm.LLMError as exc:
        logger.exception("prompt_generation_failed brand=%s", company.name)
        raise ExternalServiceError("Failed to generate prompts") from exc

    generated = parse_prompts(data)
    if not generated:
        logger.warning("prompt_generation_empty brand=%s", company.name)
        raise ExternalServiceError("Failed to generate prompts")

    logger.info("prompts_generated brand=%s count=%s", company.name, len(generated))
    return generated


async def generate_personas(
    request: schemas.GeneratePersonasRequest | None,
    *,
    session: Session | None,
) -> dict:
    ensure_session(session)
    company = validate_company(request.company if request else None)
    personas = await generate_personas_for_brand(company)
    return {"personas": [p.model_dump(by_alias=True) for p in personas]}


async def generate_prompts(
    request: schemas.GeneratePromptsRequest | None,
    *,
    session: Session | None,
) -> dict:
    ensure_session(session)
    request = request or schemas.GeneratePromptsRequest()
    company = validate_company(request.company)
    names = competitor_names(request.competitors)
    generated = await generate_prompts_for_company(company, names, request.personas)
    return {"prompts": [p.model_dump(exclude_none=True) for p in generated]}
