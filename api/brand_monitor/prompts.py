"""
Prompt builders for persona and search-prompt generation.
"""

from __future__ import annotations

from typing import Any

from .schemas import Company, PersonaInput


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v).strip() for v in value if str(v).strip())
    return str(value).strip()


def company_fields(company: Company) -> dict[str, str]:
    """
    Flatten a company into the fields the prompts reference.

    Scraped data fills in whatever the company object leaves blank.
    """
    scraped = company.scraped_data or {}
    return {
        "brand_name": _as_text(company.name),
        "location": _as_text(company.location),
        "industry": _as_text(company.industry) or _as_text(scraped.get("industry")),
        "main_products": _as_text(scraped.get("mainProducts")),
        "keywords": _as_text(scraped.get("keywords")),
        "description": _as_text(company.description) or _as_text(scraped.get("description")),
    }


def _company_info(fields: dict[str, str]) -> str:
    lines = ["Company Info:", f"Name: {fields['brand_name']}"]
    if fields["location"]:
        lines.append(f"Location: {fields['location']}")
    lines.extend(
        [
            f"Industry: {fields['industry']}",
            f"Main Products: {fields['main_products']}",
            f"Keywords: {fields['keywords']}",
            f"Description: {fields['description']}",
        ]
    )
    return "\n".join(lines)


def persona_prompt(company: Company) -> str:
    fields = company_fields(company)
    return (
        "You are a marketing strategist expert in defining target audiences and user personas.\n\n"
        "Given a company's data, create 3 distinct user personas that represent different segments "
        "of their target audience.\n"
        "These personas should range from specific niche users to broader potential customers.\n\n"
        "Rules:\n"
        "- Create 3 distinct personas.\n"
        "- Each persona must have a clear \"Role\" (e.g., \"The Budget Conscious Student\", "
        "\"The Enterprise CTO\", \"The Weekend Warrior\").\n"
        "- Provide a brief \"Description\" for each, highlighting their motivations and needs "
        "relative to the brand's industry.\n"
        "- Identify 3 \"Pain Points\" and 3 \"Goals\" for each persona.\n\n"
        "Output Format:\n"
        "Return a single JSON object with a \"personas\" key containing an array of objects.\n"
        "Each object must have the following structure:\n"
        "{\n"
        "  \"role\": \"Role Name\",\n"
        "  \"description\": \"Brief description...\",\n"
        "  \"painPoints\": [\"pain point 1\", \"pain point 2\", \"pain point 3\"],\n"
        "  \"goals\": [\"goal 1\", \"goal 2\", \"goal 3\"]\n"
        "}\n\n"
        f"{_company_info(fields)}\n"
    )


def search_prompt(
    company: Company,
    competitors: list[str],
    personas: list[PersonaInput] | None = None,
) -> str:
    """
    Ask for customer-style search queries in four intent categories.
    """
    fields = company_fields(company)
    brand = fields["brand_name"]
    parts: list[str] = [
        "You are an expert at simulating customer search behavior and creating AEO "
        "(AI Engine Optimization) prompts.\n\n"
        "Your goal is to generate natural, high-intent search queries that potential customers "
        f"would use when looking for solutions like what {brand} offers.\n"
    ]
    if personas:
        parts.append(
            "ACT AS THE TARGET PERSONAS. For each query, adopt the specific mindset, tone, "
            "pain points, and urgent needs of the provided personas.\n"
        )
    parts.append(
        "Generate 4 prompts for each of these categories:\n"
        "1. Ranking: High-intent discovery queries.\n"
        "2. Comparison: Specific decision-making queries.\n"
        "3. Alternatives: Switch-intent queries.\n"
        "4. Recommendations: Problem-solving natural language queries.\n\n"
        "RULES:\n"
        "1. Sound like a real customer: natural, conversational language, not keyword lists.\n"
        "2. Focus on urgent pain points the customer needs solved now.\n"
        "3. Be specific: add industry, company size, use case or location context.\n"
        f"4. For ranking and recommendations, DO NOT mention {brand}. "
        f"For comparison and alternatives you may mention {brand} or its competitors.\n"
        f"5. Location: if a location is provided ({fields['location'] or 'none'}), make some "
        "queries location-specific.\n\n"
        "Output Format:\n"
        "Return a single JSON object with a \"prompts\" key containing an array of objects, each:\n"
        "{\"prompt\": \"the search query\", "
        "\"category\": \"ranking\" | \"comparison\" | \"alternatives\" | \"recommendations\""
        + (", \"persona\": \"name of the persona this prompt belongs to\"" if personas else "")
        + "}\n\n"
    )
    parts.append(_company_info(fields))
    parts.append(f"\nCompetitors: {', '.join(competitors)}\n")
    if personas:
        lines = ["\nTarget Personas:"]
        for persona in personas:
            lines.append(f"- Role: {persona.role}\n  Description: {persona.description}")
        parts.append("\n".join(lines) + "\n")
    return "".join(parts)
