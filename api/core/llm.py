"""
OpenRouter HTTP client helpers.

Used endpoint:
- POST /chat/completions -> {"choices": [{"message": {"content": "..."}}]}

`chat_json` asks for `response_format: json_object` and returns a parsed dict;
`chat_text` returns the raw assistant message (e.g. Markdown).
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from . import config

_JSON_SYSTEM_PROMPT = (
    "You are a strict JSON generator. Always output only valid JSON with no extra commentary."
)


# LLM failures are explicit and separable from other runtime errors.
class LLMError(RuntimeError):
    pass


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise LLMError("OPENROUTER_BASE_URL is empty.")
    return base_url.rstrip("/")


def strip_code_fence(text: str) -> str:
    raw = (text or "").strip()
    if not raw.startswith("```"):
        return raw
    lines = raw.splitlines()[1:]
    if lines and lines[-1].strip().startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def parse_json_object(text: str) -> dict[str, Any]:
    """
    Parse a model reply into a JSON object, tolerating a markdown code fence.
    """
    try:
        data = json.loads(strip_code_fence(text))
    except ValueError as exc:
        raise LLMError("LLM returned invalid JSON.") from exc
    if not isinstance(data, dict):
        raise LLMError("LLM returned JSON that is not an object.")
    return data


def _message_content(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError as exc:
        raise LLMError(f"LLM returned a non-JSON body: {resp.text[:200]}") from exc
    if not isinstance(data, dict):
        raise LLMError("LLM returned an unexpected response shape.")

    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message")
        if isinstance(message, dict) and isinstance(message.get("content"), str):
            content = message["content"].strip()
            if content:
                return content
    raise LLMError("LLM returned an empty response.")


async def chat_messages(
    *,
    messages: list[dict[str, str]],
    model: str | None = None,
    timeout_s: float | None = None,
    temperature: float | None = None,
    max_output_tokens: int | None = None,
    json_mode: bool = False,
) -> str:
    """
    Generate one assistant message from a message list.
    """
    api_key = config.openrouter_api_key()
    if not api_key:
        raise LLMError("Missing OPENROUTER_API_KEY.")

    base_url = _normalize_base_url(config.openrouter_base_url())
    model = (model or config.persona_model()).strip()
    if not model:
        raise LLMError("LLM model name is empty.")
    if not messages:
        raise LLMError("Messages list is empty.")

    payload: dict[str, Any] = {
        "model": model,
        "messages": messages,
        "temperature": float(temperature if temperature is not None else config.llm_temperature()),
    }
    if max_output_tokens is not None:
        payload["max_tokens"] = int(max_output_tokens)
    if json_mode:
        payload["response_format"] = {"type": "json_object"}
    headers = {
        "Authorization": f"Bearer {api_key}",
        "HTTP-Referer": config.app_url(),
        "X-Title": "CogNerd",
    }

    try:
        async with httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_s if timeout_s is not None else config.llm_timeout_s(),
        ) as client:
            resp = await client.post("/chat/completions", json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise LLMError(f"LLM request failed: {exc}") from exc

    if resp.status_code != 200:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:500]
        raise LLMError(f"LLM request failed: {resp.status_code} {body}")

    return _message_content(resp)


async def chat_text(
    *,
    system_prompt: str,
    user_prompt: str,
    model: str | None = None,
    timeout_s: float | None = None,
    temperature: float | None = None,
    max_output_tokens: int | None = None,
) -> str:
    return await chat_messages(
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        model=model,
        timeout_s=timeout_s,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
    )


async def chat_json(
    *,
    user_prompt: str,
    model: str | None = None,
    system_prompt: str = _JSON_SYSTEM_PROMPT,
    timeout_s: float | None = None,
    temperature: float | None = None,
) -> dict[str, Any]:
    """
    Ask the model for a single JSON object and return it parsed.
    """
    content = await chat_messages(
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        model=model,
        timeout_s=timeout_s,
        temperature=temperature,
        json_mode=True,
    )
    return parse_json_object(content)
