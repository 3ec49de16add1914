import json

import httpx
import pytest

from core import llm

_RealAsyncClient = httpx.AsyncClient


def _install_transport(monkeypatch, handler):
    def factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return _RealAsyncClient(*args, **kwargs)

    monkeypatch.setattr(llm.httpx, "AsyncClient", factory)


@pytest.fixture(autouse=True)
def _llm_env(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    monkeypatch.setenv("OPENROUTER_BASE_URL", "https://llm.test/api/v1")
    monkeypatch.setenv("PERSONA_MODEL", "test-model")


@pytest.mark.asyncio
async def test_chat_json_parses_message_content(monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        content = '```json\n{"personas": []}\n```'
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    _install_transport(monkeypatch, handler)

    data = await llm.chat_json(user_prompt="hello")

    assert data == {"personas": []}
    assert seen["url"] == "https://llm.test/api/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"]["model"] == "test-model"
    assert seen["body"]["response_format"] == {"type": "json_object"}
    assert seen["body"]["messages"][1] == {"role": "user", "content": "hello"}


@pytest.mark.asyncio
async def test_chat_json_non_200_raises(monkeypatch):
    _install_transport(monkeypatch, lambda request: httpx.Response(429, text="rate limited"))

    with pytest.raises(llm.LLMError, match="429"):
        await llm.chat_json(user_prompt="hello")


@pytest.mark.asyncio
async def test_chat_json_empty_content_raises(monkeypatch):
    _install_transport(monkeypatch, lambda request: httpx.Response(200, json={"choices": []}))

    with pytest.raises(llm.LLMError, match="empty"):
        await llm.chat_json(user_prompt="hello")


@pytest.mark.asyncio
async def test_chat_json_requires_api_key(monkeypatch):
    monkeypatch.delenv("OPENROUTER_API_KEY")

    with pytest.raises(llm.LLMError, match="OPENROUTER_API_KEY"):
        await llm.chat_json(user_prompt="hello")


@pytest.mark.parametrize("text", ["not json", "[1, 2]", ""])
def test_parse_json_object_rejects_non_objects(text):
    with pytest.raises(llm.LLMError):
        llm.parse_json_object(text)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>gateway</html>"),
        httpx.Response(200, json=[{"choices": []}]),
    ],
)
async def test_chat_json_unexpected_body_raises(monkeypatch, response):
    _install_transport(monkeypatch, lambda request: response)

    with pytest.raises(llm.LLMError):
        await llm.chat_json(user_prompt="hello")


@pytest.mark.asyncio
async def test_chat_text_returns_plain_content(monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "  # Title\n\nBody  "}}]})

    _install_transport(monkeypatch, handler)

    text = await llm.chat_text(
        system_prompt="sys",
        user_prompt="write",
        model="blog-model",
        temperature=0.0,
        max_output_tokens=1500,
    )

    assert text == "# Title\n\nBody"
    assert seen["body"]["model"] == "blog-model"
    assert seen["body"]["max_tokens"] == 1500
    assert seen["body"]["temperature"] == 0.0
    assert "response_format" not in seen["body"]
