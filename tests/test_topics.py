from unittest.mock import AsyncMock

import pytest

from core import llm
from topics import repository, service


@pytest.fixture
def store(monkeypatch):
    mocks = {
        "get": AsyncMock(return_value=None),
        "upsert": AsyncMock(),
        "replace": AsyncMock(),
    }
    monkeypatch.setattr(repository, "get_topics", mocks["get"])
    monkeypatch.setattr(repository, "upsert_topics", mocks["upsert"])
    monkeypatch.setattr(repository, "replace_topics", mocks["replace"])
    return mocks


@pytest.mark.parametrize(
    "text, expected",
    [
        ('["How to rank", " ", 3, "Best tools"]', ["How to rank", "Best tools"]),
        ('```json\n["A", "B"]\n```', ["A", "B"]),
        ('Sure! Here you go: ["A", "B"] enjoy', ["A", "B"]),
        ("- First idea\n* Second idea\n\nThird idea", ["First idea", "Second idea", "Third idea"]),
        ('{"topics": ["A"]}', []),
    ],
)
def test_parse_topics(text, expected):
    assert service.parse_topics(text) == expected


def test_merge_topics_keeps_order_and_dedupes():
    assert service.merge_topics(["A", "B "], ["B", "C", " "]) == ["A", "B", "C"]


def test_list_without_database_is_empty(client, store):
    resp = client.get("/api/topic-suggestion", params={"brand_name": "Acme"})

    assert resp.json() == {"topics": []}
    store["get"].assert_not_called()


def test_list_returns_stored_topics(client, db_configured, store, auth_headers):
    store["get"].return_value = ["A", "B"]

    resp = client.get("/api/topic-suggestion", params={"brand_name": " Acme "}, headers=auth_headers)

    assert resp.json() == {"topics": ["A", "B"]}
    store["get"].assert_awaited_once_with(email="owner@example.com", brand_name="Acme")


def test_list_db_error_is_empty(client, db_configured, store):
    store["get"].side_effect = RuntimeError("db down")

    resp = client.get("/api/topic-suggestion", params={"brand_name": "Acme"})

    assert resp.status_code == 200
    assert resp.json() == {"topics": []}


def test_suggest_requires_brand(client, db_configured, store):
    resp = client.post("/api/topic-suggestion", json={"brand_name": "  "})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing brand_name"}


def test_suggest_merges_with_existing(client, db_configured, store, auth_headers, monkeypatch):
    chat = AsyncMock(return_value='["B", "C"]')
    monkeypatch.setattr(llm, "chat_text", chat)
    store["get"].return_value = ["A", "B"]

    resp = client.post("/api/topic-suggestion", json={"brand_name": "Acme"}, headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json() == {"topics": ["A", "B", "C"]}
    store["upsert"].assert_awaited_once_with(email="owner@example.com", brand_name="Acme", topics=["A", "B", "C"])
    assert "Brand: Acme" in chat.await_args.kwargs["user_prompt"]


def test_suggest_empty_reply_is_500(client, db_configured, store, monkeypatch):
    monkeypatch.setattr(llm, "chat_text", AsyncMock(return_value="[]"))

    resp = client.post("/api/topic-suggestion", json={"brand_name": "Acme"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "No topics generated"}
    store["upsert"].assert_not_called()


def test_suggest_llm_failure_is_500(client, db_configured, store, monkeypatch):
    monkeypatch.setattr(llm, "chat_text", AsyncMock(side_effect=llm.LLMError("down")))

    resp = client.post("/api/topic-suggestion", json={"brand_name": "Acme"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate topics"}


def test_delete_removes_topic(client, db_configured, store, auth_headers):
    store["get"].return_value = ["A", "B", "C"]

    resp = client.request(
        "DELETE",
        "/api/topic-suggestion",
        json={"brand_name": "Acme", "topic": " B "},
        headers=auth_headers,
    )

    assert resp.json() == {"ok": True}
    store["replace"].assert_awaited_once_with(email="owner@example.com", brand_name="Acme", topics=["A", "C"])


def test_delete_requires_brand_and_topic(client, db_configured, store):
    resp = client.request("DELETE", "/api/topic-suggestion", json={"brand_name": "Acme"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing brand_name or topic"}


def test_delete_missing_row_is_ok(client, db_configured, store):
    resp = client.request("DELETE", "/api/topic-suggestion", json={"brand_name": "Acme", "topic": "A"})

    assert resp.json() == {"ok": True}
    store["replace"].assert_not_called()
