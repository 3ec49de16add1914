"""
Environment-backed settings.

Every accessor reads the environment on call so tests can monkeypatch
variables without reloading modules.
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str) -> list[str]:
    raw = os.environ.get(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    return _env_list("CORS_ORIGINS") or [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


def db_pool_min_size() -> int:
    return _env_int("DB_POOL_MIN_SIZE", 1)


def db_pool_max_size() -> int:
    return _env_int("DB_POOL_MAX_SIZE", 5)


def session_secret() -> str:
    # Local default keeps development simple.
    # In production, set SESSION_SECRET to the auth provider's signing secret.
    return _env_str("SESSION_SECRET", "dev-change-this-secret")


def session_algorithm() -> str:
    return _env_str("SESSION_ALG", "HS256")


def session_cookie_name() -> str:
    return _env_str("SESSION_COOKIE_NAME", "session_token")


def session_expire_minutes() -> int:
    return _env_int("SESSION_EXPIRE_MIN", 60 * 24 * 7)


def openrouter_api_key() -> str:
    return _env_str("OPENROUTER_API_KEY")


def openrouter_base_url() -> str:
    return _env_str("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")


def persona_model() -> str:
    return _env_str("PERSONA_MODEL", "google/gemini-2.0-flash-001")


def llm_timeout_s() -> float:
    return _env_float("LLM_TIMEOUT_S", 60.0)


def llm_temperature() -> float:
    return _env_float("LLM_TEMPERATURE", 0.2)


def app_url() -> str:
    return _env_str("APP_URL", "https://cognerd.ai")


def geo_webhook_url() -> str:
    return _env_str("WEBHOOK_URL")


def webhook_timeout_s() -> float:
    return _env_float("WEBHOOK_TIMEOUT_S", 30.0)


def superuser_emails() -> set[str]:
    return set(_env_list("SUPERUSER_EMAILS"))


def blog_model() -> str:
    return _env_str("BLOG_MODEL", "google/gemini-2.0-flash-001")


def blog_max_tokens() -> int:
    return min(_env_int("MAX_TOKENS", 2000), 4000)


def blog_timeout_s() -> float:
    return _env_float("BLOG_TIMEOUT_S", 120.0)


def scrape_timeout_s() -> float:
    return _env_float("SCRAPE_TIMEOUT_S", 15.0)


def topic_model() -> str:
    return _env_str("TOPIC_MODEL", "google/gemini-2.5-flash")
