from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    db_path: str
    persistence_enabled: bool
    pdf_enabled: bool
    payu_key: str | None
    payu_salt: str | None
    payu_base_url: str
    public_base_url: str
    payu_success_url: str
    payu_failure_url: str
    contact_email: str


_PUBLIC_BASE_URL = (_get_env("PUBLIC_BASE_URL", "http://localhost:8000") or "http://localhost:8000").rstrip("/")

settings = Settings(
    api_key=_get_env("API_KEY"),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://localhost:3000",
            "https://famechase.com",
            "https://www.famechase.com",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX", r"^https:\/\/[a-z0-9-]+--.*\.netlify\.app$"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    db_path=_get_env("DB_PATH", "data/creator_growth.db") or "data/creator_growth.db",
    persistence_enabled=_get_env_bool("PERSISTENCE_ENABLED", True),
    pdf_enabled=_get_env_bool("PDF_ENABLED", True),
    payu_key=_get_env("PAYU_KEY"),
    payu_salt=_get_env("PAYU_SALT"),
    payu_base_url=_get_env("PAYU_BASE_URL", "https://test.payu.in") or "https://test.payu.in",
    public_base_url=_PUBLIC_BASE_URL,
    payu_success_url=_get_env("PAYU_SUCCESS_URL") or f"{_PUBLIC_BASE_URL}/v1/payments/success",
    payu_failure_url=_get_env("PAYU_FAILURE_URL") or f"{_PUBLIC_BASE_URL}/v1/payments/failure",
    contact_email=_get_env("CONTACT_EMAIL", "mail@famechase.com") or "mail@famechase.com",
)
