"""
Runtime settings read from environment variables.

Every setting is a small function so values are looked up when needed
(tests can monkeypatch the environment without reloading modules).
Blank values fall back to defaults; unparsable integers do too.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only `sslmode` values such as "require" in some setups.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    """
    Return the PostgreSQL DSN.

    `DATABASE_URL` wins when set. Otherwise the DSN is assembled from
    `DB_USER`, `DB_PASSWORD`, `DB_HOST`, `DB_PORT` and `DB_NAME`.
    """
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return _sanitize_database_url(url)

    user = os.environ.get("DB_USER", "").strip()
    if not user:
        raise RuntimeError("DATABASE_URL is not set and DB_USER is missing.")

    password = os.environ.get("DB_PASSWORD", "")
    host = _env_str("DB_HOST", "localhost")
    port = _env_int("DB_PORT", 5432)
    name = _env_str("DB_NAME", "bookstore")

    credentials = quote(user, safe="")
    if password:
        credentials = f"{credentials}:{quote(password, safe='')}"
    return f"postgresql://{credentials}@{host}:{port}/{name}"


def db_pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def db_pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), db_pool_min_size(), 1)


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def app_host() -> str:
    return _env_str("APP_HOST", "127.0.0.1")


def app_port() -> int:
    return _env_int("APP_PORT", 8000)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def log_format() -> str:
    fmt = _env_str("LOG_FORMAT", "text").lower()
    return fmt if fmt in {"text", "json"} else "text"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
