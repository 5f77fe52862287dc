"""
Environment-driven settings.

Everything here is read lazily so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


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


def _sanitize_database_url(url: str) -> str:
    # asyncpg does not understand libpq's sslmode query parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class DatabaseSettings:
    user: str = ""
    password: str = ""
    connect_string: str = ""
    url: str = ""
    min_size: int = 1
    max_size: int = 5
    acquire_timeout_s: float = 10.0
    command_timeout_s: float = 30.0

    def dsn(self) -> str:
        """
        Build the asyncpg DSN.

        `DATABASE_URL` wins when present; otherwise user, password and
        connect string (`host[:port]/dbname`) are combined.
        Returns "" when the configuration is incomplete.
        """
        if self.url:
            return _sanitize_database_url(self.url)
        if not (self.user and self.connect_string):
            return ""
        credentials = quote(self.user, safe="")
        if self.password:
            credentials += ":" + quote(self.password, safe="")
        target = self.connect_string.removeprefix("//")
        return f"postgresql://{credentials}@{target}"


def database_settings() -> DatabaseSettings:
    min_size = max(0, _env_int("DB_POOL_MIN", 1))
    return DatabaseSettings(
        user=_env_str("DB_USER"),
        password=os.environ.get("DB_PASSWORD", ""),
        connect_string=_env_str("DB_CONNECT_STRING"),
        url=_env_str("DATABASE_URL"),
        min_size=min_size,
        max_size=max(min_size, 1, _env_int("DB_POOL_MAX", 5)),
        acquire_timeout_s=_env_float("DB_ACQUIRE_TIMEOUT_S", 10.0),
        command_timeout_s=_env_float("DB_COMMAND_TIMEOUT_S", 30.0),
    )


def listen_port() -> int:
    return _env_int("PORT", 3000)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
