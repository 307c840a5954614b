"""
Environment-driven settings.

Read once at startup by `main.py`; everything downstream gets plain values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_REPORT_CRON = "30 8 * * *"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def cors_origins() -> tuple[str, ...]:
    return _env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)


def log_level() -> int:
    name = _env_str("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class Settings:
    database_url: str
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout_s: int = 30
    report_enabled: bool = True
    report_cron: str = DEFAULT_REPORT_CRON
    report_timezone: str = "UTC"


def load_settings() -> Settings:
    min_size = max(1, _env_int("DB_POOL_MIN_SIZE", 1))
    return Settings(
        database_url=database_url(),
        db_pool_min_size=min_size,
        db_pool_max_size=max(min_size, _env_int("DB_POOL_MAX_SIZE", 5)),
        db_command_timeout_s=_env_int("DB_COMMAND_TIMEOUT_S", 30),
        report_enabled=_env_bool("REPORT_ENABLED", True),
        report_cron=_env_str("REPORT_CRON", DEFAULT_REPORT_CRON),
        report_timezone=_env_str("REPORT_TIMEZONE", "UTC"),
    )
