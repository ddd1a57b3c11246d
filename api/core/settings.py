"""
Environment-backed settings and logging setup.

Values are read on every call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

DEFAULT_NAVIGATION_FILE = Path(__file__).with_name("default_navigation.json")

_DEFAULT_CORS_ORIGINS = (
    "http://localhost:4321",
    "http://127.0.0.1:4321",
)


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def db_pool_min_size() -> int:
    return max(1, env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> float:
    return env_float("DB_COMMAND_TIMEOUT", 30.0)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_allow_origins() -> list[str]:
    raw = env_str("CORS_ALLOW_ORIGINS")
    if not raw:
        return list(_DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def load_navigation_fallback() -> list[dict[str, Any]]:
    """
    Navigation tree served when the navigation table cannot be read.

    NAVIGATION_FALLBACK_FILE may point at a JSON array of nav items; the
    packaged default is used otherwise.
    """
    path = Path(env_str("NAVIGATION_FALLBACK_FILE") or DEFAULT_NAVIGATION_FILE)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise RuntimeError(f"Navigation fallback in {path} must be a JSON array.")
    return data
