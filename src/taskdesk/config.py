# src/taskdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Components get their paths from Settings, never from module-level constants.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKDESK"

DEFAULT_PORT = 3000


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load .env locally; real environment variables win."""
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- HTTP server ----
    host: str
    port: int
    debug: bool

    # ---- Storage ----
    tasks_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdesk")
        log_level = _env(_k("LOG_LEVEL"), "INFO").upper()
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/taskdesk"))

        host = _env(_k("HOST"), "127.0.0.1")
        port = _env_int(_k("PORT"), DEFAULT_PORT)
        debug = _env_bool(_k("DEBUG"), False)

        tasks_dir = _env_path(_k("TASKS_DIR"), Path("tasks"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            host=host,
            port=port,
            debug=debug,
            tasks_dir=tasks_dir,
        )


_load_dotenv()

SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
