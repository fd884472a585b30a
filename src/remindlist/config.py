# src/remindlist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time.
- The core never reads the environment; Settings are injected by the CLI bootstrap.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.ordering import COMPARATORS, DEFAULT_COMPARATOR
from .tasks.task_models import Locale

ENV_PREFIX = "REMINDLIST"

GATEWAYS = ("sqlite", "http")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    return v if v in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    locale: Locale

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Gateway ----
    gateway: str
    api_base_url: str
    api_token: str | None
    api_timeout_seconds: float

    # ---- Task list ----
    sort_order: str

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "remindlist").strip() or "remindlist"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        locale = Locale.parse(os.getenv(_k("LOCALE")), Locale.BR)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/remindlist"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        gateway = _env_choice(_k("GATEWAY"), GATEWAYS, "sqlite")
        api_base_url = _env(_k("API_BASE_URL"), "").strip()
        api_token = _env(_k("API_TOKEN"), "").strip() or None
        api_timeout_seconds = _env_float(_k("API_TIMEOUT_SECONDS"), 10.0)

        sort_order = _env_choice(_k("SORT_ORDER"), COMPARATORS, DEFAULT_COMPARATOR)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            locale=locale,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            gateway=gateway,
            api_base_url=api_base_url,
            api_token=api_token,
            api_timeout_seconds=api_timeout_seconds,
            sort_order=sort_order,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
