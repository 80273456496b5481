# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing touches the disk at import time except reading .env.
- Unset / blank variables fall back to defaults, never raise.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRACK"

STORAGE_BACKENDS = ("sqlite", "memory")
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


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
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    log_dir: Path

    # ---- Storage ----
    storage_backend: str
    storage_db_path: Path
    storage_key: str
    storage_quota_bytes: int | None

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-tracker").strip() or "task-tracker"
        log_level = _env_choice(_k("LOG_LEVEL"), LOG_LEVELS, "info").upper()

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_tracker"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "sqlite")
        storage_db_path = _env_path(_k("STORAGE_DB_PATH"), data_dir / "storage.sqlite3")
        storage_key = _env(_k("STORAGE_KEY"), "todo-app-tasks").strip() or "todo-app-tasks"

        # 0 / negative means "no quota".
        quota = _env_int(_k("STORAGE_QUOTA_BYTES"), 0)
        storage_quota_bytes = quota if quota > 0 else None

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_dir=log_dir,
            storage_backend=storage_backend,
            storage_db_path=storage_db_path,
            storage_key=storage_key,
            storage_quota_bytes=storage_quota_bytes,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
