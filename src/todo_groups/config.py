# src/todo_groups/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

STORAGE_BACKENDS = ("sqlite", "json", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
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
    return Path(raw).expanduser()


def _default_storage_file(backend: str) -> str:
    return "storage.json" if backend == "json" else "storage.sqlite3"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data (ignored by git) ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    groups_key: str

    # ---- Console ----
    task_preview_limit: int
    console_clear: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-groups").strip() or "todo-groups"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        storage_backend = _env(_k("STORAGE_BACKEND"), "sqlite").strip().lower() or "sqlite"
        storage_path = _env_path(
            _k("STORAGE_PATH"), data_dir / _default_storage_file(storage_backend)
        )
        groups_key = _env(_k("GROUPS_KEY"), "@todo_groups_v1").strip() or "@todo_groups_v1"

        # A card never shows less than one task.
        task_preview_limit = max(1, _env_int(_k("TASK_PREVIEW_LIMIT"), 6))
        console_clear = _env_bool(_k("CONSOLE_CLEAR"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            groups_key=groups_key,
            task_preview_limit=task_preview_limit,
            console_clear=console_clear,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
