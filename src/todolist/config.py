# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default; nothing is required to run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    file_log: bool

    # ---- Behaviour ----
    default_category: str
    lenient: bool

    # ---- Local data paths ----
    data_dir: Path
    todo_file: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        file_log = _env_bool(_k("FILE_LOG"), True)

        default_category = _env(_k("DEFAULT_CATEGORY"), "misc").strip() or "misc"
        lenient = _env_bool(_k("LENIENT"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path("~/.local/share/todo").expanduser())
        todo_file = _env_path(_k("FILE"), Path("~/.todo.json").expanduser())

        return Settings(
            app_name=app_name,
            log_level=log_level,
            file_log=file_log,
            default_category=default_category,
            lenient=lenient,
            data_dir=data_dir,
            todo_file=todo_file,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
