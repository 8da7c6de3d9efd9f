# src/taskline/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every consumer also accepts an injected settings object (tests never read env).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLINE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in {"1", "true", "yes", "y", "on"}:
        return True
    if raw in {"0", "false", "no", "n", "off"}:
        return False
    return default


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


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    # ---- Console ----
    frame_output: bool
    frame_width: int

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "taskline").strip() or "taskline"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskline"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.jsonl")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        frame_output = _env_bool(_k("FRAME_OUTPUT"), True)
        frame_width = _env_int(_k("FRAME_WIDTH"), 60)
        if frame_width <= 0:
            frame_width = 60

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
            frame_output=frame_output,
            frame_width=frame_width,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Real environment wins over .env.
    load_dotenv(override=False)
    return Settings.from_env()
