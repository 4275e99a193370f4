# src/plaintask/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object per process run.
- CLI flags override these values; see cli/main.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "PLAINTASK"
DEFAULT_TASK_FILE = Path("./database")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional_bool(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    task_file: Path
    log_level: str
    log_file: Optional[Path]
    # None means "decide from the terminal" (colour only when stdout is a TTY).
    color: Optional[bool]

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            task_file=_env_path(_k("FILE"), DEFAULT_TASK_FILE),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_optional_path(_k("LOG_FILE")),
            color=_env_optional_bool(_k("COLOR")),
        )


def get_settings() -> Settings:
    return Settings.from_env()
