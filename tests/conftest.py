# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from plaintask.config import Settings
from plaintask.tasks.task_store import PlainTextTaskStore


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "database"


@pytest.fixture()
def store(task_file: Path) -> PlainTextTaskStore:
    return PlainTextTaskStore(task_file)


@pytest.fixture()
def now() -> datetime:
    """Fixed 'current time' between the deadlines used in the fixtures."""
    return datetime(2025, 3, 18, 12, 0, tzinfo=UTC)


@pytest.fixture()
def settings(task_file: Path) -> Settings:
    """
    Settings built directly (not from env) so tests never see a developer's
    PLAINTASK_* variables or .env file.
    """
    return Settings(task_file=task_file, log_level="WARNING", log_file=None, color=False)
