# src/plaintask/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI.

The CLI depends on a Protocol instead of the concrete plain-text store,
so other backends can be dropped in without touching callers.
"""

from datetime import datetime
from typing import Any, Protocol


class TaskTracker(Protocol):
    def add_task(
            self,
            name: str,
            tags: list[str] | None = None,
            deadline: datetime | None = None,
    ) -> Any: ...

    # Ids are positions among incomplete tasks; out-of-range ids are a no-op (None).
    def complete_task(self, index: int) -> Any | None: ...
    def delete_task(self, index: int) -> Any | None: ...

    def list_tasks(
            self,
            *,
            show_all: bool = False,
            overdue: bool = False,
            tags: list[str] | None = None,
            match_all_tags: bool = False,
            limit: int | None = None,
            now: datetime | None = None,
            color: bool = False,
    ) -> str: ...
