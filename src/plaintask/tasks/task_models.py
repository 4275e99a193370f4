# src/plaintask/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

LOCAL_DEADLINE_FORMAT = "%m/%d/%Y %H:%M:%S"


class ParseTaskError(ValueError):
    """A stored task line could not be decoded."""


class InvalidFormatError(ParseTaskError):
    def __init__(self, field_count: int) -> None:
        super().__init__(
            f"provided string could not be converted to a task "
            f"(expected 4 fields, got {field_count})"
        )
        self.field_count = field_count


class InvalidBooleanError(ParseTaskError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid completion flag {raw!r} (expected 'true' or 'false')")
        self.raw = raw


class InvalidTimestampError(ParseTaskError):
    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"invalid deadline {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


@dataclass(slots=True)
class Task:
    """
    A single tracked task.

    Notes:
    - an empty tag list is normalised to None ("no tags")
    - deadlines are kept timezone-aware in UTC; naive datetimes are rejected
    """

    name: str
    tags: list[str] | None = None
    deadline: datetime | None = None
    complete: bool = False

    def __post_init__(self) -> None:
        if not self.tags:
            self.tags = None
        else:
            self.tags = list(self.tags)

        if self.deadline is not None:
            if self.deadline.tzinfo is None:
                raise ValueError("deadline must be timezone-aware")
            self.deadline = self.deadline.astimezone(UTC)

    def mark_complete(self) -> None:
        self.complete = True

    def is_overdue(self, now: datetime) -> bool:
        if self.complete or self.deadline is None:
            return False
        return self.deadline <= now

    def has_tags(self, wanted: list[str], *, match_all: bool = False) -> bool:
        own = set(self.tags or ())
        requested = set(wanted)
        if match_all:
            return requested <= own
        return bool(own & requested)

    def local_deadline(self) -> str:
        if self.deadline is None:
            return ""
        return self.deadline.astimezone().strftime(LOCAL_DEADLINE_FORMAT)

    def export_deadline(self) -> str:
        if self.deadline is None:
            return ""
        return self.deadline.isoformat()

    def joined_tags(self) -> str:
        return ", ".join(self.tags) if self.tags else ""
