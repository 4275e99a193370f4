# src/plaintask/tasks/task_codec.py

"""
Single-line text encoding of a Task.

Stored layout (one task per line):

    | <name> | <tag, tag> | <true|false> | <ISO 8601 deadline> |

Empty tags / deadline are stored as empty fields, never as placeholders.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from .task_models import (
    InvalidBooleanError,
    InvalidFormatError,
    InvalidTimestampError,
    Task,
)

FIELD_SEPARATOR = "|"
TAG_SEPARATOR = ", "
FIELD_COUNT = 4

_BOOL_LITERALS = {"true": True, "false": False}

# RFC 3339 date-time as written by encode_task (offset checked separately).
_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?P<offset>Z|[+-]\d{2}:\d{2})?"
)


def _row(name: str, tags: str, complete: bool, deadline: str) -> str:
    return f"| {name} | {tags} | {'true' if complete else 'false'} | {deadline} |"


def encode_task(task: Task) -> str:
    return _row(task.name, task.joined_tags(), task.complete, task.export_deadline())


def format_for_display(task: Task) -> str:
    """Same layout as the stored line, but with the deadline in local time."""
    return _row(task.name, task.joined_tags(), task.complete, task.local_deadline())


def _decode_tags(raw: str) -> list[str] | None:
    parts = raw.split(TAG_SEPARATOR)
    if all(not p.strip() for p in parts):
        return None
    return parts


def _decode_complete(raw: str) -> bool:
    try:
        return _BOOL_LITERALS[raw]
    except KeyError:
        raise InvalidBooleanError(raw) from None


def _decode_deadline(raw: str) -> datetime | None:
    if not raw:
        return None
    match = _RFC3339.fullmatch(raw)
    if match is None:
        raise InvalidTimestampError(raw, "expected YYYY-MM-DDTHH:MM:SS[.ffffff]+HH:MM")
    if match["offset"] is None:
        raise InvalidTimestampError(raw, "missing timezone offset")
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidTimestampError(raw, str(exc)) from exc
    return parsed.astimezone(UTC)


def decode_task(line: str) -> Task:
    """
    Parse one stored line into a Task.

    Strict: any bad field aborts the whole line with a ParseTaskError subclass
    identifying the failing stage.
    """
    body = line.strip().removeprefix(FIELD_SEPARATOR).removesuffix(FIELD_SEPARATOR)
    fields = [f.strip() for f in body.split(FIELD_SEPARATOR)]
    if len(fields) != FIELD_COUNT:
        raise InvalidFormatError(len(fields))

    name, tags_raw, complete_raw, deadline_raw = fields
    tags = _decode_tags(tags_raw)
    complete = _decode_complete(complete_raw)
    deadline = _decode_deadline(deadline_raw)

    return Task(name=name, tags=tags, deadline=deadline, complete=complete)
