# src/plaintask/cli/deadline.py

"""Deadline input parsing for `plaintask add -d ...` (local time)."""

from __future__ import annotations

from datetime import datetime, time

DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"
DEFAULT_TIME = time(17, 0, 0)


def _local_now(now: datetime | None) -> datetime:
    return (now or datetime.now()).astimezone()


def default_deadline(now: datetime | None = None) -> datetime:
    """Today at 17:00 local time."""
    today = _local_now(now).date()
    return datetime.combine(today, DEFAULT_TIME).astimezone()


def parse_deadline(raw: str, now: datetime | None = None) -> datetime:
    """
    Accepted inputs:
      2025-03-17 22:00  -> that local date and time
      2025-03-17        -> that local date at 17:00
      22:00 / 22:00:00  -> today at that local time
    """
    s = raw.strip()

    try:
        return datetime.strptime(s, DATETIME_FORMAT).astimezone()
    except ValueError:
        pass

    try:
        day = datetime.strptime(s, DATE_FORMAT).date()
        return datetime.combine(day, DEFAULT_TIME).astimezone()
    except ValueError:
        pass

    try:
        at = time.fromisoformat(s)
    except ValueError:
        raise ValueError("Cannot be parsed to Date, Time, or DateTime") from None
    return datetime.combine(_local_now(now).date(), at).astimezone()
