# tests/test_deadline.py

from __future__ import annotations

from datetime import datetime, time

import pytest

from plaintask.cli.deadline import default_deadline, parse_deadline


def test_parse_date_and_time() -> None:
    parsed = parse_deadline("2025-03-17 22:30")

    assert parsed == datetime(2025, 3, 17, 22, 30).astimezone()
    assert parsed.tzinfo is not None


def test_parse_date_defaults_to_five_pm() -> None:
    assert parse_deadline("2025-03-17") == datetime(2025, 3, 17, 17, 0).astimezone()


@pytest.mark.parametrize(("raw", "expected"), [("09:30", time(9, 30)), ("21:15:05", time(21, 15, 5))])
def test_parse_time_means_today(now: datetime, raw: str, expected: time) -> None:
    today = now.astimezone().date()

    assert parse_deadline(raw, now=now) == datetime.combine(today, expected).astimezone()


@pytest.mark.parametrize("raw", ["", "tomorrow", "2025-02-30", "17/03/2025"])
def test_parse_rejects_garbage(raw: str) -> None:
    with pytest.raises(ValueError, match="Cannot be parsed"):
        parse_deadline(raw)


def test_default_deadline_is_today_at_five_pm(now: datetime) -> None:
    deadline = default_deadline(now=now)

    assert deadline.date() == now.astimezone().date()
    assert (deadline.hour, deadline.minute, deadline.second) == (17, 0, 0)
