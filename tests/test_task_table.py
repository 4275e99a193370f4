# tests/test_task_table.py

from __future__ import annotations

from datetime import UTC, datetime

from plaintask.tasks.task_models import Task
from plaintask.tasks.task_table import DONE_MARK, TaskRow, render_task_table

NOW = datetime(2025, 3, 18, 12, 0, tzinfo=UTC)
EARLIER = datetime(2025, 3, 17, 22, 0, tzinfo=UTC)
LATER = datetime(2025, 3, 19, 22, 0, tzinfo=UTC)


def test_empty_table_uses_minimum_widths() -> None:
    header, rule = render_task_table([], now=NOW).splitlines()

    assert header == "| # | Name | Tags | Due                 | Done |"
    assert rule == "=" * len(header)


def test_columns_grow_to_longest_value() -> None:
    rows = [
        TaskRow(id=0, task=Task(name="A much longer name", tags=["alpha", "beta"], deadline=LATER)),
        TaskRow(id=1, task=Task(name="B")),
    ]

    lines = render_task_table(rows, now=NOW).splitlines()

    assert len({len(line) for line in lines}) == 1
    assert lines[0].startswith("| # | Name               | Tags        | Due ")
    assert lines[2].startswith("| 0 | A much longer name | alpha, beta | ")
    assert lines[3].startswith("| 1 | B                  |             |                     |")


def test_id_column_widens_for_two_digit_ids() -> None:
    rows = [TaskRow(id=i, task=Task(name=f"t{i}")) for i in range(11)]

    lines = render_task_table(rows, now=NOW).splitlines()

    assert lines[0].startswith("| #  | Name |")
    assert lines[-1].startswith("| 10 | t10  |")


def test_hidden_ids_and_done_mark() -> None:
    rows = [TaskRow(id=None, task=Task(name="Done", complete=True))]

    header, _, row = render_task_table(rows, show_ids=False, now=NOW).splitlines()

    assert header.startswith("| Name |")
    assert row.endswith(f"| {DONE_MARK.center(4)} |")


def test_no_escape_codes_without_color() -> None:
    rows = [
        TaskRow(id=0, task=Task(name="Late", deadline=EARLIER)),
        TaskRow(id=None, task=Task(name="Done", complete=True)),
    ]

    assert "\x1b[" not in render_task_table(rows, now=NOW)


def test_color_marks_overdue_and_completed_rows() -> None:
    rows = [
        TaskRow(id=0, task=Task(name="Late", deadline=EARLIER)),
        TaskRow(id=1, task=Task(name="Fine", deadline=LATER)),
        TaskRow(id=None, task=Task(name="Done", complete=True)),
    ]

    _, _, late, fine, done = render_task_table(rows, color=True, now=NOW).splitlines()

    assert "\x1b[31mLate" in late
    assert "\x1b[" not in fine
    assert "\x1b[9mDone" in done
    assert "\x1b[32m" in done
