# src/plaintask/tasks/task_table.py

"""Column-aligned listing output for the terminal (display only)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from ..utils.text import TextEffect, add_text_effect, right_pad
from .task_models import Task

MIN_ID_WIDTH = 1
MIN_NAME_WIDTH = 4
MIN_TAGS_WIDTH = 4
DEADLINE_WIDTH = 19
DONE_WIDTH = 4

DONE_MARK = "✓"


@dataclass(slots=True)
class TaskRow:
    # Position among incomplete tasks; None for completed ones.
    id: int | None
    task: Task


def _line(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_task_table(
    rows: list[TaskRow],
    *,
    show_ids: bool = True,
    color: bool = False,
    now: datetime | None = None,
) -> str:
    if now is None:
        now = datetime.now(UTC)

    id_width = max([MIN_ID_WIDTH, *(len(str(r.id)) for r in rows if r.id is not None)])
    name_width = max([MIN_NAME_WIDTH, *(len(r.task.name) for r in rows)])
    tags_width = max([MIN_TAGS_WIDTH, *(len(r.task.joined_tags()) for r in rows)])
    widths = [name_width, tags_width, DEADLINE_WIDTH, DONE_WIDTH]
    if show_ids:
        widths.insert(0, id_width)

    header = [
        right_pad("Name", name_width),
        right_pad("Tags", tags_width),
        right_pad("Due", DEADLINE_WIDTH),
        right_pad("Done", DONE_WIDTH),
    ]
    if show_ids:
        header.insert(0, right_pad("#", id_width))

    out = [_line(header), "=" * (sum(widths) + 3 * (len(widths) - 1) + 4)]

    for row in rows:
        task = row.task
        done = DONE_MARK.center(DONE_WIDTH) if task.complete else " " * DONE_WIDTH
        cells = [
            right_pad(task.name, name_width),
            right_pad(task.joined_tags(), tags_width),
            right_pad(task.local_deadline(), DEADLINE_WIDTH),
            done,
        ]
        if show_ids:
            cells.insert(0, right_pad("" if row.id is None else str(row.id), id_width))

        if color:
            if task.complete:
                cells = [add_text_effect(c, TextEffect.STRIKE_THROUGH) for c in cells[:-1]] + [
                    add_text_effect(done, TextEffect.GREEN)
                ]
            elif task.is_overdue(now):
                cells = [add_text_effect(c, TextEffect.RED) for c in cells]

        out.append(_line(cells))

    return "\n".join(out)
