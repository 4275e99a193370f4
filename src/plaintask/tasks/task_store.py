# src/plaintask/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from .task_codec import FIELD_SEPARATOR, decode_task, encode_task
from .task_models import ParseTaskError, Task
from .task_table import TaskRow, render_task_table

logger = logging.getLogger(__name__)

_FORBIDDEN_IN_FIELDS = (FIELD_SEPARATOR, "\n", "\r")


class TaskTrackerError(Exception):
    """Base error for every store operation (I/O or malformed data)."""


class TaskStoreIOError(TaskTrackerError):
    def __init__(self, path: Path, exc: OSError | UnicodeDecodeError) -> None:
        reason = getattr(exc, "strerror", None) or str(exc)
        super().__init__(f"{path}: {reason}")
        self.path = path


class InvalidTaskError(TaskTrackerError):
    def __init__(self, path: Path, line_number: int, exc: ParseTaskError) -> None:
        super().__init__(f"{path}:{line_number}: {exc}")
        self.path = path
        self.line_number = line_number


def _sort_key(task: Task) -> tuple[bool, datetime]:
    # Tasks without a deadline go last; sorted() keeps file order for ties.
    return (task.deadline is None, task.deadline or datetime.min.replace(tzinfo=UTC))


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=_sort_key)


def _incomplete_positions(tasks: list[Task]) -> list[int]:
    """Map incomplete-task ids (list index) to positions in the full collection."""
    return [pos for pos, task in enumerate(tasks) if not task.complete]


def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValueError("name is required")
    if any(ch in name for ch in _FORBIDDEN_IN_FIELDS):
        raise ValueError(f"name must not contain {FIELD_SEPARATOR!r} or line breaks")
    return name


def _clean_tags(tags: Iterable[str] | None) -> list[str] | None:
    if tags is None:
        return None
    out: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if not tag:
            continue
        if "," in tag or any(ch in tag for ch in _FORBIDDEN_IN_FIELDS):
            raise ValueError(f"tag {tag!r} must not contain ',', {FIELD_SEPARATOR!r} or line breaks")
        out.append(tag)
    return out or None


class PlainTextTaskStore:
    """
    Plain-text task store.

    The file is the only source of truth:
    - every call re-reads the whole file (nothing is cached)
    - add appends one encoded line
    - complete/delete rewrite the whole file, and only when something changed

    There is no locking; concurrent processes can overwrite each other.
    """

    def __init__(self, file_path: str | Path = "./database") -> None:
        self._path = Path(file_path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_lines(self) -> list[str]:
        try:
            # First run: an absent file is an empty task list.
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty task file %s", self._path)
            with self._path.open("r", encoding="utf-8") as f:
                return [line.rstrip("\n") for line in f]
        except (OSError, UnicodeDecodeError) as exc:
            raise TaskStoreIOError(self._path, exc) from exc

    def _write_tasks(self, tasks: list[Task]) -> None:
        # Replace the real file, not a symlink pointing at it.
        target = self._path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for task in tasks:
                    f.write(encode_task(task) + "\n")
            os.replace(tmp, target)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreIOError(self._path, exc) from exc
        logger.debug("Rewrote %s with %d tasks", target, len(tasks))

    def _ends_without_newline(self) -> bool:
        try:
            with self._path.open("rb") as f:
                if f.seek(0, os.SEEK_END) == 0:
                    return False
                f.seek(-1, os.SEEK_END)
                return f.read(1) != b"\n"
        except FileNotFoundError:
            return False

    # ---- public API ----

    def load_tasks(self) -> list[Task]:
        """
        Load and sort all tasks.

        The first malformed line fails the whole load (no partial results).
        """
        tasks: list[Task] = []
        for line_number, line in enumerate(self._read_lines(), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except ParseTaskError as exc:
                logger.debug("Bad task line %s:%d: %r", self._path, line_number, line)
                raise InvalidTaskError(self._path, line_number, exc) from exc
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return sort_tasks(tasks)

    def add_task(
        self,
        name: str,
        tags: list[str] | None = None,
        deadline: datetime | None = None,
    ) -> Task:
        task = Task(name=_clean_name(name), tags=_clean_tags(tags), deadline=deadline)
        try:
            # A hand-edited file may lack its final newline; terminate that row first.
            prefix = "\n" if self._ends_without_newline() else ""
            with self._path.open("a", encoding="utf-8", newline="\n") as f:
                f.write(prefix + encode_task(task) + "\n")
        except OSError as exc:
            raise TaskStoreIOError(self._path, exc) from exc
        logger.info("Task added name=%r tags=%s deadline=%s", task.name, task.tags, task.export_deadline())
        return task

    def complete_task(self, index: int) -> Task | None:
        tasks = self.load_tasks()
        positions = _incomplete_positions(tasks)
        if not 0 <= index < len(positions):
            logger.info("complete_task: no incomplete task with id=%s (have %d)", index, len(positions))
            return None

        task = tasks[positions[index]]
        task.mark_complete()
        self._write_tasks(tasks)
        logger.info("Task completed id=%s name=%r", index, task.name)
        return task

    def delete_task(self, index: int) -> Task | None:
        tasks = self.load_tasks()
        positions = _incomplete_positions(tasks)
        if not 0 <= index < len(positions):
            logger.info("delete_task: no incomplete task with id=%s (have %d)", index, len(positions))
            return None

        task = tasks.pop(positions[index])
        self._write_tasks(tasks)
        logger.info("Task deleted id=%s name=%r", index, task.name)
        return task

    def query_tasks(
        self,
        *,
        show_all: bool = False,
        overdue: bool = False,
        tags: list[str] | None = None,
        match_all_tags: bool = False,
        limit: int | None = None,
        now: datetime | None = None,
    ) -> list[TaskRow]:
        """
        Return the filtered listing view.

        Row ids are positions among incomplete tasks, i.e. the ids accepted by
        complete_task/delete_task. Completed tasks get id None.
        """
        if now is None:
            now = datetime.now(UTC)

        rows: list[TaskRow] = []
        next_id = 0
        for task in self.load_tasks():
            row_id: int | None = None
            if not task.complete:
                row_id = next_id
                next_id += 1
            elif not show_all:
                continue
            rows.append(TaskRow(id=row_id, task=task))

        if overdue:
            rows = [r for r in rows if r.task.is_overdue(now)]
        if tags:
            rows = [r for r in rows if r.task.has_tags(tags, match_all=match_all_tags)]
        if limit is not None:
            rows = rows[: max(0, limit)]
        return rows

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
    ) -> str:
        if now is None:
            now = datetime.now(UTC)
        rows = self.query_tasks(
            show_all=show_all,
            overdue=overdue,
            tags=tags,
            match_all_tags=match_all_tags,
            limit=limit,
            now=now,
        )
        return render_task_table(rows, show_ids=not show_all, color=color, now=now)
