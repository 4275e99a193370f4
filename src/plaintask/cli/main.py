# src/plaintask/cli/main.py

"""
CLI entrypoint.

Parses arguments, builds the task store for the configured file and runs
exactly one command. Errors are reported on stderr and mapped to exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..config import Settings, get_settings
from ..core.ports import TaskTracker
from ..logging_setup import setup_logging
from ..tasks.task_store import PlainTextTaskStore, TaskTrackerError
from .deadline import default_deadline, parse_deadline

logger = logging.getLogger(__name__)


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid id: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"id must be >= 0, got {value}")
    return value


def _deadline_arg(raw: str):
    try:
        return parse_deadline(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plaintask", description="A todo CLI application")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-f", "--file", help="Task file to use (default: $PLAINTASK_FILE or ./database)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log more (-v info, -vv debug)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Adds a new task")
    p_add.add_argument("-n", "--name", required=True, help="Name of the task")
    p_add.add_argument("-t", "--tags", nargs="+", help="Tag(s) to categorize a task")
    due = p_add.add_mutually_exclusive_group()
    due.add_argument(
        "-d",
        "--deadline",
        type=_deadline_arg,
        help="Deadline: 'YYYY-MM-DD HH:MM', 'YYYY-MM-DD' (17:00) or 'HH:MM' (today). "
        "Default: today 17:00",
    )
    due.add_argument("--no-deadline", action="store_true", help="Store the task without a deadline")

    p_complete = sub.add_parser("complete", help="Marks an existing task as finished")
    p_complete.add_argument("id", type=_non_negative_int, help="id of task to complete")

    p_delete = sub.add_parser("delete", help="Removes a task")
    p_delete.add_argument("id", type=_non_negative_int, help="id of task to delete")

    p_list = sub.add_parser("list", help="Shows tasks")
    p_list.add_argument("-a", "--all", action="store_true", help="Also show completed tasks")
    p_list.add_argument("-o", "--overdue", action="store_true", help="Only show tasks that are overdue")
    p_list.add_argument("-t", "--tags", nargs="+", help="Only show tasks with these tags")
    p_list.add_argument(
        "--match-all", action="store_true", help="With --tags: require every tag, not any"
    )
    p_list.add_argument(
        "-n", "--number", type=_non_negative_int, help="Only show the next N tasks due"
    )
    p_list.add_argument(
        "--color", action=argparse.BooleanOptionalAction, default=None, help="Colour the output"
    )

    return parser


def _console_level(verbose: int, settings: Settings) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.getLevelNamesMapping().get(settings.log_level, logging.WARNING)


def _use_color(flag: bool | None, settings: Settings) -> bool:
    if flag is not None:
        return flag
    if settings.color is not None:
        return settings.color
    return sys.stdout.isatty()


def _dispatch(tracker: TaskTracker, args: argparse.Namespace, settings: Settings) -> str:
    if args.command == "add":
        if args.no_deadline:
            deadline = None
        else:
            deadline = args.deadline or default_deadline()
        task = tracker.add_task(args.name, args.tags, deadline)
        if task.deadline is None:
            return f'Added "{task.name}".'
        return f'Added "{task.name}" (due {task.local_deadline()}).'

    if args.command == "complete":
        task = tracker.complete_task(args.id)
        if task is None:
            return f"No incomplete task with id {args.id}."
        return f'Completed "{task.name}".'

    if args.command == "delete":
        task = tracker.delete_task(args.id)
        if task is None:
            return f"No incomplete task with id {args.id}."
        return f'Deleted "{task.name}".'

    return tracker.list_tasks(
        show_all=args.all,
        overdue=args.overdue,
        tags=args.tags,
        match_all_tags=args.match_all,
        limit=args.number,
        color=_use_color(args.color, settings),
    )


def run(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    tracker: TaskTracker | None = None,
    configure_logging: bool = False,
) -> int:
    """Run one command; returns the process exit code."""
    if settings is None:
        settings = get_settings()

    args = build_parser().parse_args(argv)

    if configure_logging:
        setup_logging(
            console_level=_console_level(args.verbose, settings),
            log_file=settings.log_file,
        )

    if tracker is None:
        task_file = args.file or settings.task_file
        tracker = PlainTextTaskStore(task_file)
        logger.debug("Using task file %s", task_file)

    try:
        output = _dispatch(tracker, args, settings)
    except (TaskTrackerError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Process failed: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:], configure_logging=True))


if __name__ == "__main__":
    main()
