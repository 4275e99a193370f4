# src/plaintask/tasks/__init__.py

from .task_models import Task
from .task_store import PlainTextTaskStore, TaskTrackerError

__all__ = ["PlainTextTaskStore", "Task", "TaskTrackerError"]
