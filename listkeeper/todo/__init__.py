"""ToDo Reminder: tasks ordered by deadline."""

from .models import DEFAULT_DESCRIPTION, Priority, Task, normalize_description
from .store import NOT_FOUND, Found, NotFound, TaskStore

__all__ = [
    "DEFAULT_DESCRIPTION",
    "Priority",
    "Task",
    "normalize_description",
    "TaskStore",
    "Found",
    "NotFound",
    "NOT_FOUND",
]
