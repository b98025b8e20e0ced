import bisect
import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

from ..lookup import NOT_FOUND, Found, NotFound, lookup
from .models import Priority, Task

logger = logging.getLogger(__name__)

__all__ = ["TaskStore", "Found", "NotFound", "NOT_FOUND"]


# -------------------------------
# Storage
# -------------------------------
class TaskStore:
    """In-memory task list kept in ascending deadline order.

    Positions are what the UI hands back (row index in the list), so every
    index based call is permissive: out of range reads return ``NOT_FOUND``
    and out of range writes do nothing.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = []
        for task in tasks or ():
            self._insert(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def _insert(self, task: Task) -> int:
        # bisect_right lands on the first deadline strictly greater than ours.
        index = bisect.bisect_right(self._tasks, task.deadline, key=lambda t: t.deadline)
        self._tasks.insert(index, task)
        return index

    # --- Task operations ---
    def get_task(self, index: int) -> Found[Task] | NotFound:
        return lookup(self._tasks, index)

    def add_task(self, deadline: datetime, priority: Priority, description: str | None) -> None:
        task = Task(deadline, priority, description)
        index = self._insert(task)
        logger.debug("Task added at %s deadline=%s priority=%s", index, deadline, priority.name)

    def remove_task(self, index: int) -> None:
        if 0 <= index < len(self._tasks):
            removed = self._tasks.pop(index)
            logger.debug("Task removed at %s deadline=%s", index, removed.deadline)

    def edit_task(self, index: int, updated_task: Task) -> None:
        """Replace the task at ``index`` without re-sorting.

        Changing the deadline this way can leave the list out of order; use
        remove_task + add_task for that.
        """
        if 0 <= index < len(self._tasks):
            self._tasks[index] = updated_task

    def clear(self) -> None:
        self._tasks.clear()

    def replace_all(self, tasks: Iterable[Task]) -> None:
        fresh = TaskStore(tasks)
        self._tasks = fresh._tasks
