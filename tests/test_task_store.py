# tests/test_task_store.py

from __future__ import annotations

import itertools
from datetime import datetime, timedelta

import pytest

from listkeeper.todo.models import Priority, Task
from listkeeper.todo.store import NOT_FOUND, Found, TaskStore


def _deadlines(store: TaskStore) -> list[datetime]:
    return [t.deadline for t in store]


def test_add_keeps_deadline_order(filled_store: TaskStore) -> None:
    assert [d.day for d in _deadlines(filled_store)] == [1, 2, 3]
    assert filled_store.tasks[0].description == "Dentist"


@pytest.mark.parametrize(
    "order", list(itertools.permutations(range(4)))
)
def test_any_insertion_order_yields_sorted_deadlines(order) -> None:
    base = datetime(2025, 3, 1, 12, 0)
    deadlines = [base + timedelta(hours=h) for h in (5, 1, 9, 3)]

    store = TaskStore()
    for i in order:
        store.add_task(deadlines[i], Priority.NORMAL, f"task {i}")

    assert _deadlines(store) == sorted(deadlines)


def test_equal_deadline_goes_after_existing() -> None:
    deadline = datetime(2025, 1, 1, 9, 0)
    store = TaskStore()
    store.add_task(deadline, Priority.NORMAL, "first")
    store.add_task(deadline + timedelta(days=1), Priority.NORMAL, "later")
    store.add_task(deadline, Priority.NORMAL, "second")

    assert [t.description for t in store] == ["first", "second", "later"]


def test_add_task_normalizes_empty_description() -> None:
    store = TaskStore()
    store.add_task(datetime(2025, 1, 1), Priority.IMPORTANT, "")
    assert store.tasks[0].description == "No description"


def test_get_task_returns_found_or_not_found(filled_store: TaskStore) -> None:
    hit = filled_store.get_task(0)
    assert isinstance(hit, Found)
    assert hit.value.description == "Dentist"

    assert filled_store.get_task(3) is NOT_FOUND
    assert filled_store.get_task(-1) is NOT_FOUND


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_remove_and_edit_are_no_ops(filled_store: TaskStore, index: int) -> None:
    before = list(filled_store.tasks)

    filled_store.remove_task(index)
    filled_store.edit_task(index, Task(datetime(2030, 1, 1), Priority.NORMAL, "x"))

    assert list(filled_store.tasks) == before


def test_remove_task(filled_store: TaskStore) -> None:
    filled_store.remove_task(1)
    assert [t.description for t in filled_store] == ["Dentist", "Pay rent"]


def test_edit_task_replaces_in_place_without_resorting(filled_store: TaskStore) -> None:
    replacement = Task(datetime(2030, 1, 1), Priority.LESS_IMPORTANT, "Moved far out")
    filled_store.edit_task(0, replacement)

    assert filled_store.tasks[0] is replacement
    assert len(filled_store) == 3


def test_clear_and_replace_all(filled_store: TaskStore) -> None:
    tasks = list(filled_store.tasks)
    other = TaskStore()
    other.replace_all(reversed(tasks))
    assert list(other.tasks) == tasks

    filled_store.clear()
    assert len(filled_store) == 0
