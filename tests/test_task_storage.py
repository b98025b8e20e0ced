# tests/test_task_storage.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from listkeeper.errors import FileFormatError, FileLoadError, FileParseError
from listkeeper.todo.models import Priority
from listkeeper.todo.storage import (
    create_default_task_file,
    decode_tasks,
    encode_tasks,
    load_into,
    load_tasks,
    parse_deadline,
    save_tasks,
)
from listkeeper.todo.store import TaskStore


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_save_then_load_round_trip(tmp_path: Path, filled_store: TaskStore) -> None:
    path = tmp_path / "tasks.txt"
    save_tasks(filled_store, path)

    assert path.read_text(encoding="utf-8").splitlines()[0] == "ToDoReminder.txt"

    loaded = load_tasks(path)
    assert list(loaded.tasks) == list(filled_store.tasks)


def test_reloading_twice_is_identical(tmp_path: Path, filled_store: TaskStore) -> None:
    path = tmp_path / "tasks.txt"
    save_tasks(filled_store, path)

    first = load_tasks(path)
    second = load_tasks(path)
    assert list(first.tasks) == list(second.tasks)
    assert encode_tasks(first) == encode_tasks(second)


def test_descriptions_with_commas_and_quotes_survive(tmp_path: Path) -> None:
    store = TaskStore()
    store.add_task(datetime(2025, 5, 1, 10, 0), Priority.IMPORTANT, 'Call Anna, then Bob "soon"')
    path = tmp_path / "tasks.txt"
    save_tasks(store, path)

    loaded = load_tasks(path)
    assert loaded.tasks[0].description == 'Call Anna, then Bob "soon"'


def test_legacy_unquoted_file_loads(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "old.txt",
        "ToDoReminder.txt\n"
        "2025-01-02 12:30:00,Very_important,Buy milk\n"
        "01-01-2025 09:00,Normal,Walk the dog\n",
    )

    store = load_tasks(path)
    assert [t.description for t in store] == ["Walk the dog", "Buy milk"]
    assert store.tasks[1].priority is Priority.VERY_IMPORTANT


def test_wrong_marker_leaves_store_unmodified(tmp_path: Path, filled_store: TaskStore) -> None:
    before = list(filled_store.tasks)
    path = _write(tmp_path / "bad.txt", "SomethingElse\n2025-01-01 09:00:00,Normal,x\n")

    with pytest.raises(FileFormatError):
        load_into(filled_store, path)
    assert list(filled_store.tasks) == before


@pytest.mark.parametrize(
    "row, error",
    [
        ("not a date,Normal,x", FileParseError),
        ("2025-01-01 09:00:00,Urgent,x", FileParseError),
        ("2025-01-01 09:00:00,Normal", FileFormatError),
        ("2025-01-01 09:00:00,Normal,a,b", FileFormatError),
        ("", FileFormatError),
        ("   ", FileFormatError),
        ("2025-01-01 09:00:00,Very important,x", FileParseError),
        ("2025-01-01 09:00:00,normal,x", FileParseError),
    ],
)
def test_bad_row_leaves_store_unmodified(tmp_path: Path, filled_store: TaskStore, row: str, error) -> None:
    before = list(filled_store.tasks)
    path = _write(
        tmp_path / "bad.txt",
        f"ToDoReminder.txt\n2025-02-01 09:00:00,Normal,fine\n{row}\n",
    )

    with pytest.raises(error) as excinfo:
        load_into(filled_store, path)
    assert "line 3" in str(excinfo.value)
    assert list(filled_store.tasks) == before


def test_blank_line_between_tasks_is_rejected(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "gap.txt",
        "ToDoReminder.txt\n"
        "2025-01-01 09:00:00,Normal,a\n"
        "\n"
        "2025-01-02 09:00:00,Normal,b\n",
    )

    with pytest.raises(FileFormatError, match="line 3"):
        load_tasks(path)


def test_oversized_field_is_a_load_error(tmp_path: Path, filled_store: TaskStore) -> None:
    before = list(filled_store.tasks)
    path = _write(
        tmp_path / "huge.txt",
        'ToDoReminder.txt\n2025-01-01 09:00:00,Normal,"' + "a" * 200_000 + '"\n',
    )

    with pytest.raises(FileLoadError, match="File is corrupt"):
        load_into(filled_store, path)
    assert list(filled_store.tasks) == before


def test_sub_second_deadlines_round_trip(tmp_path: Path) -> None:
    store = TaskStore()
    store.add_task(datetime(2025, 1, 1, 9, 0, 0, 123456), Priority.NORMAL, "precise")
    store.add_task(datetime(2025, 1, 1, 9, 0), Priority.NORMAL, "whole")
    path = tmp_path / "tasks.txt"
    save_tasks(store, path)

    text = path.read_text(encoding="utf-8")
    assert "2025-01-01 09:00:00,Normal,whole" in text
    assert "2025-01-01 09:00:00.123456,Normal,precise" in text

    loaded = load_tasks(path)
    assert list(loaded.tasks) == list(store.tasks)


def test_load_into_replaces_contents(tmp_path: Path, filled_store: TaskStore) -> None:
    path = _write(tmp_path / "one.txt", "ToDoReminder.txt\n2025-02-01 09:00:00,Normal,only\n")
    load_into(filled_store, path)
    assert [t.description for t in filled_store] == ["only"]


def test_missing_file_raises_file_load_error(tmp_path: Path) -> None:
    with pytest.raises(FileLoadError):
        load_tasks(tmp_path / "missing.txt")


def test_empty_text_is_rejected() -> None:
    with pytest.raises(FileFormatError):
        decode_tasks("")


def test_create_default_task_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "ToDoReminder.txt"
    store = create_default_task_file(path)

    assert len(store) == 0
    assert path.read_text(encoding="utf-8") == "ToDoReminder.txt\n"
    assert len(load_tasks(path)) == 0


def test_parse_deadline_formats() -> None:
    assert parse_deadline("2025-01-02 03:04:05") == datetime(2025, 1, 2, 3, 4, 5)
    assert parse_deadline("2025-01-02T03:04") == datetime(2025, 1, 2, 3, 4)
    assert parse_deadline("02/01/2025 03:04") == datetime(2025, 1, 2, 3, 4)
    assert parse_deadline("tomorrow") is None
    assert parse_deadline("") is None
