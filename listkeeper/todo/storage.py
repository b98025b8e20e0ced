"""Reading and writing ToDo Reminder task files.

Layout::

    ToDoReminder.txt
    2025-01-01 09:00:00,Normal,Buy milk
    2025-01-02 12:30:00,Very_important,"Call Anna, then Bob"

The first line is a fixed marker. Each following line is one task written as a
CSV row (deadline, priority, description). Plain rows without commas in the
description match files written by older versions, which did no quoting.
"""

import csv
import io
import logging
import os
from datetime import datetime
from pathlib import Path

from ..config import DEADLINE_INPUT_FORMATS, TODO_FILE_MARKER
from ..errors import FileFormatError, FileLoadError, FileParseError
from .models import Priority
from .store import TaskStore

logger = logging.getLogger(__name__)

FIELD_COUNT = 3


def format_deadline(value: datetime) -> str:
    # Whole seconds give "2025-01-01 09:00:00"; microseconds are kept when present.
    return value.isoformat(sep=" ")


def parse_deadline(s: str) -> datetime | None:
    text = (s or "").strip()
    if not text:
        return None
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        pass
    else:
        # Deadlines are naive local times.
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value
    for fmt in DEADLINE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def encode_tasks(store: TaskStore) -> str:
    buf = io.StringIO()
    buf.write(TODO_FILE_MARKER + "\n")
    writer = csv.writer(buf, lineterminator="\n")
    for task in store.tasks:
        writer.writerow([format_deadline(task.deadline), task.priority.value, task.description])
    return buf.getvalue()


def decode_tasks(text: str) -> TaskStore:
    """Build a new store from file contents. Raises FileLoadError subclasses.

    Every line after the marker must be a task; blank lines are rejected.
    Priorities must be written as their file tokens (``Very_important``...).
    """
    first, _, body = text.partition("\n")
    if first.strip() != TODO_FILE_MARKER:
        raise FileFormatError("The file is not readable by this program.")

    reader = csv.reader(io.StringIO(body))
    rows: list[tuple[int, list[str]]] = []
    try:
        for row in reader:
            rows.append((reader.line_num + 1, row))
    except csv.Error as exc:
        raise FileFormatError(f"File is corrupt - line {reader.line_num + 1}: {exc}") from None

    result = TaskStore()
    for lineno, row in rows:
        if len(row) != FIELD_COUNT:
            raise FileFormatError(
                f"File is corrupt - line {lineno}: incorrect number of fields: "
                f"{len(row)}; expected {FIELD_COUNT}."
            )
        raw_deadline, raw_priority, description = row
        deadline = parse_deadline(raw_deadline)
        if deadline is None:
            raise FileParseError(
                f"File is corrupt - line {lineno}: deadline {raw_deadline!r} can not be parsed."
            )
        try:
            priority = Priority(raw_priority)
        except ValueError:
            raise FileParseError(
                f"File is corrupt - line {lineno}: priority {raw_priority!r} can not be parsed."
            ) from None
        result.add_task(deadline, priority, description)
    return result


def load_tasks(path: str | Path) -> TaskStore:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileLoadError(f"The file could not be read: {exc}") from exc
    try:
        store = decode_tasks(text)
    except FileLoadError as exc:
        logger.warning("Rejected task file %s: %s", path, exc)
        raise
    logger.info("Loaded %s task(s) from %s", len(store), path)
    return store


def load_into(store: TaskStore, path: str | Path) -> None:
    """Load ``path`` and swap its tasks into ``store``; untouched on failure."""
    loaded = load_tasks(path)
    store.replace_all(loaded.tasks)


def save_tasks(store: TaskStore, path: str | Path) -> None:
    path = Path(path)
    content = encode_tasks(store)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.info("Saved %s task(s) to %s", len(store), path)


def create_default_task_file(path: str | Path) -> TaskStore:
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    store = TaskStore()
    save_tasks(store, path)
    logger.info("Created empty task file %s", path)
    return store
