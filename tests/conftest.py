# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from listkeeper.config import Settings
from listkeeper.todo.models import Priority
from listkeeper.todo.store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a per-test data directory."""
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture()
def filled_store() -> TaskStore:
    store = TaskStore()
    store.add_task(datetime(2025, 1, 3, 9, 0), Priority.NORMAL, "Pay rent")
    store.add_task(datetime(2025, 1, 1, 8, 30), Priority.VERY_IMPORTANT, "Dentist")
    store.add_task(datetime(2025, 1, 2, 18, 15), Priority.NOT_IMPORTANT, "Water plants")
    return store
