# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.tasks.task_models import Priority
from tasklist.tasks.task_storage import JsonFileStorage
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_file=tmp_path / "tasks.json",
        default_priority=Priority.MEDIUM,
    )


@pytest.fixture()
def storage(settings: SimpleNamespace) -> JsonFileStorage:
    return JsonFileStorage(settings.tasks_file)


@pytest.fixture()
def store(storage: JsonFileStorage) -> TaskStore:
    """TaskStore on a real JSON file under tmp_path, already initialized."""
    s = TaskStore(storage)
    s.initialize()
    return s


@pytest.fixture()
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def fake_store(fake_storage: FakeStorage) -> TaskStore:
    s = TaskStore(fake_storage)
    s.initialize()
    return s
