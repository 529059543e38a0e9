# tests/test_task_storage.py

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from tasklist.tasks.errors import StorageError
from tasklist.tasks.task_models import Priority, Task
from tasklist.tasks.task_storage import JsonFileStorage


def _sample() -> list[Task]:
    return [
        Task(
            id=1,
            text="Buy milk",
            completed=True,
            priority=Priority.MEDIUM,
            created_at=datetime(2024, 5, 1, 9, 0, 0, 250, tzinfo=UTC),
            completed_at=datetime(2024, 5, 1, 10, 0, tzinfo=UTC),
        ),
        Task(
            id=3,
            text="Clean house",
            priority=Priority.HIGH,
            created_at=datetime(2024, 5, 2, 9, 0, tzinfo=UTC),
        ),
    ]


def test_missing_file_loads_as_empty(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "nope.json")
    assert storage.exists() is False
    assert storage.load() == []


def test_save_then_load_in_fresh_instance_round_trips(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "tasks.json"
    JsonFileStorage(path).save(_sample())

    loaded = JsonFileStorage(path).load()
    assert loaded == _sample()
    assert loaded[0].created_at.tzinfo is not None


def test_file_is_a_json_array_with_camelcase_keys(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    storage = JsonFileStorage(path)
    storage.save(_sample())

    data = json.loads(path.read_text("utf-8"))
    assert isinstance(data, list)
    assert data[0]["createdAt"].endswith("Z")
    assert data[0]["completedAt"] == "2024-05-01T10:00:00Z"
    assert "completedAt" not in data[1]
    # no temp file left behind
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tasks.json"]


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "tasks.json")
    storage.save(_sample())
    storage.save(_sample()[1:])
    assert [t.id for t in storage.load()] == [3]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"id": 1}',
        '[{"id": 1}]',
        '[{"id": 1, "text": "x", "createdAt": "not-a-date"}]',
    ],
)
def test_corrupt_file_raises_storage_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")

    with pytest.raises(StorageError, match="Failed to load tasks"):
        JsonFileStorage(path).load()


def test_unreadable_path_raises_storage_error(tmp_path: Path) -> None:
    # a directory where the file should be: exists() is True but reading fails
    path = tmp_path / "tasks.json"
    path.mkdir()

    with pytest.raises(StorageError, match="Failed to load tasks"):
        JsonFileStorage(path).load()


def test_write_failure_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file", "utf-8")
    # parent "directory" is a regular file -> mkdir fails
    storage = JsonFileStorage(blocker / "tasks.json")

    with pytest.raises(StorageError, match="Failed to save tasks"):
        storage.save(_sample())


def test_non_utf8_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_bytes(b'[{"id": 1, "text": "\xff\xfe"}]')

    with pytest.raises(StorageError, match="Failed to load tasks"):
        JsonFileStorage(path).load()


def test_unencodable_text_raises_storage_error_and_cleans_tmp(tmp_path: Path) -> None:
    # undecodable argv bytes reach Python as lone surrogates
    path = tmp_path / "tasks.json"
    storage = JsonFileStorage(path)
    task = Task(id=1, text="bad \udcff bytes", created_at=datetime(2024, 5, 1, tzinfo=UTC))

    with pytest.raises(StorageError, match="Failed to save tasks"):
        storage.save([task])

    assert list(tmp_path.iterdir()) == []
