# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from tasklist.tasks.errors import StorageError
from tasklist.tasks.task_models import Task


class FakeStorage:
    """
    In-memory TaskStorage for store unit tests.

    - Captures every save for assertions
    - fail_load / fail_save make the next calls raise StorageError
    - load_error lets a test inject any other exception on load
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: list[Task] = [replace(t) for t in (tasks or [])]
        self.saves: list[list[Task]] = []
        self.fail_load = False
        self.fail_save = False
        self.load_error: Exception | None = None

    def load(self) -> list[Task]:
        if self.load_error is not None:
            raise self.load_error
        if self.fail_load:
            raise StorageError("Failed to load tasks: disk on fire")
        return [replace(t) for t in self.tasks]

    def save(self, tasks: Sequence[Task]) -> None:
        if self.fail_save:
            raise StorageError("Failed to save tasks: disk full")
        snapshot = [replace(t) for t in tasks]
        self.tasks = snapshot
        self.saves.append(snapshot)
