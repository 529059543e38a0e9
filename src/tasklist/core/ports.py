# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on this Protocol instead of a concrete file backend,
so tests can swap in an in-memory fake.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """
    Whole-collection persistence for tasks.

    - load(): every stored task, or [] if nothing was stored yet
    - save(): replace everything stored with `tasks` in one step
    Both raise StorageError when the medium can't be read/written.
    """

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...
