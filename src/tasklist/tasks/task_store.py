# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..core.ports import TaskStorage
from .errors import StorageError, TaskStoreInitError, ValidationError
from .task_models import Priority, Task, TaskFilter, TaskStats, utc_now
from .validators import validate_task_id, validate_task_text

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list kept in sync with a TaskStorage backend.

    Every mutation is staged first: the new list is built, saved as a whole,
    and only then committed to memory. A failed save leaves memory exactly as
    it was after the last successful save (and does not consume an id).

    Tasks handed out are copies; callers can't mutate store state through them.
    """

    def __init__(self, storage: TaskStorage) -> None:
        self._storage = storage
        self._tasks: list[Task] = []
        self._next_id = 1

    def initialize(self) -> None:
        """Load the persisted collection and derive the next id from it."""
        try:
            tasks = list(self._storage.load())
            next_id = max((t.id for t in tasks), default=0) + 1
        except StorageError:
            raise
        except Exception as e:
            raise TaskStoreInitError(f"Failed to initialize task store: {e}") from e

        self._tasks = tasks
        self._next_id = next_id
        logger.info("TaskStore ready total=%d next_id=%d", len(tasks), next_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise ValidationError(f"Task with ID {task_id} not found")

    def _commit(self, staged: list[Task], *, op: str, **fields: Any) -> None:
        """Persist `staged` as the full collection, then make it current."""
        try:
            self._storage.save(staged)
        except StorageError:
            logger.error("Save failed during %s; in-memory state left unchanged.", op)
            raise
        self._tasks = staged
        logger.debug("Task %s %s", op, " ".join(f"{k}={v}" for k, v in fields.items()))

    def _replace_at(self, index: int, updated: Task) -> list[Task]:
        staged = list(self._tasks)
        staged[index] = updated
        return staged

    # ---- queries ----

    def get_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        """Matching tasks in insertion order (copies)."""
        if task_filter == TaskFilter.COMPLETED:
            selected = [t for t in self._tasks if t.completed]
        elif task_filter == TaskFilter.PENDING:
            selected = [t for t in self._tasks if not t.completed]
        else:
            selected = self._tasks
        return [replace(t) for t in selected]

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return replace(t)
        return None

    def get_stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    # ---- mutations ----

    def add_task(self, text: str, priority: Priority = Priority.MEDIUM) -> Task:
        clean = validate_task_text(text)

        task = Task(
            id=self._next_id,
            text=clean,
            completed=False,
            priority=Priority(priority),
            created_at=utc_now(),
        )
        self._commit([*self._tasks, task], op="added", id=task.id, priority=task.priority)
        self._next_id = task.id + 1
        return replace(task)

    def complete_task(self, task_id: Any) -> Task:
        valid_id = validate_task_id(task_id)
        idx = self._index_of(valid_id)
        current = self._tasks[idx]
        if current.completed:
            raise ValidationError(f"Task {valid_id} is already completed")

        updated = replace(current, completed=True, completed_at=utc_now())
        self._commit(self._replace_at(idx, updated), op="completed", id=valid_id)
        return replace(updated)

    def uncomplete_task(self, task_id: Any) -> Task:
        valid_id = validate_task_id(task_id)
        idx = self._index_of(valid_id)
        current = self._tasks[idx]
        if not current.completed:
            raise ValidationError(f"Task {valid_id} is not completed")

        updated = replace(current, completed=False, completed_at=None)
        self._commit(self._replace_at(idx, updated), op="uncompleted", id=valid_id)
        return replace(updated)

    def delete_task(self, task_id: Any) -> Task:
        valid_id = validate_task_id(task_id)
        idx = self._index_of(valid_id)

        staged = list(self._tasks)
        removed = staged.pop(idx)
        if removed.id != valid_id:
            raise RuntimeError(f"Unexpected error: located task {valid_id} but removed {removed.id}")

        self._commit(staged, op="deleted", id=valid_id)
        return replace(removed)

    def edit_task(self, task_id: Any, new_text: str) -> Task:
        valid_id = validate_task_id(task_id)
        clean = validate_task_text(new_text)
        idx = self._index_of(valid_id)

        updated = replace(self._tasks[idx], text=clean)
        self._commit(self._replace_at(idx, updated), op="edited", id=valid_id)
        return replace(updated)
