# src/tasklist/tasks/task_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .errors import StorageError
from .task_models import Task

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Task collection stored as one JSON array in a single file.

    - missing file -> empty collection
    - every save rewrites the whole file (tmp file + os.replace)
    - timestamps are ISO-8601 strings on disk, aware datetimes in memory
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("No task file at %s; starting empty.", self._path)
            return []

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to load tasks: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Failed to load tasks: invalid JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            raise StorageError(
                f"Failed to load tasks: expected a JSON array in {self._path}, "
                f"got {type(data).__name__}"
            )

        tasks: list[Task] = []
        for i, item in enumerate(data):
            try:
                tasks.append(Task.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                raise StorageError(f"Failed to load tasks: bad record #{i} in {self._path}: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except (OSError, UnicodeEncodeError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Failed to save tasks: {e}") from e

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
