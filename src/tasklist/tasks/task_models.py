# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from .errors import ValidationError


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Parse user input into a Priority; raises ValidationError on unknown values."""
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValidationError(f"Priority must be one of: {allowed}.") from None


class TaskFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: str) -> TaskFilter:
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            allowed = ", ".join(f.value for f in cls)
            raise ValidationError(f"Filter must be one of: {allowed}.") from None


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Invariant: completed_at is set if and only if completed is True.
    """

    id: int
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: datetime | None = None
    completed_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready record (camelCase keys, ISO-8601 timestamps)."""
        out: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "priority": self.priority.value,
            "createdAt": _to_iso(self.created_at),
        }
        if self.completed_at is not None:
            out["completedAt"] = _to_iso(self.completed_at)
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Rebuild a Task from a stored record.

        Raises ValueError/TypeError/KeyError on malformed records; the storage
        layer turns those into StorageError.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TypeError(f"task id must be an integer, got {task_id!r}")

        text = raw["text"]
        if not isinstance(text, str):
            raise TypeError(f"task text must be a string (id={task_id})")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise TypeError(f"task completed flag must be a boolean (id={task_id})")
        completed_at = _from_iso(raw.get("completedAt")) if completed else None
        if completed and completed_at is None:
            raise ValueError(f"completed task without completedAt (id={task_id})")

        return cls(
            id=task_id,
            text=text,
            completed=completed,
            priority=Priority(raw.get("priority", Priority.MEDIUM.value)),
            created_at=_from_iso(raw.get("createdAt")),
            completed_at=completed_at,
        )


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int

    @property
    def completion_rate(self) -> int:
        """Completed share in whole percent (0 for an empty list)."""
        if self.total <= 0:
            return 0
        return round(self.completed / self.total * 100)


def _to_iso(ts: datetime | None) -> str | None:
    if ts is None:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _from_iso(raw: Any) -> datetime | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise TypeError(f"timestamp must be an ISO-8601 string, got {raw!r}")
    ts = datetime.fromisoformat(raw)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts
