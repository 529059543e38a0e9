# src/tasklist/tasks/errors.py

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all errors raised by the task subsystem."""


class ValidationError(TaskListError, ValueError):
    """Bad user input: empty text, bad id, unknown task, wrong completion state."""


class StorageError(TaskListError, RuntimeError):
    """The backing file could not be read, parsed or written."""


class TaskStoreInitError(TaskListError, RuntimeError):
    """Unexpected failure while loading the task store at startup."""
