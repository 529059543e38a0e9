# src/tasklist/tasks/validators.py

from __future__ import annotations

from typing import Any

from .errors import ValidationError

MAX_TEXT_LENGTH = 255


def validate_task_text(text: Any) -> str:
    """Check task text and return it trimmed."""
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Task text must be a non-empty string.")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"Task text must not exceed {MAX_TEXT_LENGTH} characters.")
    return text.strip()


def validate_task_id(value: Any) -> int:
    """
    Accept an int or a decimal string and return a positive int.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool):
        raise ValidationError("Task ID must be a positive integer.")

    if isinstance(value, int):
        task_id = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        try:
            task_id = int(value.strip())
        except ValueError:
            # digit strings past the int conversion limit
            raise ValidationError("Task ID must be a positive integer.") from None
    else:
        raise ValidationError("Task ID must be a positive integer.")

    if task_id <= 0:
        raise ValidationError("Task ID must be a positive integer.")
    return task_id
