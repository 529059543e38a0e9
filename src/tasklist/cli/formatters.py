# src/tasklist/cli/formatters.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Priority, Task, TaskStats

PRIORITY_MARKS: dict[Priority, str] = {
    Priority.LOW: "!",
    Priority.MEDIUM: "!!",
    Priority.HIGH: "!!!",
}


def format_priority(priority: Priority) -> str:
    return PRIORITY_MARKS[Priority(priority)]


def format_task(task: Task, show_id: bool = True) -> str:
    """One line per task: "(3) [x] Buy milk !!"."""
    status = "[x]" if task.completed else "[ ]"
    prefix = f"({task.id}) " if show_id else ""
    return f"{prefix}{status} {task.text} {format_priority(task.priority)}"


def format_task_list(tasks: Iterable[Task]) -> str:
    lines = [format_task(t, show_id=True) for t in tasks]
    if not lines:
        return "No tasks available."
    return "\n".join(lines)


def format_stats(stats: TaskStats) -> str:
    return (
        "📊 Task Statistics:\n"
        f"├── Total: {stats.total}\n"
        f"├── Completed: {stats.completed}\n"
        f"├── Pending: {stats.pending}\n"
        f"└── Completion Rate: {stats.completion_rate}%"
    )


def format_error(message: str) -> str:
    return f"❗ Error: {message}"


def format_success(message: str) -> str:
    return f"✅ Success: {message}"
