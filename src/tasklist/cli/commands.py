# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..core.state import AppState
from ..tasks.errors import ValidationError
from ..tasks.task_models import Priority, TaskFilter
from .formatters import format_stats, format_success, format_task_list

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UnknownCommandError(LookupError):
    """Raised by CommandRegistry.handle for a name nobody registered."""

    def __init__(self, name: str) -> None:
        super().__init__('Unknown command. Use "help" for available commands.')
        self.name = name


class CommandRegistry:
    """Maps the first CLI argument to a handler; handlers return the text to print."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: Sequence[str]) -> str:
        """
        Run the command named by argv[0] with the remaining args.

        Raises UnknownCommandError for unregistered names; handler errors
        (ValidationError, StorageError, ...) propagate unchanged.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(name)

        logger.debug("Dispatching command %s args=%s", name, list(argv[1:]))
        return handler(state, list(argv[1:]))

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = ["📝 Task Manager CLI", "", "Usage: tasklist <command> [options]", "", "Commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        lines += [
            "",
            "Examples:",
            '  tasklist add "Buy groceries"',
            '  tasklist add --priority high "Pay rent"',
            "  tasklist list pending",
            "  tasklist complete 1",
            "  tasklist delete 2",
            '  tasklist edit 3 "Buy organic groceries"',
        ]
        return "\n".join(lines)


registry = CommandRegistry()


def _split_priority(args: list[str], default: Priority) -> tuple[Priority, list[str]]:
    """Pull a leading `--priority X` / `-p X` off the argument list."""
    if args and args[0] in ("--priority", "-p"):
        if len(args) < 2:
            raise ValidationError("Please provide a priority after --priority")
        return Priority.parse(args[1]), args[2:]
    if args and args[0].startswith("--priority="):
        return Priority.parse(args[0].split("=", 1)[1]), args[1:]
    return default, args


def cmd_add(state: AppState, args: list[str]) -> str:
    default = Priority(getattr(state.settings, "default_priority", Priority.MEDIUM))
    priority, rest = _split_priority(args, default)
    if not rest:
        raise ValidationError("Please provide task text")

    task = state.task_store.add_task(" ".join(rest), priority)
    return format_success(f"Added task: {task.text} (ID: {task.id})")


def cmd_list(state: AppState, args: list[str]) -> str:
    task_filter = TaskFilter.parse(args[0]) if args else TaskFilter.ALL
    return format_task_list(state.task_store.get_tasks(task_filter))


def cmd_complete(state: AppState, args: list[str]) -> str:
    if not args:
        raise ValidationError("Please provide task ID")
    task = state.task_store.complete_task(args[0])
    return format_success(f"Completed task: {task.text}")


def cmd_uncomplete(state: AppState, args: list[str]) -> str:
    if not args:
        raise ValidationError("Please provide task ID")
    task = state.task_store.uncomplete_task(args[0])
    return format_success(f"Uncompleted task: {task.text}")


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        raise ValidationError("Please provide task ID")
    task = state.task_store.delete_task(args[0])
    return format_success(f"Deleted task: {task.text}")


def cmd_edit(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        raise ValidationError("Please provide task ID and new text")
    task = state.task_store.edit_task(args[0], " ".join(args[1:]))
    return format_success(f"Updated task: {task.text}")


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_stats(state.task_store.get_stats())


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


registry.register("add", cmd_add, help_text="Add a new task", usage="add [-p low|medium|high] <text>")
registry.register("list", cmd_list, help_text="List tasks (all|completed|pending)", usage="list [filter]")
registry.register("complete", cmd_complete, help_text="Mark task as completed", usage="complete <id>")
registry.register(
    "uncomplete", cmd_uncomplete, help_text="Mark task as not completed", usage="uncomplete <id>"
)
registry.register("delete", cmd_delete, help_text="Delete a task", usage="delete <id>")
registry.register("edit", cmd_edit, help_text="Edit task text", usage="edit <id> <text>")
registry.register("stats", cmd_stats, help_text="Show task statistics")
registry.register("help", cmd_help, help_text="Show this help message", aliases=["--help", "-h"])
