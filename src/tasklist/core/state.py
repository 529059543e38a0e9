# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so command handlers don't read globals.
    settings: Any
    task_store: TaskStore
