# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected or from get_settings()),
- wires the JSON file storage into a TaskStore,
- loads persisted tasks once, before any command runs.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_storage import JsonFileStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState with an initialized TaskStore.

    StorageError / TaskStoreInitError from loading propagate to the caller.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    storage = JsonFileStorage(settings.tasks_file)
    store = TaskStore(storage)
    store.initialize()

    logger.debug("State ready (tasks_file=%s)", storage.path)
    return AppState(settings=settings, task_store=store)
