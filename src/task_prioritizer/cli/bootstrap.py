# src/task_prioritizer/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the task list from the tasks file into a fresh AppState,
- writes it back on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks import task_codec

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState with the store loaded from settings.tasks_path.

    Raises TaskFileError when the file cannot be read (or is missing and
    settings.create_missing is off).
    """
    if settings is None:
        settings = get_settings()

    store = task_codec.load(settings.tasks_path, missing_ok=settings.create_missing)
    return AppState(settings=settings, task_store=store)


def save_state(state: AppState) -> None:
    """Write the store back to settings.tasks_path. Raises TaskFileError."""
    path = state.settings.tasks_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise task_codec.TaskFileError(path, "Failed to create tasks directory") from e
    task_codec.save(state.task_store, path)
