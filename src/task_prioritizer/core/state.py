# src/task_prioritizer/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything one session owns.

    The store is created by the bootstrap and handed to every command
    explicitly; nothing else holds a reference to it.
    """

    # Settings (or a SimpleNamespace with the same attributes in tests).
    settings: Any
    task_store: TaskStore
