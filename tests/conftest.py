# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_prioritizer.core.state import AppState
from task_prioritizer.tasks.task_models import Priority
from task_prioritizer.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Task Prioritizer",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.txt",
        create_missing=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    """(A,Low),(B,High),(C,High),(D,Medium) in that insertion order."""
    s = TaskStore()
    s.append("A", Priority.LOW)
    s.append("B", Priority.HIGH)
    s.append("C", Priority.HIGH)
    s.append("D", Priority.MEDIUM)
    return s


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore())
