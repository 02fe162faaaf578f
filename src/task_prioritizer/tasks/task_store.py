# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Priority, Task, UpdateResult

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list.

    Insertion order is the canonical order (the one written to disk).
    Public indices are 1-based, as shown to the user. Tasks are never removed,
    so an index stays valid for the whole session.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskStore(tasks={len(self._tasks)})"

    # ---- low-level helpers ----

    def _position(self, index: int) -> int | None:
        position = index - 1
        if position < 0 or position >= len(self._tasks):
            return None
        return position

    # ---- public API ----

    @property
    def tasks(self) -> list[Task]:
        """Copy of the canonical list."""
        return list(self._tasks)

    def get(self, index: int) -> Task | None:
        position = self._position(index)
        if position is None:
            return None
        return self._tasks[position]

    def append(self, description: str, priority: Priority) -> Task:
        task = Task(description=description, priority=priority)
        self._tasks.append(task)
        logger.debug("Task appended index=%s priority=%s", len(self._tasks), priority)
        return task

    def mark_complete(self, index: int) -> UpdateResult:
        position = self._position(index)
        if position is None:
            logger.debug("mark_complete rejected index=%s size=%s", index, len(self._tasks))
            return UpdateResult.INVALID_INDEX

        task = self._tasks[position]
        if task.completed:
            return UpdateResult.ALREADY_COMPLETED

        task.completed = True
        logger.debug("Task completed index=%s", index)
        return UpdateResult.OK

    def change_priority(self, index: int, new_priority: Priority) -> UpdateResult:
        position = self._position(index)
        if position is None:
            logger.debug("change_priority rejected index=%s size=%s", index, len(self._tasks))
            return UpdateResult.INVALID_INDEX

        old = self._tasks[position].priority
        self._tasks[position].priority = new_priority
        logger.debug("Task priority changed index=%s %s -> %s", index, old, new_priority)
        return UpdateResult.OK

    def display_order(self) -> list[Task]:
        """Tasks sorted High -> Medium -> Low; ties keep insertion order."""
        return [task for _, task in self.indexed_display_order()]

    def indexed_display_order(self) -> list[tuple[int, Task]]:
        """
        Same ordering as display_order(), each task paired with its 1-based
        canonical index (the one mark_complete/change_priority accept).
        """
        # sorted() is stable: equal ranks keep insertion order.
        return sorted(
            enumerate(self._tasks, start=1),
            key=lambda pair: pair[1].priority.rank,
        )
