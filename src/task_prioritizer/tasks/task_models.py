# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Priority(StrEnum):
    """
    Task priority.

    Values are the names written to the tasks file. Display order uses `rank`
    (High first), never the declaration order.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def from_name(cls, raw: str) -> Priority | None:
        """Case-sensitive lookup of a persisted name; None for anything else."""
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def from_selector(cls, selector: int) -> tuple[Priority, bool]:
        """
        Map a menu selector (1=Low, 2=Medium, 3=High) to a priority.

        Returns (priority, substituted). Unknown selectors fall back to Medium
        with substituted=True so the caller can warn the user.
        """
        chosen = _SELECTORS.get(selector)
        if chosen is None:
            return cls.MEDIUM, True
        return chosen, False


_RANKS: dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

_SELECTORS: dict[int, Priority] = {
    1: Priority.LOW,
    2: Priority.MEDIUM,
    3: Priority.HIGH,
}


class UpdateResult(StrEnum):
    """Outcome of an index-based store mutation."""

    OK = "ok"
    INVALID_INDEX = "invalid_index"
    ALREADY_COMPLETED = "already_completed"


@dataclass(slots=True)
class Task:
    description: str
    priority: Priority
    completed: bool = False

    @property
    def status_name(self) -> str:
        return "Completed" if self.completed else "Pending"
