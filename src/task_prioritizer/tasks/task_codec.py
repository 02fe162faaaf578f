# tasks/task_codec.py

"""
Flat-file persistence for TaskStore.

One task per line, no header:

    <description>,<Low|Medium|High>,<true|false>

Lines that do not parse are skipped on load. The description is not escaped,
so a description containing a comma or a line break, or one with leading or
trailing whitespace, is written as is but will not load back unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .task_models import Priority, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

FIELD_SEP = ","
TRUE_TEXT = "true"
FALSE_TEXT = "false"


class TaskFileError(RuntimeError):
    """The tasks file could not be opened, read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


def encode_task(task: Task) -> str:
    completed = TRUE_TEXT if task.completed else FALSE_TEXT
    return f"{task.description}{FIELD_SEP}{task.priority.value}{FIELD_SEP}{completed}"


def decode_line(line: str) -> Task | None:
    """
    Parse one stored line.

    Returns None for anything that is not exactly three fields with a known
    priority name. Only the literal "true" counts as completed.
    """
    parts = line.strip().split(FIELD_SEP)
    if len(parts) != 3:
        return None

    description, raw_priority, raw_completed = parts
    priority = Priority.from_name(raw_priority.strip())
    if priority is None:
        return None

    return Task(
        description=description,
        priority=priority,
        completed=raw_completed.strip() == TRUE_TEXT,
    )


def _round_trip_problem(description: str) -> str | None:
    if FIELD_SEP in description:
        return f"contains {FIELD_SEP!r}"
    if "\n" in description or "\r" in description:
        return "contains a line break"
    if description != description.strip():
        return "has leading or trailing whitespace"
    return None


def save(store: TaskStore, destination: str | Path) -> None:
    """Overwrite `destination` with the store in canonical order."""
    path = Path(destination)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for task in store:
                problem = _round_trip_problem(task.description)
                if problem is not None:
                    logger.warning(
                        "Description %s and will not load back: %r",
                        problem,
                        task.description,
                    )
                f.write(encode_task(task) + "\n")
    except OSError as e:
        raise TaskFileError(path, "Failed to write tasks file") from e

    logger.info("Saved %d tasks to %s", len(store), path)


def load(source: str | Path, *, missing_ok: bool = False) -> TaskStore:
    """
    Build a fresh TaskStore from `source`, in file order.

    A missing file raises TaskFileError unless missing_ok is set, in which case
    the store starts empty.
    """
    path = Path(source)
    tasks: list[Task] = []
    skipped = 0

    try:
        with open(path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    logger.debug("Skipping undecodable line %s:%d", path, lineno)
                    skipped += 1
                    continue

                task = decode_line(line)
                if task is None:
                    if line.strip():
                        logger.debug("Skipping malformed line %s:%d", path, lineno)
                        skipped += 1
                    continue
                tasks.append(task)
    except FileNotFoundError as e:
        if not missing_ok:
            raise TaskFileError(path, "Failed to open tasks file") from e
        logger.info("Tasks file %s not found; starting with an empty list", path)
        return TaskStore()
    except OSError as e:
        raise TaskFileError(path, "Failed to read tasks file") from e

    logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), path, skipped)
    return TaskStore(tasks)
