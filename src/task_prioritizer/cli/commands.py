# src/task_prioritizer/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.ports import Prompt
from ..core.state import AppState
from ..tasks.task_models import Priority, Task, UpdateResult

CommandHandler = Callable[[AppState, Prompt], str]

logger = logging.getLogger(__name__)

EXIT_SELECTOR = 0

PRIORITY_PROMPT = "Enter task priority (1: Low, 2: Medium, 3: High): "
NEW_PRIORITY_PROMPT = "Enter new priority (1: Low, 2: Medium, 3: High): "

MSG_INVALID_INDEX = "Invalid task index."
MSG_ALREADY_COMPLETED = "Task is already marked as completed."
MSG_PRIORITY_FALLBACK = "Invalid priority, defaulting to Medium."
MSG_NO_TASKS = "No tasks found."

_ROW_FMT = "{:<5} {:<40} {:<10} {:<10}"


class CommandRegistry:
    """Numeric menu registry used by the console connector (1: add, 2: view, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[int, CommandHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, selector: int, handler: CommandHandler, label: str) -> None:
        if selector == EXIT_SELECTOR:
            raise ValueError(f"selector {EXIT_SELECTOR} is reserved for exit")
        self._handlers[selector] = handler
        self._labels[selector] = label

    def handle(self, state: AppState, selector: int, prompt: Prompt) -> str:
        """Run the command bound to `selector` and return the text to show."""
        handler = self._handlers.get(selector)
        if handler is None:
            return "Invalid choice, please try again."
        return handler(state, prompt)

    def build_menu(self, title: str) -> str:
        entries = [f"{sel}. {label}" for sel, label in sorted(self._labels.items())]
        entries.append(f"{EXIT_SELECTOR}. Exit")
        width = max(28, len(title) + 4, *(len(e) + 2 for e in entries))
        border = "+" + "-" * width + "+"
        lines = [border, "|" + title.center(width) + "|", border]
        lines.extend("| " + e.ljust(width - 1) + "|" for e in entries)
        lines.append(border)
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_table(rows: Iterable[tuple[int, Task]]) -> str:
    """Render (index, task) pairs as the fixed-width task table."""
    lines = [
        _ROW_FMT.format("Index", "Description", "Priority", "Status"),
        _ROW_FMT.format("-" * 5, "-" * 40, "-" * 10, "-" * 10),
    ]
    for index, task in rows:
        lines.append(
            _ROW_FMT.format(index, task.description, task.priority.value, task.status_name)
        )
    return "\n".join(lines)


def _canonical_table(state: AppState) -> str:
    return format_task_table(enumerate(state.task_store, start=1))


def _ask_priority(prompt: Prompt, message: str) -> tuple[Priority, str | None]:
    priority, substituted = Priority.from_selector(prompt.ask_int(message))
    return priority, (MSG_PRIORITY_FALLBACK if substituted else None)


def _join(*parts: str | None) -> str:
    return "\n".join(p for p in parts if p)


def cmd_add(state: AppState, prompt: Prompt) -> str:
    description = prompt.ask_text("Enter task description: ")
    priority, warning = _ask_priority(prompt, PRIORITY_PROMPT)
    state.task_store.append(description, priority)
    return _join(warning, "Task added successfully!", _canonical_table(state))


def cmd_view(state: AppState, prompt: Prompt) -> str:
    if not len(state.task_store):
        return MSG_NO_TASKS
    return format_task_table(state.task_store.indexed_display_order())


def cmd_complete(state: AppState, prompt: Prompt) -> str:
    index = prompt.ask_int("Enter the index of the task to mark as completed: ")
    result = state.task_store.mark_complete(index)
    if result is UpdateResult.INVALID_INDEX:
        return MSG_INVALID_INDEX
    if result is UpdateResult.ALREADY_COMPLETED:
        return MSG_ALREADY_COMPLETED
    return _join("Task marked as completed successfully!", _canonical_table(state))


def cmd_priority(state: AppState, prompt: Prompt) -> str:
    """The index is checked before the priority prompt is shown."""
    index = prompt.ask_int("Enter the index of the task to change priority: ")
    if state.task_store.get(index) is None:
        return MSG_INVALID_INDEX

    priority, warning = _ask_priority(prompt, NEW_PRIORITY_PROMPT)
    result = state.task_store.change_priority(index, priority)
    if result is UpdateResult.INVALID_INDEX:
        return MSG_INVALID_INDEX
    return _join(warning, "Task priority updated successfully!", _canonical_table(state))


registry.register(1, cmd_add, "Add Task")
registry.register(2, cmd_view, "View Tasks")
registry.register(3, cmd_complete, "Mark Task as Completed")
registry.register(4, cmd_priority, "Change Task Priority")
