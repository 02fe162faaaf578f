# src/task_prioritizer/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu commands.

Commands ask for input through a Prompt instead of calling input() directly,
so the console connector can own the terminal and tests can script answers.
"""

from typing import Protocol


class Prompt(Protocol):
    """Input side of the text UI."""

    def ask_text(self, message: str) -> str:
        """Return one line of user input, stripped."""
        ...

    def ask_int(self, message: str) -> int:
        """Ask until the user enters an integer."""
        ...
