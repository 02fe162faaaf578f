# src/task_prioritizer/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_SELECTOR, CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import Prompt
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsolePrompt:
    """Prompt port backed by input()/print() (or injected replacements)."""

    def __init__(self, input_fn: InputFn | None = None, output_fn: OutputFn | None = None) -> None:
        self._input = input_fn or input
        self._output = output_fn or print

    def ask_text(self, message: str) -> str:
        return self._input(message).strip()

    def ask_int(self, message: str) -> int:
        while True:
            raw = self._input(message).strip()
            try:
                return int(raw)
            except ValueError:
                self._output("Invalid input, please enter a valid number.")


def run_console_loop(
    state: AppState,
    *,
    prompt: Prompt | None = None,
    output_fn: OutputFn = print,
    registry: CommandRegistry = command_registry,
) -> None:
    """
    Menu loop. Returns on "0", end of input or Ctrl+C; saving is the caller's job.
    """
    prompt = prompt or ConsolePrompt(output_fn=output_fn)
    app_name = str(getattr(state.settings, "app_name", "Task Prioritizer"))
    menu = registry.build_menu(app_name)

    logger.info("Console started (tasks=%d).", len(state.task_store))

    while True:
        output_fn("\n" + menu)
        try:
            choice = prompt.ask_int("Enter your choice: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if choice == EXIT_SELECTOR:
            logger.info("Console exit command received.")
            break

        try:
            response = registry.handle(state, choice, prompt)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed during command %s, exiting.", choice)
            break
        except Exception:
            logger.exception("Command handler crashed (choice=%s).", choice)
            response = "Internal error while handling a command."

        output_fn("\n" + response)

    logger.info("Console finished.")
