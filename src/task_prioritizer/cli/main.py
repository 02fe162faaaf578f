# src/task_prioritizer/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the tasks file into AppState, runs the console
menu and writes the tasks file back when the menu exits normally.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

from ..cli.bootstrap import create_initial_state, save_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_codec import TaskFileError

logger = logging.getLogger(__name__)


def _fatal(err: TaskFileError) -> NoReturn:
    logger.error("Fatal I/O error: %s", err, exc_info=err.__cause__ is not None)
    print(f"Error: {err}", file=sys.stderr)
    raise SystemExit(1)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    try:
        state = create_initial_state(settings=settings)
    except TaskFileError as e:
        _fatal(e)
    print("\nTasks loaded successfully!")

    # Not wrapped in try/finally: a crash must not overwrite the file.
    run_console_loop(state)

    try:
        save_state(state)
    except TaskFileError as e:
        _fatal(e)
    print("Tasks saved successfully. Exiting...")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
