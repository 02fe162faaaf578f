# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for per-machine values.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPRIO_APP_NAME": "Title shown above the menu (default: Task Prioritizer).",
    "TASKPRIO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "TASKPRIO_DATA_DIR": "Directory for task_prioritizer.log (default: .local/task_prioritizer).",
    "TASKPRIO_TASKS_PATH": "Tasks file, relative to the working directory (default: tasks.txt).",
    # Persistence policy
    "TASKPRIO_CREATE_MISSING": (
        "true: a missing tasks file starts an empty list (default). "
        "false: a missing tasks file aborts startup."
    ),
}
