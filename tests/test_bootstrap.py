# tests/test_bootstrap.py

from __future__ import annotations

import pytest

from task_prioritizer.cli import main as cli_main
from task_prioritizer.cli.bootstrap import create_initial_state, save_state
from task_prioritizer.tasks.task_codec import TaskFileError
from task_prioritizer.tasks.task_models import Priority


def test_initial_state_from_missing_file_is_empty(settings) -> None:
    state = create_initial_state(settings=settings)

    assert len(state.task_store) == 0
    assert not settings.tasks_path.exists()


def test_initial_state_missing_file_fatal_when_configured(settings) -> None:
    settings.create_missing = False

    with pytest.raises(TaskFileError):
        create_initial_state(settings=settings)


def test_save_then_reload(settings) -> None:
    settings.tasks_path = settings.tasks_path.parent / "nested" / "tasks.txt"
    state = create_initial_state(settings=settings)
    state.task_store.append("Buy milk", Priority.HIGH)
    state.task_store.mark_complete(1)

    save_state(state)
    again = create_initial_state(settings=settings)

    assert settings.tasks_path.read_text("utf-8") == "Buy milk,High,true\n"
    assert again.task_store == state.task_store


def test_main_loads_runs_and_saves(settings, monkeypatch, capsys) -> None:
    settings.tasks_path.write_text("Old,Low,false\n", "utf-8")
    answers = iter(["1", "New", "3", "3", "1", "0"])

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_kw: None)
    monkeypatch.setattr("builtins.input", lambda _msg="": next(answers))

    cli_main.main()

    assert settings.tasks_path.read_text("utf-8") == "Old,Low,true\nNew,High,false\n"
    out = capsys.readouterr().out
    assert "Tasks loaded successfully!" in out
    assert "Tasks saved successfully. Exiting..." in out


def test_main_exits_on_fatal_load(settings, monkeypatch) -> None:
    settings.create_missing = False
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_kw: None)

    with pytest.raises(SystemExit) as exc:
        cli_main.main()

    assert exc.value.code == 1


def test_main_does_not_save_on_crash(settings, monkeypatch) -> None:
    settings.tasks_path.write_text("Old,Low,false\n", "utf-8")

    def crashing_loop(state):
        state.task_store.append("Unsaved", Priority.HIGH)
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_kw: None)
    monkeypatch.setattr(cli_main, "run_console_loop", crashing_loop)

    with pytest.raises(RuntimeError, match="boom"):
        cli_main.main()

    assert settings.tasks_path.read_text("utf-8") == "Old,Low,false\n"
