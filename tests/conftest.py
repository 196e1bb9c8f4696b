# tests/conftest.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.core.state import AppState
from todolist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the user's environment.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        file_log=False,
        default_category="misc",
        lenient=False,
        data_dir=tmp_path / "data",
        todo_file=tmp_path / "todo.json",
    )


@pytest.fixture()
def write_store(settings: SimpleNamespace):
    """Write a raw mapping to the todo file used by `settings`."""

    def _write(data) -> Path:
        settings.todo_file.write_text(json.dumps(data), "utf-8")
        return settings.todo_file

    return _write


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.todo_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, category="misc")


@pytest.fixture()
def restore_logging():
    """Drop handlers added by setup_logging() and reset the root level."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
