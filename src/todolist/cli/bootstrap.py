# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local directories exist,
- loads the TaskStore and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # The log directory is created by setup_logging.
    settings.todo_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, category: str | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings are injectable so tests can point the store at a temp file.
    If settings is None, falls back to get_settings().
    Raises MalformedStore if the todo file cannot be parsed.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.todo_file),
        category=category or settings.default_category,
    )
