# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so command handlers can read them.
    settings: object

    task_store: TaskStore

    # Category addressed by this invocation; `move` switches it to the target.
    category: str
