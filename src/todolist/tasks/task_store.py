# src/todolist/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..core.errors import (
    AlreadyAtBottom,
    AlreadyAtTop,
    EmptyTaskText,
    IndexOutOfRange,
    InvalidArgument,
    MalformedStore,
    NoSuchCategory,
)
from .task_models import CategoryMap, IndexedTask, enumerate_tasks, render_all

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The whole mapping {category: [task, ...]} is read once on construction
    and kept in memory. Every mutating method rewrites the full file before
    returning:
    - empty categories are pruned during save (and only there)
    - the file is written to a temp sibling and moved into place

    Concurrency:
    - none; two processes writing at once may lose an update
    """

    def __init__(self, path: str | Path = "todo.json") -> None:
        self._path = Path(path)
        self._data: CategoryMap = self._load()
        logger.debug(
            "TaskStore ready path=%s categories=%d tasks=%d",
            self._path,
            len(self._data),
            sum(len(v) for v in self._data.values()),
        )

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def _load(self) -> CategoryMap:
        if not self._path.exists():
            logger.info("No todo file at %s; starting empty.", self._path)
            return {}

        try:
            raw = json.loads(self._path.read_text("utf-8") or "{}")
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedStore(self._path, str(e)) from e
        except json.JSONDecodeError as e:
            raise MalformedStore(self._path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

        return self._validate(raw)

    def _validate(self, raw: Any) -> CategoryMap:
        if not isinstance(raw, dict):
            raise MalformedStore(self._path, "top level must be an object of category lists")

        out: CategoryMap = {}
        for name, tasks in raw.items():
            if not isinstance(tasks, list):
                raise MalformedStore(self._path, f"category {name!r} is not a list")
            if not all(isinstance(t, str) for t in tasks):
                raise MalformedStore(self._path, f"category {name!r} holds non-string tasks")
            out[name] = list(tasks)
        return out

    def _prune(self) -> None:
        for name in [k for k, v in self._data.items() if not v]:
            del self._data[name]
            logger.debug("Pruned empty category %s", name)

    def save(self) -> None:
        """Prune empty categories and rewrite the whole file atomically."""
        self._prune()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(
                json.dumps(self._data, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
                "utf-8",
            )
            os.replace(tmp, self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d categories to %s", len(self._data), self._path)

    # ---- low-level helpers ----

    def _tasks(self, category: str) -> list[str]:
        tasks = self._data.get(category)
        if tasks is None:
            raise NoSuchCategory(category)
        return tasks

    @staticmethod
    def _check_index(tasks: list[str], index: int) -> None:
        if not 0 <= index < len(tasks):
            raise IndexOutOfRange(index, len(tasks))

    @staticmethod
    def _clean_text(text: str) -> str:
        text = (text or "").strip()
        if not text:
            raise EmptyTaskText()
        return text

    # ---- queries ----

    def as_dict(self) -> CategoryMap:
        return {k: list(v) for k, v in self._data.items()}

    def categories(self) -> list[str]:
        return sorted(k for k, v in self._data.items() if v)

    def has_category(self, category: str) -> bool:
        return bool(self._data.get(category))

    def list_tasks(self, category: str) -> list[IndexedTask]:
        return enumerate_tasks(self._tasks(category))

    def list_all(self) -> str:
        return render_all({k: v for k, v in self._data.items() if v})

    def top(self, category: str) -> str | None:
        tasks = self._data.get(category) or []
        return tasks[0] if tasks else None

    # ---- mutations ----

    def add(self, category: str, text: str) -> int:
        """Append a task, creating the category if needed. Returns its index."""
        text = self._clean_text(text)
        tasks = self._data.setdefault(category, [])
        tasks.append(text)
        self.save()
        logger.info("Added task to %s at %d", category, len(tasks) - 1)
        return len(tasks) - 1

    def remove(self, category: str, ids: Iterable[int]) -> list[str]:
        """
        Remove tasks by their positions in the current list.

        Ids are deduplicated and validated before anything is deleted, so the
        result does not depend on the order they were given in.
        """
        tasks = self._tasks(category)
        wanted = sorted(set(ids))
        if not wanted:
            raise InvalidArgument("No task ids given.")
        for i in wanted:
            self._check_index(tasks, i)

        removed = [tasks[i] for i in wanted]
        for i in reversed(wanted):
            del tasks[i]
        self.save()
        logger.info("Removed %d task(s) from %s", len(removed), category)
        return removed

    def move_up(self, category: str, index: int, count: int = 1) -> int:
        """Shift a task towards the top by up to `count` places. Returns its new index."""
        tasks = self._tasks(category)
        self._check_index(tasks, index)
        if count < 1:
            raise InvalidArgument(f"Count must be positive, got {count}.")
        if index == 0:
            raise AlreadyAtTop(index)

        pos = index
        for _ in range(count):
            if pos == 0:
                break
            tasks[pos - 1], tasks[pos] = tasks[pos], tasks[pos - 1]
            pos -= 1
        self.save()
        return pos

    def move_down(self, category: str, index: int, count: int = 1) -> int:
        """Shift a task towards the bottom by up to `count` places. Returns its new index."""
        tasks = self._tasks(category)
        self._check_index(tasks, index)
        if count < 1:
            raise InvalidArgument(f"Count must be positive, got {count}.")
        last = len(tasks) - 1
        if index == last:
            raise AlreadyAtBottom(index)

        pos = index
        for _ in range(count):
            if pos == last:
                break
            tasks[pos + 1], tasks[pos] = tasks[pos], tasks[pos + 1]
            pos += 1
        self.save()
        return pos

    def exchange(self, category: str, i: int, j: int) -> None:
        tasks = self._tasks(category)
        self._check_index(tasks, i)
        self._check_index(tasks, j)
        tasks[i], tasks[j] = tasks[j], tasks[i]
        self.save()

    def move(self, category: str, index: int, target: str) -> int:
        """Move a task to the end of `target`. Returns its index there."""
        target = (target or "").strip()
        if not target:
            raise InvalidArgument("Target category cannot be empty.")
        tasks = self._tasks(category)
        self._check_index(tasks, index)

        text = tasks.pop(index)
        dest = self._data.setdefault(target, [])
        dest.append(text)
        self.save()
        logger.info("Moved task %d from %s to %s", index, category, target)
        return len(dest) - 1

    def change(self, category: str, index: int, text: str) -> str:
        """Replace a task's text. Returns the previous text."""
        tasks = self._tasks(category)
        self._check_index(tasks, index)
        text = self._clean_text(text)
        old = tasks[index]
        tasks[index] = text
        self.save()
        return old

    def clear(self, category: str) -> int:
        tasks = self._tasks(category)
        n = len(tasks)
        tasks.clear()
        self.save()
        logger.info("Cleared category %s (%d task(s))", category, n)
        return n
