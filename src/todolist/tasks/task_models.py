# src/todolist/tasks/task_models.py

from __future__ import annotations

import io
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TextIO

CategoryMap = dict[str, list[str]]


@dataclass(frozen=True, slots=True)
class IndexedTask:
    index: int
    text: str

    def render(self) -> str:
        return f"{self.index}) {self.text}"


def enumerate_tasks(tasks: Sequence[str]) -> list[IndexedTask]:
    return [IndexedTask(index=i, text=t) for i, t in enumerate(tasks)]


def write_tasks(sink: TextIO, tasks: Iterable[IndexedTask], *, indent: str = "") -> None:
    for item in tasks:
        sink.write(f"{indent}{item.render()}\n")


def render_all(store: Mapping[str, Sequence[str]], sink: io.StringIO | None = None) -> str:
    """
    Render every category (sorted by name) with its indexed tasks.

    Output goes into `sink` (a fresh StringIO when omitted); the text written
    by this call is returned without the trailing newline.
    """
    out = sink if sink is not None else io.StringIO()
    start = out.tell()

    for name in sorted(store):
        out.write(f"{name}:\n")
        write_tasks(out, enumerate_tasks(store[name]), indent="  ")

    return out.getvalue()[start:].rstrip("\n")
