# src/todolist/core/errors.py

"""
User-facing errors.

Every error carries a one-line message that the CLI prints verbatim
before exiting with status 1.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for all errors reported to the user."""


class MalformedStore(TodoError):
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Malformed todo file {path}: {reason}")
        self.path = path
        self.reason = reason


class UnknownCommand(TodoError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}. Use 'help' to list available commands.")
        self.name = name


class InsufficientArguments(TodoError):
    def __init__(self, command: str, required: int) -> None:
        plural = "argument" if required == 1 else "arguments"
        super().__init__(f"Command '{command}' requires at least {required} {plural}.")
        self.command = command
        self.required = required


class NoSuchCategory(TodoError):
    def __init__(self, category: str) -> None:
        super().__init__(f"No such category: {category}")
        self.category = category


class IndexOutOfRange(TodoError):
    def __init__(self, index: int, length: int) -> None:
        if length:
            msg = f"Index {index} out of range (valid: 0..{length - 1})."
        else:
            msg = f"Index {index} out of range (category is empty)."
        super().__init__(msg)
        self.index = index
        self.length = length


class AlreadyAtTop(TodoError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Task {index} is already at the top.")
        self.index = index


class AlreadyAtBottom(TodoError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Task {index} is already at the bottom.")
        self.index = index


class EmptyTaskText(TodoError):
    def __init__(self) -> None:
        super().__init__("Task text cannot be empty.")


class InvalidArgument(TodoError):
    """Argument that could not be parsed or is outside its allowed domain."""
