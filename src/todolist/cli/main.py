# src/todolist/cli/main.py

"""
CLI entrypoint: `todo [-category] [command [args...]]`.

Runs exactly one command per invocation:
- initializes logging,
- loads the store (a malformed file is fatal),
- dispatches the command and prints its output to stdout.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..core.errors import TodoError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "list"


@dataclass(frozen=True, slots=True)
class Invocation:
    category: str | None
    command: str
    args: list[str]


def parse_argv(argv: Sequence[str]) -> Invocation:
    """
    Split argv into (category selector, command, args).

    "-work add x" -> category "work"; a bare "-" is not a selector.
    With no command the active category is listed.
    """
    rest = list(argv)
    category: str | None = None

    if rest and rest[0].startswith("-") and len(rest[0]) > 1:
        category = rest.pop(0)[1:]

    if not rest:
        return Invocation(category=category, command=DEFAULT_COMMAND, args=[])

    return Invocation(category=category, command=rest[0], args=rest[1:])


def run(argv: Sequence[str], *, settings=None) -> int:
    """Execute one invocation. Returns the process exit code."""
    if settings is None:
        settings = get_settings()

    inv = parse_argv(argv)
    try:
        state = create_initial_state(settings=settings, category=inv.category)
        output = command_registry.handle(state, inv.command, inv.args)
    except TodoError as e:
        logger.debug("Command failed: %s", e)
        print(e)
        return 1
    except Exception:
        logger.exception("Unexpected error while running %s", inv.command)
        print(f"Unexpected error while running '{inv.command}'; see the log for details.")
        return 1

    if output:
        print(output)
    return 0


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if settings.file_log else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        setup_logging(log_dir=None, console_level=console_level)
        logger.warning("File logging disabled, cannot use %s: %s", log_dir, e)

    if argv is None:
        argv = sys.argv[1:]
    return run(argv, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
