# src/todolist/cli/commands.py

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.errors import InsufficientArguments, InvalidArgument, NoSuchCategory, UnknownCommand
from ..core.state import AppState
from ..tasks.task_models import write_tasks

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    usage: str = ""
    min_args: int = 0
    aliases: tuple[str, ...] = field(default_factory=tuple)


class CommandRegistry:
    """Closed table of CLI commands (list, add, rm, ...) with their aliases."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._lookup: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        usage: str = "",
        min_args: int = 0,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        cmd = Command(
            name=key,
            handler=handler,
            help_text=help_text,
            usage=usage,
            min_args=min_args,
            aliases=tuple(a.lower() for a in aliases),
        )
        self._commands[key] = cmd
        self._lookup[key] = cmd
        for alias in cmd.aliases:
            self._lookup[alias] = cmd

    def resolve(self, name: str) -> Command:
        cmd = self._lookup.get(name.lower())
        if cmd is None:
            raise UnknownCommand(name)
        return cmd

    def handle(self, state: AppState, name: str, args: list[str]) -> str:
        """
        Run command `name` with `args` against `state`.
        Returns the text to print (may be empty).
        """
        cmd = self.resolve(name)
        if len(args) < cmd.min_args:
            raise InsufficientArguments(cmd.name, cmd.min_args)

        logger.debug("Dispatch %s category=%s args=%s", cmd.name, state.category, args)
        return cmd.handler(state, args)

    def build_help(self, prog: str = "todo") -> str:
        lines = [
            f"Usage: {prog} [-category] [command [args...]]",
            "",
            "Commands:",
        ]
        for cmd in self._commands.values():
            head = f"{cmd.name} {cmd.usage}".rstrip()
            alias = f" (aliases: {', '.join(cmd.aliases)})" if cmd.aliases else ""
            lines.append(f"  {head:<28} {cmd.help_text}{alias}")
        return "\n".join(lines)


registry = CommandRegistry()


def _int_arg(raw: str, what: str = "index") -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"Invalid {what}: {raw!r} is not an integer.") from None


def _text_arg(args: list[str]) -> str:
    return " ".join(args)


def cmd_list(state: AppState, args: list[str]) -> str:
    store = state.task_store
    if not store.has_category(state.category):
        if getattr(state.settings, "lenient", False):
            return f"No tasks in '{state.category}'."
        raise NoSuchCategory(state.category)

    sink = io.StringIO()
    write_tasks(sink, store.list_tasks(state.category))
    return sink.getvalue().rstrip("\n")


def cmd_all(state: AppState, args: list[str]) -> str:
    return state.task_store.list_all() or "No categories."


def cmd_add(state: AppState, args: list[str]) -> str:
    index = state.task_store.add(state.category, _text_arg(args))
    return f"Added {index}) to {state.category}."


def cmd_remove(state: AppState, args: list[str]) -> str:
    ids = [_int_arg(a) for a in args]
    removed = state.task_store.remove(state.category, ids)
    return "\n".join(f"Removed: {text}" for text in removed)


def cmd_exchange(state: AppState, args: list[str]) -> str:
    i, j = _int_arg(args[0]), _int_arg(args[1])
    state.task_store.exchange(state.category, i, j)
    return f"Exchanged {i} and {j}."


def cmd_move(state: AppState, args: list[str]) -> str:
    index = _int_arg(args[0])
    target = args[1]
    new_index = state.task_store.move(state.category, index, target)
    state.category = target.strip()
    return f"Moved to {state.category} as {new_index})."


def cmd_change(state: AppState, args: list[str]) -> str:
    index = _int_arg(args[0])
    text = _text_arg(args[1:]).strip()
    old = state.task_store.change(state.category, index, text)
    return f"Changed {index}) {old} -> {text}"


def cmd_categories(state: AppState, args: list[str]) -> str:
    return "\n".join(state.task_store.categories())


def cmd_clear(state: AppState, args: list[str]) -> str:
    n = state.task_store.clear(state.category)
    return f"Cleared {state.category} ({n} task(s))."


def cmd_top(state: AppState, args: list[str]) -> str:
    return state.task_store.top(state.category) or ""


def _count_arg(args: list[str]) -> int:
    return _int_arg(args[1], "count") if len(args) > 1 else 1


def cmd_up(state: AppState, args: list[str]) -> str:
    pos = state.task_store.move_up(state.category, _int_arg(args[0]), _count_arg(args))
    return f"Moved to {pos})."


def cmd_down(state: AppState, args: list[str]) -> str:
    pos = state.task_store.move_down(state.category, _int_arg(args[0]), _count_arg(args))
    return f"Moved to {pos})."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help(str(getattr(state.settings, "app_name", "todo")))


registry.register("list", cmd_list, "List tasks of the category.", aliases=["show", "ls"])
registry.register("all", cmd_all, "List every category with its tasks.", aliases=["la"])
registry.register("add", cmd_add, "Append a task.", usage="<text...>", min_args=1, aliases=["a"])
registry.register(
    "remove",
    cmd_remove,
    "Remove tasks by index.",
    usage="<id> [id...]",
    min_args=1,
    aliases=["rm", "ok", "done"],
)
registry.register(
    "exchange", cmd_exchange, "Swap two tasks.", usage="<i> <j>", min_args=2, aliases=["ex", "swap"]
)
registry.register(
    "move",
    cmd_move,
    "Move a task to another category.",
    usage="<id> <category>",
    min_args=2,
    aliases=["mv"],
)
registry.register(
    "change", cmd_change, "Replace a task's text.", usage="<id> <text...>", min_args=2, aliases=["ch"]
)
registry.register("categories", cmd_categories, "List category names.", aliases=["cat", "cats"])
registry.register("clear", cmd_clear, "Delete every task of the category.")
registry.register("top", cmd_top, "Print the first task.")
registry.register("up", cmd_up, "Move a task up.", usage="<id> [count]", min_args=1)
registry.register("down", cmd_down, "Move a task down.", usage="<id> [count]", min_args=1)
registry.register("help", cmd_help, "Show available commands.", aliases=["h", "?"])
