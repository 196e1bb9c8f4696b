# tests/test_main.py

from __future__ import annotations

import json

from todolist.cli.main import main, parse_argv, run
from todolist.tasks.task_store import TaskStore


def test_parse_argv_defaults_to_list() -> None:
    inv = parse_argv([])
    assert inv.category is None
    assert inv.command == "list"
    assert inv.args == []


def test_parse_argv_category_selector() -> None:
    inv = parse_argv(["-work", "add", "fix", "bug"])
    assert inv.category == "work"
    assert inv.command == "add"
    assert inv.args == ["fix", "bug"]

    inv = parse_argv(["-work"])
    assert inv.category == "work"
    assert inv.command == "list"


def test_parse_argv_bare_dash_is_a_command() -> None:
    inv = parse_argv(["-"])
    assert inv.category is None
    assert inv.command == "-"


def test_run_add_then_list(settings, write_store, capsys) -> None:
    write_store({"misc": ["buy milk"]})

    assert run(["add", "call", "mom"], settings=settings) == 0
    capsys.readouterr()

    assert run([], settings=settings) == 0
    assert capsys.readouterr().out == "0) buy milk\n1) call mom\n"


def test_run_uses_selected_category(settings, capsys) -> None:
    assert run(["-work", "add", "fix bug"], settings=settings) == 0
    assert json.loads(settings.todo_file.read_text("utf-8")) == {"work": ["fix bug"]}
    capsys.readouterr()

    assert run(["-work"], settings=settings) == 0
    assert capsys.readouterr().out == "0) fix bug\n"


def test_run_errors_exit_1_and_print_to_stdout(settings, write_store, capsys) -> None:
    write_store({"misc": ["a"]})

    assert run(["frobnicate"], settings=settings) == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().out

    assert run(["add"], settings=settings) == 1
    assert "requires at least 1 argument" in capsys.readouterr().out

    assert run(["rm", "4"], settings=settings) == 1
    assert "out of range" in capsys.readouterr().out

    assert run(["up", "0"], settings=settings) == 1
    assert "already at the top" in capsys.readouterr().out

    assert run(["-nothing"], settings=settings) == 1
    assert "No such category: nothing" in capsys.readouterr().out


def test_run_malformed_file_is_fatal(settings, capsys) -> None:
    settings.todo_file.write_text("{broken", "utf-8")

    assert run(["add", "x"], settings=settings) == 1
    assert "Malformed todo file" in capsys.readouterr().out
    assert settings.todo_file.read_text("utf-8") == "{broken"


def test_run_removing_last_task_drops_category(settings, write_store, capsys) -> None:
    write_store({"misc": ["only"], "work": ["x"]})

    assert run(["ok", "0"], settings=settings) == 0
    capsys.readouterr()

    assert run(["cat"], settings=settings) == 0
    assert capsys.readouterr().out == "work\n"


def test_run_exchange_alias(settings, write_store, capsys) -> None:
    write_store({"misc": ["a", "b", "c"]})

    assert run(["ex", "0", "2"], settings=settings) == 0
    assert capsys.readouterr().out == "Exchanged 0 and 2.\n"
    assert json.loads(settings.todo_file.read_text("utf-8")) == {"misc": ["c", "b", "a"]}

    assert run(["ex", "0", "9"], settings=settings) == 1
    assert "out of range" in capsys.readouterr().out


def test_run_unexpected_error_exits_1(settings, monkeypatch, capsys) -> None:
    def boom(self, category, text):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(TaskStore, "add", boom)

    assert run(["add", "x"], settings=settings) == 1
    out = capsys.readouterr().out
    assert "Unexpected error while running 'add'" in out
    assert "disk on fire" not in out


def test_main_writes_log_file(settings, write_store, restore_logging, capsys) -> None:
    write_store({"misc": ["a"]})
    settings.file_log = True

    assert main([], settings=settings) == 0
    assert capsys.readouterr().out == "0) a\n"
    assert (settings.data_dir / "todo.log").exists()


def test_main_survives_unusable_log_dir(settings, tmp_path, restore_logging, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", "utf-8")
    settings.file_log = True
    settings.data_dir = blocker / "todo"

    assert main(["help"], settings=settings) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Usage: todo")
    assert "File logging disabled" in captured.err
