# tests/test_console_connector.py

from __future__ import annotations

import threading

import pytest

from task_tracker.cli import commands
from task_tracker.connectors.console_connector import handle_line, run_console_loop, submit_line
from task_tracker.core.state import AppState


def test_plain_line_adds_a_task(state: AppState) -> None:
    assert handle_line(state, "Buy milk") is None
    assert [t.text for t in state.tracker.tasks] == ["Buy milk"]
    assert state.document.get_element_by_id("search").value == ""


def test_empty_line_shows_error(state: AppState, timers) -> None:
    submit_line(state, "")
    assert state.tracker.tasks == []
    assert state.tracker.error_visible is True

    timers.advance(2.0)
    assert state.tracker.error_visible is False


def test_only_a_leading_slash_makes_a_command(state: AppState) -> None:
    assert handle_line(state, "  /usr/bin is a path") is None
    assert [t.text for t in state.tracker.tasks] == ["/usr/bin is a path"]


def test_slash_lines_go_to_commands(state: AppState) -> None:
    reply = handle_line(state, "/tasks")
    assert reply == "No tasks yet."
    assert state.tracker.tasks == []


def test_crashing_command_is_reported(state: AppState, monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "boom", boom)

    assert handle_line(state, "/boom") == "Internal error while handling a command."
    assert "Command handler crashed" in caplog.text


@pytest.mark.asyncio
async def test_console_loop_runs_scripted_session(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    lines = iter(["Buy milk", "Buy eggs", "/pin 2", "/find milk", "/exit", "never read"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    await run_console_loop(state)

    tasks = state.tracker.tasks
    assert [t.text for t in tasks] == ["Buy milk", "Buy eggs"]
    assert [t.pinned for t in tasks] == [False, True]

    out = capsys.readouterr().out
    assert "[*] #2 Buy eggs" in out
    assert "Filter: milk" in out


@pytest.mark.asyncio
async def test_console_loop_stops_on_eof(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)

    await run_console_loop(state)

    assert state.tracker.tasks == []


def _reader_threads() -> list[threading.Thread]:
    return [t for t in threading.enumerate() if t.name == "console-input" and t.is_alive()]


@pytest.mark.asyncio
@pytest.mark.parametrize("exit_line", ["/exit", "/quit"])
async def test_console_reader_is_stopped_after_exit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, exit_line: str
) -> None:
    lines = iter(["a", exit_line])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    await run_console_loop(state)

    assert [t.text for t in state.tracker.tasks] == ["a"]
    assert _reader_threads() == []


@pytest.mark.asyncio
async def test_console_reader_is_stopped_after_eof(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)

    await run_console_loop(state)

    assert _reader_threads() == []
