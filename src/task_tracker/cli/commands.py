# src/task_tracker/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.markup import PIN_BUTTON_CLASS
from ..core.state import AppState
from ..dom.document import Element
from ..render.page import render_page

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /find, /pin, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append('  (a line not starting with "/" is added as a task; an empty line shows the error banner)')
        return "\n".join(lines)


registry = CommandRegistry()


def _search(state: AppState) -> Element | None:
    return state.document.get_element_by_id("search")


def _find_pin_button(state: AppState, task_id: str) -> Element | None:
    for container_id in ("pinned-tasks", "all-tasks"):
        container = state.document.get_element_by_id(container_id)
        if container is None:
            continue
        for btn in container.find_by_class(PIN_BUTTON_CLASS):
            if btn.dataset.get("id") == task_id:
                return btn
    return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_find(state: AppState, args: list[str]) -> str:
    """
    /find <text>  -> type <text> into the search field (live filter, no Enter)
    """
    search = _search(state)
    if search is None:
        return "Search field is not available."
    state.document.type_text(search, " ".join(args))
    return ""


def cmd_clear(state: AppState, args: list[str]) -> str:
    search = _search(state)
    if search is None:
        return "Search field is not available."
    state.document.type_text(search, "")
    return ""


def cmd_pin(state: AppState, args: list[str]) -> str:
    """
    /pin <id>  -> click the pin button of a visible task (pins or unpins it)
    """
    if len(args) != 1 or not args[0].isdigit():
        return "Usage: /pin <id>"
    btn = _find_pin_button(state, args[0])
    if btn is None:
        return f"No visible task with id {args[0]}."
    logger.debug("Clicking pin button for task id=%s", args[0])
    btn.click()
    return ""


def cmd_tasks(state: AppState, args: list[str]) -> str:
    tasks = state.tracker.tasks
    if not tasks:
        return "No tasks yet."
    lines = [f"Tasks ({len(tasks)}):"]
    for t in tasks:
        lines.append(f"  #{t.id} {'pinned  ' if t.pinned else 'unpinned'} {t.text}")
    return "\n".join(lines)


def cmd_html(state: AppState, args: list[str]) -> str:
    return render_page(state.document, title=str(getattr(state.settings, "app_name", "Task tracker")))


def cmd_status(state: AppState, args: list[str]) -> str:
    s = state.settings
    return (
        "Status:\n"
        f"  Error banner hides after: {getattr(s, 'error_hide_ms', 2000)} ms\n"
        f"  Escape task text: {'ON' if getattr(s, 'escape_html', False) else 'OFF'}\n"
        f"  Task ids: {getattr(s, 'id_strategy', 'clock')}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("find", cmd_find, help_text="Filter tasks: /find <text> (types without Enter).")
registry.register("clear", cmd_clear, help_text="Clear the search field.")
registry.register("pin", cmd_pin, help_text="Pin or unpin a visible task: /pin <id>.")
registry.register("tasks", cmd_tasks, help_text="List every task with its id and pin state.")
registry.register("html", cmd_html, help_text="Print the current page as HTML.")
registry.register("status", cmd_status, help_text="Show current settings.")
