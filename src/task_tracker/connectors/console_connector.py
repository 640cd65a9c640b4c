# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..render.page import render_text

logger = logging.getLogger(__name__)

PROMPT = "> "
READER_JOIN_TIMEOUT = 1.0


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def submit_line(state: AppState, line: str) -> None:
    """Type `line` into the search field and press Enter."""
    search = state.document.get_element_by_id("search")
    if search is None:
        logger.warning("No search field; input ignored.")
        return
    state.document.type_text(search, line)
    state.document.press_key(search, "Enter")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one console line against the page.

    Only a line whose first character is "/" is a command; anything else,
    leading spaces included, is typed into the search field.

    Returns text to print before the page view, or None.
    """
    if line.startswith("/"):
        try:
            return command_registry.handle(state, line.rstrip(), emit=_print_ts)
        except Exception:
            logger.exception("Command handler crashed.")
            return "Internal error while handling a command."

    submit_line(state, line)
    return None


def _start_stdin_reader(
    loop: asyncio.AbstractEventLoop,
    queue: asyncio.Queue[str | None],
    ready: threading.Event,
    stop: threading.Event,
) -> threading.Thread:
    """
    Read lines in a daemon thread and hand them to the loop.

    The reader waits for `ready` before each prompt so the page view is printed
    first, and returns once `stop` is set. None marks end of input.
    """

    def _reader() -> None:
        while True:
            ready.wait()
            ready.clear()
            if stop.is_set():
                return
            try:
                line: str | None = input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                line = None
            loop.call_soon_threadsafe(queue.put_nowait, line)
            if line is None:
                return

    thread = threading.Thread(target=_reader, name="console-input", daemon=True)
    thread.start()
    return thread


def _stop_stdin_reader(thread: threading.Thread, ready: threading.Event, stop: threading.Event) -> None:
    stop.set()
    ready.set()
    # A reader still blocked in input() cannot be interrupted; it is a daemon.
    thread.join(timeout=READER_JOIN_TIMEOUT)
    if thread.is_alive():
        logger.debug("Console reader still waiting for input; leaving it to exit with the process.")


async def run_console_loop(state: AppState) -> None:
    """
    Console front-end: the terminal acts as keyboard and mouse for the page.

    Input is read in a daemon thread that is stopped and joined when the loop
    ends; widget code and timers both run on the event loop thread.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[str | None] = asyncio.Queue()
    ready = threading.Event()
    stop = threading.Event()
    reader = _start_stdin_reader(loop, queue, ready, stop)

    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task and press Enter. Use /help for commands. Use /exit to quit.\n")
    print(render_text(state.document))

    try:
        while True:
            ready.set()
            user_input = await queue.get()
            if user_input is None:
                logger.info("Console input closed, exiting.")
                break

            if user_input.rstrip().lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            reply = handle_line(state, user_input)
            if reply:
                print(reply)
            print(render_text(state.document))
    finally:
        _stop_stdin_reader(reader, ready, stop)

    logger.info("Console connector finished.")
