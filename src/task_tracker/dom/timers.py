# src/task_tracker/dom/timers.py

from __future__ import annotations

"""
Deferred callbacks on the asyncio event loop.

Callbacks run on the loop thread, the same thread that handles input, so the
task collection is never touched from two threads at once.
"""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class AsyncioTimerScheduler:
    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._get_loop().call_later(max(0.0, delay), self._guarded, callback)

    @staticmethod
    def _guarded(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:
            logger.exception("Timer callback failed.")
