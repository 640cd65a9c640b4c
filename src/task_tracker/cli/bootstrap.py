# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the host page and the timer scheduler,
- wires the tracker onto the page regions.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.models import TaskIdSource
from ..core.ports import TimerScheduler
from ..core.state import AppState
from ..core.tracker import TaskTracker
from ..dom.timers import AsyncioTimerScheduler
from ..render.page import build_document

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, timers: TimerScheduler | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and timers are injectable for tests; defaults are get_settings()
    and an asyncio scheduler bound lazily to the running loop.
    """
    if settings is None:
        settings = get_settings()
    if timers is None:
        timers = AsyncioTimerScheduler()

    document = build_document()
    tracker = TaskTracker.from_document(
        document,
        timers,
        error_hide_delay=settings.error_hide_ms / 1000.0,
        id_source=TaskIdSource(strategy=settings.id_strategy),
        escape_html=settings.escape_html,
    )
    logger.debug(
        "Tracker ready (error_hide_ms=%s escape_html=%s id_strategy=%s)",
        settings.error_hide_ms,
        settings.escape_html,
        settings.id_strategy,
    )
    return AppState(settings=settings, document=document, timers=timers, tracker=tracker)
