# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..dom.document import Document
from .ports import TimerScheduler
from .tracker import TaskTracker


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace with the same attributes).
    settings: Any

    document: Document
    timers: TimerScheduler
    tracker: TaskTracker
