# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.core.models import TaskIdSource
from task_tracker.core.state import AppState
from task_tracker.core.tracker import TaskTracker
from task_tracker.dom.document import Document
from task_tracker.render.page import build_document

from .fakes import FakeTimerScheduler


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        error_hide_ms=2000,
        escape_html=False,
        id_strategy="counter",
    )


@pytest.fixture()
def timers() -> FakeTimerScheduler:
    return FakeTimerScheduler()


@pytest.fixture()
def document() -> Document:
    return build_document()


@pytest.fixture()
def tracker(document: Document, timers: FakeTimerScheduler) -> TaskTracker:
    """Tracker bound to a fresh page, with counter ids and virtual timers."""
    return TaskTracker.from_document(document, timers, id_source=TaskIdSource(strategy="counter"))


@pytest.fixture()
def state(settings: SimpleNamespace, timers: FakeTimerScheduler) -> AppState:
    return create_initial_state(settings=settings, timers=timers)
