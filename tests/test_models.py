# tests/test_models.py

from __future__ import annotations

import pytest

from task_tracker.core.models import Task, TaskIdSource

from .fakes import ScriptedClock


def test_task_defaults_to_unpinned() -> None:
    assert Task(id=1, text="x").pinned is False


def test_counter_strategy_counts_from_one() -> None:
    ids = TaskIdSource(strategy="counter")
    assert [ids.next_id() for _ in range(3)] == [1, 2, 3]


def test_clock_strategy_uses_clock_and_never_repeats() -> None:
    ids = TaskIdSource(clock=ScriptedClock([500, 500, 499, 900]))
    assert [ids.next_id() for _ in range(4)] == [500, 501, 502, 900]


def test_default_clock_is_milliseconds() -> None:
    first = TaskIdSource().next_id()
    # Sanity: after 2001-09-09 in ms, well past any seconds-based value.
    assert first > 1_000_000_000_000


def test_unknown_strategy_rejected() -> None:
    with pytest.raises(ValueError):
        TaskIdSource(strategy="uuid")
