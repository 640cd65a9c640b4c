# src/task_tracker/core/models.py

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """A single to-do entry. Only `pinned` changes after creation."""

    id: int
    text: str
    pinned: bool = False


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskIdSource:
    """
    Issues task ids that are unique and increasing within one session.

    Strategies:
    - "clock": wall-clock milliseconds; if the clock has not moved past the
      previous id (fast typing, clock adjustments) the previous id + 1 is used.
    - "counter": 1, 2, 3, ...
    """

    def __init__(self, clock: Callable[[], int] | None = None, strategy: str = "clock") -> None:
        if strategy not in ("clock", "counter"):
            raise ValueError(f"Unknown task id strategy: {strategy!r}")
        self._clock = clock or _wall_clock_ms
        self._strategy = strategy
        self._last: int | None = None

    @property
    def strategy(self) -> str:
        return self._strategy

    def next_id(self) -> int:
        if self._strategy == "counter":
            candidate = 1 if self._last is None else self._last + 1
        else:
            candidate = int(self._clock())
            if self._last is not None and candidate <= self._last:
                candidate = self._last + 1
        self._last = candidate
        return candidate
