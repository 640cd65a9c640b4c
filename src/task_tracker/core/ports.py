# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the controller.

The controller depends on Protocols instead of a concrete document or event loop.
Any host that can hand out elements with these few members can drive it: the
in-memory document in `task_tracker.dom`, a test double, or a bridge to a real page.
"""

from collections.abc import Callable
from typing import Any, Protocol

EventListener = Callable[[Any], None]


class Style(Protocol):
    display: str


class ClassList(Protocol):
    def contains(self, name: str) -> bool: ...


class Element(Protocol):
    """The element surface the controller touches."""

    style: Style
    inner_html: str

    def add_event_listener(self, event_type: str, listener: EventListener) -> None: ...


class InputElement(Element, Protocol):
    value: str


class EventTarget(Protocol):
    """What a bubbled click exposes as `event.target`."""

    class_list: ClassList
    dataset: dict[str, str]


class Event(Protocol):
    type: str
    key: str | None
    target: EventTarget | None


class ElementLookup(Protocol):
    def get_element_by_id(self, element_id: str) -> Any | None: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """One-shot deferred callbacks (`setTimeout` equivalent)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...
