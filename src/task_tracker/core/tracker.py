# src/task_tracker/core/tracker.py

"""
Task list controller.

Owns the in-memory task collection and keeps six page regions in sync with it:
- search: text input used both to add (Enter) and to filter (every keystroke)
- error: banner shown for empty submissions, auto-hidden after a delay
- pinned-tasks / all-tasks: containers regenerated after every mutation
- no-pinned / no-tasks: placeholders shown when the matching container is empty

Regions are injected (or resolved by id through `from_document`) so the
controller runs against any host document, including test doubles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any

from .markup import PIN_BUTTON_CLASS, create_task_html
from .models import Task, TaskIdSource
from .ports import Element, ElementLookup, Event, InputElement, TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)

DISPLAY_SHOWN = "block"
DISPLAY_HIDDEN = "none"


@dataclass(frozen=True, slots=True)
class RegionIds:
    search: str = "search"
    error: str = "error"
    pinned_tasks: str = "pinned-tasks"
    all_tasks: str = "all-tasks"
    no_pinned: str = "no-pinned"
    no_tasks: str = "no-tasks"


@dataclass(frozen=True, slots=True)
class TrackerRegions:
    """Handles to the six page regions; a missing region is None."""

    search: InputElement | None = None
    error: Element | None = None
    pinned_tasks: Element | None = None
    all_tasks: Element | None = None
    no_pinned: Element | None = None
    no_tasks: Element | None = None

    @classmethod
    def resolve(cls, lookup: ElementLookup, ids: RegionIds | None = None) -> TrackerRegions:
        ids = ids or RegionIds()
        found = {f.name: lookup.get_element_by_id(getattr(ids, f.name)) for f in fields(ids)}
        return cls(**found)

    def missing(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is None]


def _set_display(element: Element | None, visible: bool) -> None:
    if element is not None:
        element.style.display = DISPLAY_SHOWN if visible else DISPLAY_HIDDEN


class TaskTracker:
    def __init__(
        self,
        regions: TrackerRegions,
        timers: TimerScheduler,
        *,
        error_hide_delay: float = 2.0,
        id_source: TaskIdSource | None = None,
        escape_html: bool = False,
    ) -> None:
        self.tasks: list[Task] = []
        self.regions = regions
        self.error_hide_delay = error_hide_delay
        self.escape_html = escape_html

        self._timers = timers
        self._ids = id_source or TaskIdSource()
        self._pending_hide: TimerHandle | None = None

        missing = regions.missing()
        if missing:
            logger.warning("Task tracker regions not found: %s", ", ".join(missing))

        self._bind_events()
        self.filter_tasks()

    @classmethod
    def from_document(
        cls,
        document: ElementLookup,
        timers: TimerScheduler,
        *,
        region_ids: RegionIds | None = None,
        **kwargs: Any,
    ) -> TaskTracker:
        return cls(TrackerRegions.resolve(document, region_ids), timers, **kwargs)

    def _bind_events(self) -> None:
        r = self.regions
        if r.search is not None:
            r.search.add_event_listener("keypress", self.handle_add_task)
            r.search.add_event_listener("input", lambda _event: self.filter_tasks())
        for container in (r.pinned_tasks, r.all_tasks):
            if container is not None:
                container.add_event_listener("click", self.handle_pin)

    # -------------------- input field --------------------

    def _search_value(self) -> str:
        search = self.regions.search
        if search is None:
            return ""
        return search.value or ""

    def handle_add_task(self, event: Event) -> None:
        if getattr(event, "key", None) != "Enter":
            return

        text = self._search_value().strip()
        if not text:
            self.show_error()
            return

        self.add_task(text)
        if self.regions.search is not None:
            self.regions.search.value = ""
        self._hide_error()
        self.filter_tasks()

    def add_task(self, text: str) -> Task:
        """Append an unpinned task. Does not validate or render."""
        task = Task(id=self._ids.next_id(), text=text, pinned=False)
        self.tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return task

    # -------------------- error banner --------------------

    def show_error(self) -> None:
        """Show the banner now and hide it after `error_hide_delay` seconds."""
        self._cancel_pending_hide()
        _set_display(self.regions.error, True)
        self._pending_hide = self._timers.call_later(self.error_hide_delay, self._on_error_timeout)

    def _on_error_timeout(self) -> None:
        self._pending_hide = None
        _set_display(self.regions.error, False)

    def _hide_error(self) -> None:
        self._cancel_pending_hide()
        _set_display(self.regions.error, False)

    def _cancel_pending_hide(self) -> None:
        if self._pending_hide is not None:
            self._pending_hide.cancel()
            self._pending_hide = None

    @property
    def error_visible(self) -> bool:
        error = self.regions.error
        return error is not None and error.style.display == DISPLAY_SHOWN

    # -------------------- filtering / pinning --------------------

    def partition(self, filter_text: str) -> tuple[list[Task], list[Task]]:
        """
        Split tasks into (pinned, unpinned matching `filter_text`).

        Pinned tasks ignore the filter. Both lists keep insertion order.
        """
        needle = filter_text.lower()
        pinned = [t for t in self.tasks if t.pinned]
        matching = [t for t in self.tasks if not t.pinned and needle in t.text.lower()]
        return pinned, matching

    def filter_tasks(self) -> None:
        pinned, matching = self.partition(self._search_value())
        self.render_tasks(pinned, matching)

    def find_task(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def toggle_pin(self, task_id: int) -> bool:
        """Flip `pinned` on the task with `task_id` and re-render. False if no such task."""
        task = self.find_task(task_id)
        if task is None:
            logger.warning("Pin toggle ignored: no task with id=%s", task_id)
            return False
        task.pinned = not task.pinned
        logger.debug("Task id=%s pinned=%s", task.id, task.pinned)
        self.filter_tasks()
        return True

    def handle_pin(self, event: Event) -> None:
        target = getattr(event, "target", None)
        class_list = getattr(target, "class_list", None)
        if class_list is None or not class_list.contains(PIN_BUTTON_CLASS):
            return

        raw_id = (getattr(target, "dataset", None) or {}).get("id", "")
        try:
            task_id = int(str(raw_id).strip())
        except ValueError:
            logger.warning("Pin toggle ignored: bad task id %r", raw_id)
            return
        self.toggle_pin(task_id)

    # -------------------- rendering --------------------

    def render_tasks(self, pinned_tasks: list[Task], filtered_tasks: list[Task]) -> None:
        r = self.regions
        if r.pinned_tasks is not None:
            r.pinned_tasks.inner_html = "".join(self.create_task_html(t) for t in pinned_tasks)
        if r.all_tasks is not None:
            r.all_tasks.inner_html = "".join(self.create_task_html(t) for t in filtered_tasks)

        _set_display(r.no_pinned, not pinned_tasks)
        _set_display(r.no_tasks, not filtered_tasks)

    def create_task_html(self, task: Task) -> str:
        return create_task_html(task, escape=self.escape_html)
