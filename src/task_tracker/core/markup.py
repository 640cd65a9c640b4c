# src/task_tracker/core/markup.py

from __future__ import annotations

import html

from .models import Task

TASK_ITEM_CLASS = "task-item"
PIN_BUTTON_CLASS = "pin-btn"
PINNED_CLASS = "pinned"
TASK_ID_ATTR = "data-id"


def create_task_html(task: Task, *, escape: bool = False) -> str:
    """
    Render one task as a display fragment.

    Text goes in verbatim unless `escape` is set; the pin button carries the id
    in `data-id` and the `pinned` class only for pinned tasks.
    """
    text = html.escape(task.text) if escape else task.text
    pinned_class = PINNED_CLASS if task.pinned else ""
    return (
        f'\n            <div class="{TASK_ITEM_CLASS}">'
        f"\n                {text}"
        f'\n                <button class="{PIN_BUTTON_CLASS} {pinned_class}" '
        f'\n                        {TASK_ID_ATTR}="{task.id}"></button>'
        f"\n            </div>"
        f"\n        "
    )
