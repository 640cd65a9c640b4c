# src/task_tracker/render/page.py
from __future__ import annotations

import html

from ..core.markup import PIN_BUTTON_CLASS, PINNED_CLASS, TASK_ITEM_CLASS
from ..dom.document import Document, Element

ERROR_TEXT = "Task text cannot be empty"
NO_PINNED_TEXT = "No pinned tasks"
NO_TASKS_TEXT = "No tasks found"

PAGE_BODY = f"""<div class="task-tracker">
<input id="search" type="text" placeholder="Type a task and press Enter, or type to filter">
<div id="error" class="error" style="display: none">{ERROR_TEXT}</div>
<section class="pinned">
<h2>Pinned</h2>
<div id="pinned-tasks"></div>
<p id="no-pinned">{NO_PINNED_TEXT}</p>
</section>
<section class="all">
<h2>All tasks</h2>
<div id="all-tasks"></div>
<p id="no-tasks">{NO_TASKS_TEXT}</p>
</section>
</div>
"""

PAGE_CSS = r"""
body { font-family: system-ui, sans-serif; max-width: 40rem; margin: 2rem auto; }
#search { width: 100%; padding: .5rem; font-size: 1rem; }
.error { color: #b00020; margin: .5rem 0; }
.task-item { display: flex; justify-content: space-between; padding: .25rem 0; }
.pin-btn { width: 1.5rem; height: 1.5rem; border: 1px solid #888; border-radius: 50%; background: none; }
.pin-btn.pinned { background: #476EAE; }
"""

HTML_SHELL = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>__TITLE__</title>
<style>
__CSS_BLOCK__
</style>
</head>
<body>
__BODY_MARKUP__
</body>
</html>
"""


def build_document() -> Document:
    """Fresh host page containing the six tracker regions."""
    return Document.from_html(PAGE_BODY)


def render_page(document: Document, title: str = "Task tracker") -> str:
    """Snapshot of the current document as a standalone HTML page."""
    return (
        HTML_SHELL.replace("__TITLE__", html.escape(title))
        .replace("__CSS_BLOCK__", PAGE_CSS.strip())
        .replace("__BODY_MARKUP__", document.to_html())
    )


def _visible(el: Element | None) -> bool:
    return el is not None and el.style.display != "none"


def _task_lines(container: Element | None) -> list[str]:
    if container is None:
        return []
    lines = []
    for item in container.find_by_class(TASK_ITEM_CLASS):
        text = " ".join(item.text_content.split())
        buttons = item.find_by_class(PIN_BUTTON_CLASS)
        if buttons:
            btn = buttons[0]
            mark = "*" if btn.class_list.contains(PINNED_CLASS) else " "
            lines.append(f"  [{mark}] #{btn.dataset.get('id', '?')} {text}")
        else:
            lines.append(f"  {text}")
    return lines


def render_text(document: Document) -> str:
    """Plain-text view of what a browser would show for the tracker regions."""
    get = document.get_element_by_id
    search = get("search")
    out: list[str] = []

    filter_text = getattr(search, "value", "") if search is not None else ""
    if filter_text:
        out.append(f"Filter: {filter_text}")

    error = get("error")
    if _visible(error):
        out.append(f"! {' '.join(error.text_content.split())}")

    out.append("Pinned:")
    out.extend(_task_lines(get("pinned-tasks")))
    no_pinned = get("no-pinned")
    if _visible(no_pinned):
        out.append(f"  ({no_pinned.text_content.strip()})")

    out.append("Tasks:")
    out.extend(_task_lines(get("all-tasks")))
    no_tasks = get("no-tasks")
    if _visible(no_tasks):
        out.append(f"  ({no_tasks.text_content.strip()})")

    return "\n".join(out)
