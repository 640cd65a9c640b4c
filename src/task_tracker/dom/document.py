# src/task_tracker/dom/document.py

"""
A small in-memory document.

Just enough of a browser page to host the task tracker outside a browser:
elements with ids, classes, `data-*` attributes and a display style; an
`inner_html` setter that parses markup into child elements; event listeners
with bubbling from the target up through its ancestors.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Any

VOID_TAGS = frozenset({"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"})


@dataclass(slots=True)
class Event:
    type: str
    key: str | None = None
    target: Element | None = None
    current_target: Element | None = None
    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class Style:
    def __init__(self, display: str = "") -> None:
        self.display = display

    def to_css(self) -> str:
        return f"display: {self.display}" if self.display else ""


class ClassList:
    def __init__(self, names: str = "") -> None:
        self._names: list[str] = []
        for name in names.split():
            self.add(name)

    def add(self, name: str) -> None:
        if name not in self._names:
            self._names.append(name)

    def remove(self, name: str) -> None:
        if name in self._names:
            self._names.remove(name)

    def toggle(self, name: str) -> bool:
        if name in self._names:
            self._names.remove(name)
            return False
        self._names.append(name)
        return True

    def contains(self, name: str) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __str__(self) -> str:
        return " ".join(self._names)


class Element:
    def __init__(self, tag: str, attrs: dict[str, str] | None = None) -> None:
        attrs = dict(attrs or {})
        self.tag = tag.lower()
        self.id: str = attrs.pop("id", "")
        self.class_list = ClassList(attrs.pop("class", ""))
        self.style = Style(_display_from_css(attrs.pop("style", "")))
        self.dataset: dict[str, str] = {}
        self.attributes: dict[str, str] = {}
        for name, value in attrs.items():
            if name.startswith("data-"):
                self.dataset[name[5:]] = value
            else:
                self.attributes[name] = value

        self.parent: Element | None = None
        self.children: list[Element | str] = []
        self._listeners: dict[str, list[Callable[[Any], None]]] = {}

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.class_list)
        return f"<{self.tag}{ident}{classes}>"

    # ---- tree ----

    def append_child(self, node: Element | str) -> None:
        if isinstance(node, Element):
            node.parent = self
        self.children.append(node)

    def clear(self) -> None:
        for child in self.children:
            if isinstance(child, Element):
                child.parent = None
        self.children = []

    def iter_elements(self) -> Iterator[Element]:
        """Depth-first walk over descendant elements (self excluded)."""
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child.iter_elements()

    def find_by_class(self, name: str) -> list[Element]:
        return [el for el in self.iter_elements() if el.class_list.contains(name)]

    @property
    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child.text_content if isinstance(child, Element) else child)
        return "".join(parts)

    @property
    def inner_html(self) -> str:
        return "".join(_serialize(child) for child in self.children)

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        self.clear()
        for node in parse_fragment(markup):
            self.append_child(node)

    @property
    def outer_html(self) -> str:
        return _serialize(self)

    # ---- events ----

    def add_event_listener(self, event_type: str, listener: Callable[[Any], None]) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, event_type: str, listener: Callable[[Any], None]) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event: Event) -> None:
        """Run listeners on this element, then on each ancestor, until stopped."""
        if event.target is None:
            event.target = self
        node: Element | None = self
        while node is not None and not event.propagation_stopped:
            event.current_target = node
            for listener in list(node._listeners.get(event.type, [])):
                listener(event)
            node = node.parent
        event.current_target = None

    def click(self) -> None:
        self.dispatch_event(Event("click"))


class InputElement(Element):
    def __init__(self, tag: str = "input", attrs: dict[str, str] | None = None) -> None:
        attrs = dict(attrs or {})
        value = attrs.pop("value", "")
        super().__init__(tag, attrs)
        self.value: str = value


def create_element(tag: str, attrs: dict[str, str] | None = None) -> Element:
    if tag.lower() in ("input", "textarea"):
        return InputElement(tag, attrs)
    return Element(tag, attrs)


def _display_from_css(css: str) -> str:
    for decl in css.split(";"):
        name, _, value = decl.partition(":")
        if name.strip().lower() == "display":
            return value.strip()
    return ""


def _serialize(node: Element | str) -> str:
    if isinstance(node, str):
        return html.escape(node, quote=False)

    attrs: list[tuple[str, str]] = []
    if node.id:
        attrs.append(("id", node.id))
    if len(node.class_list):
        attrs.append(("class", str(node.class_list)))
    attrs.extend(node.attributes.items())
    if isinstance(node, InputElement) and node.value:
        attrs.append(("value", node.value))
    attrs.extend((f"data-{k}", v) for k, v in node.dataset.items())
    css = node.style.to_css()
    if css:
        attrs.append(("style", css))

    rendered = "".join(f' {k}="{html.escape(v)}"' for k, v in attrs)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{rendered}>"
    inner = "".join(_serialize(child) for child in node.children)
    return f"<{node.tag}{rendered}>{inner}</{node.tag}>"


class _FragmentParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = Element("#fragment")
        self._stack: list[Element] = [self.root]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        el = create_element(tag, {k: (v or "") for k, v in attrs})
        self._stack[-1].append_child(el)
        if el.tag not in VOID_TAGS:
            self._stack.append(el)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        el = create_element(tag, {k: (v or "") for k, v in attrs})
        self._stack[-1].append_child(el)

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        # Unmatched end tags are dropped, like a browser would.
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._stack[-1].append_child(data)


def parse_fragment(markup: str) -> list[Element | str]:
    parser = _FragmentParser()
    parser.feed(markup or "")
    parser.close()
    nodes = list(parser.root.children)
    parser.root.clear()
    return nodes


@dataclass
class Document:
    body: Element = field(default_factory=lambda: Element("body"))

    @classmethod
    def from_html(cls, markup: str) -> Document:
        doc = cls()
        doc.body.inner_html = markup
        return doc

    def get_element_by_id(self, element_id: str) -> Element | None:
        for el in self.body.iter_elements():
            if el.id == element_id:
                return el
        return None

    def to_html(self) -> str:
        return self.body.inner_html

    # ---- user input helpers ----

    def type_text(self, element: InputElement, text: str) -> None:
        """Replace the field contents and fire `input`, as typing would."""
        element.value = text
        element.dispatch_event(Event("input"))

    def press_key(self, element: Element, key: str) -> None:
        element.dispatch_event(Event("keypress", key=key))
