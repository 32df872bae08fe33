"""Core building blocks: CSS class lists, element trees and shared modifiers."""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


class Alignment(Enum):
    """Common alignment classes."""

    LEFT = "is-left"
    CENTERED = "is-centered"
    RIGHT = "is-right"

    def __str__(self) -> str:
        return self.value


class Size(Enum):
    """Common size classes."""

    SMALL = "is-small"
    NORMAL = "is-normal"
    MEDIUM = "is-medium"
    LARGE = "is-large"

    def __str__(self) -> str:
        return self.value


def _class_names(values: Iterable[Any]) -> Iterator[str]:
    for value in values:
        if value is None or isinstance(value, bool):
            continue
        if isinstance(value, Classes):
            yield from value
        elif isinstance(value, Enum):
            yield from str(value.value).split()
        elif isinstance(value, str):
            yield from value.split()
        elif isinstance(value, Iterable):
            yield from _class_names(value)
        else:
            raise TypeError(f"cannot use {type(value).__name__} as a CSS class")


class Classes:
    """An ordered set of CSS class names without duplicates."""

    __slots__ = ("_names",)

    def __init__(self, *args: Any) -> None:
        self._names: dict[str, None] = {}
        self.push(*args)

    def push(self, *args: Any) -> None:
        """Append class names; strings are split on whitespace, None and booleans are ignored."""
        for name in _class_names(args):
            self._names.setdefault(name, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Classes):
            return set(self._names) == set(other._names)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return " ".join(self._names)

    def __repr__(self) -> str:
        return f"Classes({str(self)!r})"


def classes(*args: Any) -> Classes:
    """Build a class list from strings, enums, other class lists or iterables of them."""
    return Classes(*args)


Node = Union["Element", "Fragment", str, None]


def _flatten_nodes(nodes: Iterable[Any]) -> Iterator[Element | str]:
    for node in nodes:
        if node is None or isinstance(node, bool):
            continue
        if isinstance(node, Element):
            yield node
        elif isinstance(node, Fragment):
            yield from node.children
        elif isinstance(node, str):
            yield node
        elif isinstance(node, (int, float)):
            yield str(node)
        elif isinstance(node, Iterable):
            yield from _flatten_nodes(node)
        else:
            raise TypeError(f"cannot use {type(node).__name__} as a child node")


@dataclass
class Element:
    """An HTML element with attributes, children and event handlers."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)
    events: dict[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.attrs = dict(self.attrs)
        if "class" in self.attrs and not isinstance(self.attrs["class"], Classes):
            self.attrs["class"] = Classes(self.attrs["class"])
        self.children = list(_flatten_nodes(self.children))
        self.events = {name: handler for name, handler in self.events.items() if handler is not None}

    def render(self) -> str:
        """Serialise this element and its children to HTML."""
        parts = [f"<{self.tag}"]
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if isinstance(value, Classes):
                if not value:
                    continue
                value = str(value)
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
        parts.append(">")
        if self.tag in _VOID_TAGS:
            return "".join(parts)
        parts.extend(render(child) for child in self.children)
        parts.append(f"</{self.tag}>")
        return "".join(parts)

    def iter(self) -> Iterator[Element]:
        """Yield this element and all descendant elements, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find(self, class_name: str) -> Element | None:
        """Return the first element in the tree carrying the class, or None."""
        return next(iter(self.find_all(class_name)), None)

    def find_all(self, class_name: str) -> list[Element]:
        """Return every element in the tree carrying the class, in document order."""
        return [el for el in self.iter() if class_name in el.attrs.get("class", ())]

    def dispatch(self, event: str, payload: Any = None) -> Any:
        """Invoke the handler bound to the event; an unbound event does nothing."""
        handler = self.events.get(event)
        if handler is None:
            return None
        return handler(payload)


@dataclass
class Fragment:
    """A sequence of sibling nodes without a wrapping element."""

    children: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.children = list(_flatten_nodes(self.children))

    def render(self) -> str:
        """Serialise the nodes one after another."""
        return "".join(render(child) for child in self.children)


def render(node: Any) -> str:
    """Serialise any node, text or nested sequence of nodes to HTML."""
    if node is None or isinstance(node, bool):
        return ""
    if isinstance(node, (Element, Fragment)):
        return node.render()
    if isinstance(node, str):
        return html.escape(node, quote=False)
    if isinstance(node, (int, float)):
        return str(node)
    if isinstance(node, Iterable):
        return "".join(render(child) for child in node)
    raise TypeError(f"cannot render {type(node).__name__}")