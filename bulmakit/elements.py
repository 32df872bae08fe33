"""Basic Bulma elements: blocks, boxes, content, delete, icons, notifications, progress and tables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .common import Alignment, Classes, Element, Size


def _format_number(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def block(*args: Any, classes: Any = None) -> Element:
    """The most basic spacer block."""
    return Element("div", {"class": Classes("block", classes)}, list(args))


def box(*args: Any, classes: Any = None) -> Element:
    """A white box to contain other elements."""
    return Element("div", {"class": Classes("box", classes)}, list(args))


def content(*args: Any, classes: Any = None, tag: str = "div") -> Element:
    """A wrapper for generated content where only HTML tags are available."""
    return Element(tag, {"class": Classes("content", classes)}, list(args))


def delete(
    *args: Any,
    classes: Any = None,
    tag: str = "button",
    onclick: Callable[[Any], Any] | None = None,
) -> Element:
    """A versatile delete cross."""
    return Element(tag, {"class": Classes("delete", classes)}, list(args), {"click": onclick})


def icon(
    *args: Any,
    classes: Any = None,
    onclick: Callable[[Any], Any] | None = None,
    size: Size | None = None,
    alignment: Alignment | None = None,
) -> Element:
    """A container for any type of icon font."""
    class_list = Classes("icon", classes, size, alignment)
    return Element("span", {"class": class_list}, list(args), {"click": onclick})


def notification(*args: Any, classes: Any = None) -> Element:
    """Bold notification blocks, to alert users of something."""
    return Element("div", {"class": Classes("notification", classes)}, list(args))


def progress(classes: Any = None, max: float = 1.0, value: float = 0.0) -> Element:
    """A native HTML progress bar."""
    max_text = _format_number(max)
    value_text = _format_number(value)
    return Element(
        "progress",
        {"class": Classes("progress", classes), "max": max_text, "value": value_text},
        [f"{value_text}%"],
    )


def table(
    *args: Any,
    classes: Any = None,
    bordered: bool = False,
    striped: bool = False,
    narrow: bool = False,
    hoverable: bool = False,
    fullwidth: bool = False,
    scrollable: bool = False,
) -> Element:
    """An HTML table; a scrollable table is wrapped in a table container."""
    class_list = Classes(
        "table",
        classes,
        "is-bordered" if bordered else None,
        "is-striped" if striped else None,
        "is-narrow" if narrow else None,
        "is-hoverable" if hoverable else None,
        "is-fullwidth" if fullwidth else None,
    )
    table_el = Element("table", {"class": class_list}, list(args))
    if scrollable:
        return Element("div", {"class": "table-container"}, [table_el])
    return table_el