"""Checkboxes, radio buttons and control wrappers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .common import Classes, Element


def checkbox(
    name: str,
    checked: bool,
    update: Callable[[bool], Any],
    *args: Any,
    classes: Any = None,
    disabled: bool = False,
) -> Element:
    """A controlled two-state checkbox; a click passes the toggled state to ``update``."""

    def on_click(_event: Any) -> Any:
        return update(not checked)

    box_input = Element(
        "input",
        {"type": "checkbox", "checked": checked, "name": name, "disabled": disabled},
        [],
        {"click": on_click},
    )
    return Element(
        "label",
        {"class": Classes("checkbox", classes), "disabled": disabled},
        [box_input, *args],
    )


def control(
    *args: Any,
    classes: Any = None,
    tag: str = "div",
    expanded: bool = False,
) -> Element:
    """A container wrapping form controls."""
    class_list = Classes("control", classes, "is-expanded" if expanded else None)
    return Element(tag, {"class": class_list}, list(args))


def radio(
    name: str,
    value: str,
    checked_value: str | None,
    update: Callable[[str], Any],
    *args: Any,
    classes: Any = None,
    disabled: bool = False,
) -> Element:
    """A controlled radio button; selecting it passes its own value to ``update``."""

    def on_input(_event: Any) -> Any:
        return update(value)

    radio_input = Element(
        "input",
        {
            "type": "radio",
            "name": name,
            "value": value,
            "checked": checked_value is not None and checked_value == value,
            "disabled": disabled,
        },
        [],
        {"input": on_input},
    )
    return Element(
        "label",
        {"class": Classes("radio", classes), "disabled": disabled},
        [radio_input, *args],
    )