"""Buttons, button groups and inputs styled as buttons."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .common import Classes, Element


class ButtonGroupSize(Enum):
    """The three sizes available for a button group."""

    SMALL = "are-small"
    MEDIUM = "are-medium"
    LARGE = "are-large"

    def __str__(self) -> str:
        return self.value


def _button_classes(extra: Any, loading: bool, static: bool) -> Classes:
    return Classes(
        "button",
        extra,
        "is-loading" if loading else None,
        "is-static" if static else None,
    )


def buttons(*args: Any, classes: Any = None, size: ButtonGroupSize | None = None) -> Element:
    """A container for a group of buttons."""
    return Element("div", {"class": Classes("buttons", classes, size)}, list(args))


def button(
    *args: Any,
    classes: Any = None,
    onclick: Callable[[Any], Any] | None = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
) -> Element:
    """A button element."""
    return Element(
        "button",
        {"class": _button_classes(classes, loading, static), "disabled": disabled},
        list(args),
        {"click": onclick},
    )


def button_anchor(
    *args: Any,
    classes: Any = None,
    href: str = "",
    onclick: Callable[[Any], Any] | None = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
    rel: str | None = None,
    target: str | None = None,
) -> Element:
    """An anchor element styled as a button."""
    attrs = {
        "class": _button_classes(classes, loading, static),
        "href": href,
        "rel": rel or "",
        "target": target or "",
        "disabled": disabled,
    }
    return Element("a", attrs, list(args), {"click": onclick})


def button_input_submit(
    classes: Any = None,
    onsubmit: Callable[[Any], Any] | None = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
) -> Element:
    """An input element with type "submit" styled as a button."""
    attrs = {
        "type": "submit",
        "class": _button_classes(classes, loading, static),
        "disabled": disabled,
    }
    return Element("input", attrs, [], {"submit": onsubmit})


def button_input_reset(
    classes: Any = None,
    onreset: Callable[[Any], Any] | None = None,
    loading: bool = False,
    static: bool = False,
    disabled: bool = False,
) -> Element:
    """An input element with type "reset" styled as a button."""
    attrs = {
        "type": "reset",
        "class": _button_classes(classes, loading, static),
        "disabled": disabled,
    }
    return Element("input", attrs, [], {"reset": onreset})