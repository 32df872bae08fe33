"""Form field containers with labels and help text."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .common import Classes, Element, Fragment


class AddonsAlign(Enum):
    """The alignment options for field addons."""

    CENTERED = "has-addons-centered"
    RIGHT = "has-addons-right"

    def __str__(self) -> str:
        return self.value


class GroupedAlign(Enum):
    """The alignment options for grouped field controls."""

    CENTERED = "is-grouped-centered"
    RIGHT = "is-grouped-right"

    def __str__(self) -> str:
        return self.value


class LabelSize(Enum):
    """The sizes available for horizontal field labels."""

    SMALL = "is-small"
    MEDIUM = "is-medium"
    LARGE = "is-large"

    def __str__(self) -> str:
        return self.value


def _label(text: str, extra: Classes, horizontal: bool) -> Element:
    if not extra:
        inner = Element("label", {"class": "label"}, [text])
        if horizontal:
            return Element("div", {"class": "field-label"}, [inner])
        return inner
    if horizontal:
        return Element(
            "div",
            {"class": Classes(extra, "field-label")},
            [Element("label", {"class": "label"}, [text])],
        )
    return Element("label", {"class": Classes(extra, "label")}, [text])


def field(
    *args: Any,
    classes: Any = None,
    label: str | None = None,
    label_classes: Any = None,
    help: str | None = None,
    help_classes: Any = None,
    help_has_error: bool = False,
    icons_left: bool = False,
    icons_right: bool = False,
    addons: bool = False,
    addons_align: AddonsAlign | None = None,
    grouped: bool = False,
    grouped_align: GroupedAlign | None = None,
    multiline: bool = False,
    horizontal: bool = False,
) -> Element:
    """A container for form controls with an optional label and help message."""
    class_list = Classes(
        "field",
        classes,
        "has-icons-left" if icons_left else None,
        "has-icons-right" if icons_right else None,
        "has-addons" if addons else None,
        "is-grouped" if grouped else None,
        "is-multiline" if multiline else None,
        addons_align,
        grouped_align,
    )

    label_el = None if label is None else _label(label, Classes(label_classes), horizontal)

    help_el = None
    if help is not None:
        help_class = Classes("help", help_classes, "is-danger" if help_has_error else None)
        help_el = Element("label", {"class": help_class}, [help])

    if horizontal:
        body: Any = Element("div", {"class": "field-body"}, list(args))
    else:
        body = Fragment(list(args))

    return Element("div", {"class": class_list}, [label_el, body, help_el])