"""Responsive flexbox columns."""

from __future__ import annotations

from typing import Any

from .common import Classes, Element


def columns(
    *args: Any,
    classes: Any = None,
    vcentered: bool = False,
    multiline: bool = False,
    centered: bool = False,
) -> Element:
    """The container for a set of responsive columns."""
    class_list = Classes(
        "columns",
        classes,
        "is-vcentered" if vcentered else None,
        "is-multiline" if multiline else None,
        "is-centered" if centered else None,
    )
    return Element("div", {"class": class_list}, list(args))


def column(*args: Any, classes: Any = None) -> Element:
    """A flexbox-based responsive column."""
    return Element("div", {"class": Classes("column", classes)}, list(args))