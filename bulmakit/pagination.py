"""Pagination navigation."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .common import Alignment, Classes, Element, Size


class PaginationItemType(Enum):
    """A pagination item type."""

    LINK = "pagination-link"
    NEXT = "pagination-next"
    PREVIOUS = "pagination-previous"

    def __str__(self) -> str:
        return self.value


def pagination(
    previous: Any,
    next: Any,
    *args: Any,
    classes: Any = None,
    size: Size | None = None,
    alignment: Alignment | None = None,
    rounded: bool = False,
) -> Element:
    """A responsive pagination component."""
    class_list = Classes("pagination", classes, size, alignment, "is-rounded" if rounded else None)
    return Element(
        "nav",
        {"class": class_list, "role": "navigation", "aria-label": "pagination"},
        [previous, next, Element("ul", {"class": "pagination-list"}, list(args))],
    )


def pagination_item(
    item_type: PaginationItemType,
    *args: Any,
    label: str = "",
    onclick: Callable[[Any], Any] | None = None,
) -> Element:
    """A link to a page number, the previous page or the next page."""
    return Element(
        "a",
        {"class": item_type.value, "aria-label": label},
        list(args),
        {"click": onclick},
    )


def pagination_ellipsis() -> Element:
    """A horizontal ellipsis separating page ranges."""
    return Element("span", {"class": "pagination-ellipsis"}, ["&hellip;"])