"""Breadcrumb navigation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .common import Alignment, Classes, Element


class BreadcrumbSize(Enum):
    """The three sizes available for a breadcrumb."""

    SMALL = "are-small"
    MEDIUM = "are-medium"
    LARGE = "are-large"

    def __str__(self) -> str:
        return self.value


class BreadcrumbSeparator(Enum):
    """The alternative separators for a breadcrumb."""

    ARROW = "has-arrow-separator"
    BULLET = "has-bullet-separator"
    DOT = "has-dot-separator"
    SUCCEEDS = "has-succeeds-separator"

    def __str__(self) -> str:
        return self.value


def breadcrumb(
    *args: Any,
    classes: Any = None,
    size: BreadcrumbSize | None = None,
    alignment: Alignment | None = None,
    separator: BreadcrumbSeparator | None = None,
) -> Element:
    """A breadcrumb trail whose children are list items."""
    class_list = Classes("breadcrumb", classes, size, alignment, separator)
    return Element(
        "nav",
        {"class": class_list, "aria-label": "breadcrumbs"},
        [Element("ul", {}, list(args))],
    )