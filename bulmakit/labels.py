"""Images, tags and titles."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .common import Classes, Element, Size


class ImageSize(Enum):
    """Available placeholder sizes for figures."""

    IS_16X16 = "is-16x16"
    IS_24X24 = "is-24x24"
    IS_32X32 = "is-32x32"
    IS_48X48 = "is-48x48"
    IS_64X64 = "is-64x64"
    IS_96X96 = "is-96x96"
    IS_128X128 = "is-128x128"
    IS_SQUARE = "is-Square"
    IS_1BY1 = "is-1by1"
    IS_5BY4 = "is-5by4"
    IS_4BY3 = "is-4by3"
    IS_3BY2 = "is-3by2"
    IS_5BY3 = "is-5by3"
    IS_16BY9 = "is-16by9"
    IS_2BY1 = "is-2by1"
    IS_3BY1 = "is-3by1"
    IS_4BY5 = "is-4by5"
    IS_3BY4 = "is-3by4"
    IS_2BY3 = "is-2by3"
    IS_3BY5 = "is-3by5"
    IS_9BY16 = "is-9by16"
    IS_1BY2 = "is-1by2"
    IS_1BY3 = "is-1by3"

    def __str__(self) -> str:
        return self.value


class HeaderSize(Enum):
    """The six sizes available for titles and subtitles."""

    IS_1 = "is-1"
    IS_2 = "is-2"
    IS_3 = "is-3"
    IS_4 = "is-4"
    IS_5 = "is-5"
    IS_6 = "is-6"

    def __str__(self) -> str:
        return self.value


def image(*args: Any, classes: Any = None, size: ImageSize | None = None) -> Element:
    """A container for responsive images."""
    return Element("figure", {"class": Classes("image", classes, size)}, list(args))


def tag(
    *args: Any,
    classes: Any = None,
    tag: str = "span",
    onclick: Callable[[Any], Any] | None = None,
    rounded: bool = False,
    delete: bool = False,
    size: Size | None = None,
) -> Element:
    """A small tag label to insert anywhere."""
    class_list = Classes(
        "tag",
        classes,
        "is-rounded" if rounded else None,
        "is-delete" if delete else None,
        size,
    )
    return Element(tag, {"class": class_list}, list(args), {"click": onclick})


def tags(*args: Any, classes: Any = None, has_addons: bool = False) -> Element:
    """A container for a list of tags."""
    class_list = Classes("tags", classes, "has-addons" if has_addons else None)
    return Element("div", {"class": class_list}, list(args))


def title(
    *args: Any,
    classes: Any = None,
    tag: str = "h3",
    is_spaced: bool = False,
    size: HeaderSize | None = None,
) -> Element:
    """A simple heading."""
    class_list = Classes("title", classes, size, "is-spaced" if is_spaced else None)
    return Element(tag, {"class": class_list}, list(args))


def subtitle(
    *args: Any,
    classes: Any = None,
    tag: str = "h3",
    size: HeaderSize | None = None,
) -> Element:
    """A secondary heading."""
    return Element(tag, {"class": Classes("subtitle", classes, size)}, list(args))