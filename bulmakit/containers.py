"""Cards, menus and messages."""

from __future__ import annotations

from typing import Any

from .common import Classes, Element


def card(*args: Any, classes: Any = None) -> Element:
    """A flexible, composable card container."""
    return Element("div", {"class": Classes("card", classes)}, list(args))


def card_header(*args: Any, classes: Any = None) -> Element:
    """A container for card header content."""
    return Element("header", {"class": Classes("card-header", classes)}, list(args))


def card_image(*args: Any, classes: Any = None) -> Element:
    """A fullwidth container for a responsive image."""
    return Element("div", {"class": Classes("card-image", classes)}, list(args))


def card_content(*args: Any, classes: Any = None) -> Element:
    """A container for the body of a card."""
    return Element("div", {"class": Classes("card-content", classes)}, list(args))


def card_footer(*args: Any, classes: Any = None) -> Element:
    """A container for card footer controls."""
    return Element("footer", {"class": Classes("card-footer", classes)}, list(args))


def menu(*args: Any, classes: Any = None) -> Element:
    """A simple menu for vertical navigation."""
    return Element("aside", {"class": Classes("menu", classes)}, list(args))


def menu_list(*args: Any, classes: Any = None) -> Element:
    """A container for menu list items."""
    return Element("ul", {"class": Classes("menu-list", classes)}, list(args))


def menu_label(text: str = "", classes: Any = None) -> Element:
    """A label for a section of the menu."""
    return Element("p", {"class": Classes("menu-label", classes)}, [text])


def message(*args: Any, classes: Any = None) -> Element:
    """A coloured message block."""
    return Element("article", {"class": Classes("message", classes)}, list(args))


def message_header(*args: Any, classes: Any = None) -> Element:
    """An optional message header holding a title and a delete element."""
    return Element("div", {"class": Classes("message-header", classes)}, list(args))


def message_body(*args: Any, classes: Any = None) -> Element:
    """A container for the body of a message."""
    return Element("div", {"class": Classes("message-body", classes)}, list(args))