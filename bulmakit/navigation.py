"""Dropdowns, navbars, panels and tabs."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any

from .buttons import button
from .common import Alignment, Classes, Element, Fragment, Size

_OVERLAY_STYLE = (
    "z-index:10;background-color:rgba(0,0,0,0);position:fixed;top:0;bottom:0;left:0;right:0;"
)


class DropdownMsg(Enum):
    """Dropdown actions."""

    OPEN = auto()
    CLOSE = auto()


class NavbarMsg(Enum):
    """The message type used by the navbar."""

    TOGGLE_MENU = auto()


class NavbarFixed(Enum):
    """The two fixed positions available for a navbar."""

    TOP = "is-fixed-top"
    BOTTOM = "is-fixed-bottom"

    def __str__(self) -> str:
        return self.value


class NavbarItemTag(Enum):
    """The two HTML tags allowed for a navbar item."""

    A = "a"
    DIV = "div"

    def __str__(self) -> str:
        return self.value


def _overlay(on_close: Callable[[Any], Any]) -> Element:
    return Element("div", {"style": _OVERLAY_STYLE}, [], {"click": on_close})


class Dropdown:
    """An interactive dropdown menu for discoverable content."""

    def __init__(
        self,
        *children: Any,
        classes: Any = None,
        hoverable: bool = False,
        button_classes: Any = None,
        button_html: Any = None,
    ) -> None:
        self.children = list(children)
        self.classes = Classes(classes)
        self.hoverable = hoverable
        self.button_classes = Classes(button_classes)
        self.button_html = button_html
        self.is_menu_active = False

    def update(self, msg: DropdownMsg) -> bool:
        """Apply a message; a hoverable dropdown ignores messages and returns False."""
        if self.hoverable:
            return False
        self.is_menu_active = msg is DropdownMsg.OPEN
        return True

    def view(self) -> Element:
        """Render the current state of the dropdown."""
        class_list = Classes("dropdown", self.classes)
        if self.hoverable:
            class_list.push("is-hoverable")
            on_open = None
        else:
            def on_open(_event: Any) -> bool:
                return self.update(DropdownMsg.OPEN)
        overlay = None
        if self.is_menu_active:
            class_list.push("is-active")
            overlay = _overlay(lambda _event: self.update(DropdownMsg.CLOSE))
        trigger = Element(
            "div",
            {"class": "dropdown-trigger"},
            [button(self.button_html, classes=self.button_classes, onclick=on_open)],
        )
        menu = Element(
            "div",
            {"class": "dropdown-menu", "role": "menu"},
            [Element("div", {"class": "dropdown-content"}, self.children)],
        )
        return Element("div", {"class": class_list}, [overlay, trigger, menu])


class Navbar:
    """A responsive horizontal navbar with brand, start and end sections."""

    def __init__(
        self,
        *children: Any,
        classes: Any = None,
        fixed: NavbarFixed | None = None,
        transparent: bool = False,
        spaced: bool = False,
        padded: bool = False,
        navbrand: Any = None,
        navstart: Any = None,
        navend: Any = None,
        navburger: bool = True,
        navburger_classes: Any = None,
    ) -> None:
        self.children = list(children)
        self.classes = Classes(classes)
        self.fixed = fixed
        self.transparent = transparent
        self.spaced = spaced
        self.padded = padded
        self.navbrand = navbrand
        self.navstart = navstart
        self.navend = navend
        self.navburger = navburger
        self.navburger_classes = Classes(navburger_classes)
        self.is_menu_open = False

    def update(self, msg: NavbarMsg) -> bool:
        """Apply a message; toggling flips the mobile menu."""
        if msg is NavbarMsg.TOGGLE_MENU:
            self.is_menu_open = not self.is_menu_open
        return True

    def _toggle(self, _event: Any) -> bool:
        return self.update(NavbarMsg.TOGGLE_MENU)

    def view(self) -> Element:
        """Render the current state of the navbar."""
        class_list = Classes("navbar", self.classes, self.fixed)
        nav_classes = Classes("navbar-menu")
        burger_classes = Classes("navbar-burger", self.navburger_classes)
        if self.is_menu_open:
            nav_classes.push("is-active")
            burger_classes.push("is-active")

        brand = None
        if self.navbrand is not None:
            burger = None
            if self.navburger:
                burger = Element(
                    "a",
                    {
                        "class": burger_classes,
                        "role": "button",
                        "aria-label": "menu",
                        "aria-expanded": "true" if self.is_menu_open else "false",
                    },
                    [Element("span", {"aria-hidden": "true"}) for _ in range(3)],
                    {"click": self._toggle},
                )
            brand = Element("div", {"class": "navbar-brand"}, [self.navbrand, burger])

        start = None if self.navstart is None else Element("div", {"class": "navbar-start"}, [self.navstart])
        end = None if self.navend is None else Element("div", {"class": "navbar-end"}, [self.navend])
        contents = Fragment([brand, Element("div", {"class": nav_classes}, [start, end])])

        attrs = {"class": class_list, "role": "navigation", "aria-label": "main navigation"}
        if self.padded:
            return Element("nav", attrs, [Element("div", {"class": "container"}, [contents])])
        return Element("nav", attrs, [contents])


def navbar_item(
    *args: Any,
    classes: Any = None,
    tag: NavbarItemTag = NavbarItemTag.DIV,
    has_dropdown: bool = False,
    expanded: bool = False,
    tab: bool = False,
    active: bool = False,
    href: str | None = None,
    rel: str | None = None,
    target: str | None = None,
) -> Element:
    """A single element of the navbar."""
    class_list = Classes(
        "navbar-item",
        classes,
        "has-dropdown" if has_dropdown else None,
        "is-expanded" if expanded else None,
        "is-tab" if tab else None,
        "is-active" if active else None,
    )
    if tag is NavbarItemTag.A:
        attrs = {"class": class_list, "href": href or "", "rel": rel or "", "target": target or ""}
        return Element("a", attrs, list(args))
    return Element("div", {"class": class_list}, list(args))


def navbar_divider(classes: Any = None) -> Element:
    """A horizontal rule inside a navbar dropdown."""
    return Element("hr", {"class": Classes("navbar-divider", classes)})


class NavbarDropdown:
    """A navbar dropdown menu holding navbar items and dividers."""

    def __init__(
        self,
        navlink: Any,
        *children: Any,
        classes: Any = None,
        hoverable: bool = False,
        dropup: bool = False,
        right: bool = False,
        arrowless: bool = False,
        boxed: bool = False,
    ) -> None:
        self.navlink = navlink
        self.children = list(children)
        self.classes = Classes(classes)
        self.hoverable = hoverable
        self.dropup = dropup
        self.right = right
        self.arrowless = arrowless
        self.boxed = boxed
        self.is_menu_active = False

    def update(self, msg: DropdownMsg) -> bool:
        """Apply a message; a hoverable dropdown ignores messages and returns False."""
        if self.hoverable:
            return False
        self.is_menu_active = msg is DropdownMsg.OPEN
        return True

    def view(self) -> Element:
        """Render the current state of the dropdown."""
        class_list = Classes("navbar-item has-dropdown", self.classes, "has-dropdown-up" if self.dropup else None)
        drop_classes = Classes(
            "navbar-dropdown",
            "is-right" if self.right else None,
            "is-boxed" if self.boxed else None,
        )
        link_classes = Classes("navbar-link", "is-arrowless" if self.arrowless else None)

        if self.hoverable:
            class_list.push("is-hoverable")
            on_open = None
        else:
            def on_open(_event: Any) -> bool:
                return self.update(DropdownMsg.OPEN)
        overlay = None
        if self.is_menu_active:
            class_list.push("is-active")
            overlay = _overlay(lambda _event: self.update(DropdownMsg.CLOSE))

        link = Element("a", {"class": link_classes}, [self.navlink], {"click": on_open})
        dropdown = Element("div", {"class": drop_classes}, self.children)
        return Element("div", {"class": class_list}, [overlay, link, dropdown])


def panel(*args: Any, classes: Any = None, heading: Any = None) -> Element:
    """A composable panel for compact controls."""
    heading_el = Element("p", {"class": "panel-heading"}, [heading])
    return Element("nav", {"class": Classes("panel", classes)}, [heading_el, *args])


def panel_tabs(*args: Any) -> Element:
    """A container for the navigation tabs of a panel."""
    return Element("p", {"class": "panel-tabs"}, list(args))


def panel_block(
    *args: Any,
    tag: str = "div",
    active: bool = False,
    onclick: Callable[[Any], Any] | None = None,
) -> Element:
    """An individual element of a panel."""
    class_list = Classes("panel-block", "is-active" if active else None)
    return Element(tag, {"class": class_list}, list(args), {"click": onclick})


def tabs(
    *args: Any,
    classes: Any = None,
    alignment: Alignment | None = None,
    size: Size | None = None,
    boxed: bool = False,
    toggle: bool = False,
    rounded: bool = False,
    fullwidth: bool = False,
) -> Element:
    """Responsive horizontal navigation tabs."""
    class_list = Classes(
        "tabs",
        classes,
        alignment,
        size,
        "is-boxed" if boxed else None,
        "is-toggle" if toggle else None,
        "is-rounded" if rounded else None,
        "is-fullwidth" if fullwidth else None,
    )
    return Element("div", {"class": class_list}, [Element("ul", {}, list(args))])