import pytest

from bulmakit.common import Alignment, Size
from bulmakit.navigation import (
    Dropdown,
    DropdownMsg,
    Navbar,
    NavbarDropdown,
    NavbarFixed,
    NavbarItemTag,
    NavbarMsg,
    navbar_divider,
    navbar_item,
    panel,
    panel_block,
    panel_tabs,
    tabs,
)


def _overlay(view):
    return next(el for el in view.iter() if "style" in el.attrs)


# Dropdown


def test_dropdown_starts_closed():
    dd = Dropdown("item", button_html="Open")
    view = dd.view()
    assert dd.is_menu_active is False
    assert "is-active" not in view.attrs["class"]
    assert list(view.attrs["class"]) == ["dropdown"]


def test_dropdown_opens_on_trigger_click_and_closes_on_overlay():
    dd = Dropdown("item", button_html="Open")
    trigger = dd.view().find("button")
    assert trigger.dispatch("click") is True
    assert dd.is_menu_active is True
    view = dd.view()
    assert "is-active" in view.attrs["class"]
    _overlay(view).dispatch("click")
    assert dd.is_menu_active is False
    assert "is-active" not in dd.view().attrs["class"]


def test_dropdown_update_messages():
    dd = Dropdown()
    assert dd.update(DropdownMsg.OPEN) is True
    assert dd.is_menu_active
    assert dd.update(DropdownMsg.CLOSE) is True
    assert not dd.is_menu_active


def test_hoverable_dropdown_ignores_messages():
    dd = Dropdown(hoverable=True)
    assert dd.update(DropdownMsg.OPEN) is False
    assert dd.is_menu_active is False
    view = dd.view()
    assert "is-hoverable" in view.attrs["class"]
    assert "click" not in view.find("button").events


def test_dropdown_structure_and_classes():
    dd = Dropdown("entry", classes="extra", button_classes="is-primary", button_html="Go")
    view = dd.view()
    assert list(view.attrs["class"]) == ["dropdown", "extra"]
    assert "is-primary" in view.find("button").attrs["class"]
    menu = view.find("dropdown-menu")
    assert menu.attrs["role"] == "menu"
    assert view.find("dropdown-content").children == ["entry"]
    assert view.find("dropdown-trigger").tag == "div"


# Navbar


def test_navbar_fixed_values():
    assert list(Navbar(fixed=NavbarFixed.TOP).view().attrs["class"]) == ["navbar", "is-fixed-top"]
    assert list(Navbar(fixed=NavbarFixed.BOTTOM).view().attrs["class"]) == ["navbar", "is-fixed-bottom"]


def test_navbar_root_attributes():
    nav = Navbar(fixed=NavbarFixed.TOP, classes="is-dark").view()
    assert nav.tag == "nav"
    assert nav.attrs["role"] == "navigation"
    assert nav.attrs["aria-label"] == "main navigation"
    assert list(nav.attrs["class"]) == ["navbar", "is-dark", "is-fixed-top"]


def test_navbar_without_brand_has_no_burger():
    nav = Navbar(navstart="Start").view()
    assert nav.find("navbar-brand") is None
    assert nav.find("navbar-burger") is None
    assert nav.find("navbar-start").children == ["Start"]
    assert nav.find("navbar-end") is None


def test_navbar_burger_toggles_menu():
    navbar = Navbar(navbrand="Brand", navend="End")
    view = navbar.view()
    burger = view.find("navbar-burger")
    assert burger.attrs["aria-expanded"] == "false"
    assert len(burger.children) == 3
    burger.dispatch("click")
    assert navbar.is_menu_open is True
    view = navbar.view()
    assert view.find("navbar-burger").attrs["aria-expanded"] == "true"
    assert "is-active" in view.find("navbar-menu").attrs["class"]
    assert "is-active" in view.find("navbar-burger").attrs["class"]
    assert navbar.update(NavbarMsg.TOGGLE_MENU) is True
    assert navbar.is_menu_open is False
    assert "is-active" not in navbar.view().find("navbar-menu").attrs["class"]


def test_navbar_without_burger():
    view = Navbar(navbrand="Brand", navburger=False).view()
    assert view.find("navbar-brand").children == ["Brand"]
    assert view.find("navbar-burger") is None


def test_navbar_burger_extra_classes():
    view = Navbar(navbrand="B", navburger_classes="has-text-white").view()
    assert list(view.find("navbar-burger").attrs["class"]) == ["navbar-burger", "has-text-white"]


def test_navbar_padded_wraps_in_container():
    padded = Navbar(navbrand="B", padded=True).view()
    plain = Navbar(navbrand="B").view()
    assert list(padded.children[0].attrs["class"]) == ["container"]
    assert padded.children[0].find("navbar-menu").tag == "div"
    assert plain.find("container") is None


# Navbar items


def test_navbar_item_div_default():
    item = navbar_item("Home", active=True, tab=True)
    assert item.tag == "div"
    assert list(item.attrs["class"]) == ["navbar-item", "is-tab", "is-active"]
    assert "href" not in item.attrs


def test_navbar_item_anchor():
    item = navbar_item("Docs", tag=NavbarItemTag.A, href="/docs", has_dropdown=True, expanded=True)
    assert item.tag == "a"
    assert item.attrs["href"] == "/docs"
    assert item.attrs["rel"] == ""
    assert item.attrs["target"] == ""
    assert list(item.attrs["class"]) == ["navbar-item", "has-dropdown", "is-expanded"]


def test_navbar_divider_renders_void_element():
    assert navbar_divider().render() == '<hr class="navbar-divider">'
    assert "thin" in navbar_divider(classes="thin").attrs["class"]


# Navbar dropdown


def test_navbar_dropdown_classes():
    dd = NavbarDropdown("More", navbar_item("One"), dropup=True, right=True, boxed=True, arrowless=True)
    view = dd.view()
    assert list(view.attrs["class"]) == ["navbar-item", "has-dropdown", "has-dropdown-up"]
    assert list(view.find("navbar-dropdown").attrs["class"]) == ["navbar-dropdown", "is-right", "is-boxed"]
    assert list(view.find("navbar-link").attrs["class"]) == ["navbar-link", "is-arrowless"]
    assert view.find("navbar-link").children == ["More"]


def test_navbar_dropdown_open_and_close():
    dd = NavbarDropdown("More")
    dd.view().find("navbar-link").dispatch("click")
    assert dd.is_menu_active is True
    view = dd.view()
    assert "is-active" in view.attrs["class"]
    _overlay(view).dispatch("click")
    assert dd.is_menu_active is False


def test_hoverable_navbar_dropdown():
    dd = NavbarDropdown("More", hoverable=True)
    assert dd.update(DropdownMsg.OPEN) is False
    view = dd.view()
    assert "is-hoverable" in view.attrs["class"]
    assert view.find("navbar-link").dispatch("click") is None
    assert dd.is_menu_active is False


# Panel


def test_panel_heading_first():
    view = panel(panel_block("a"), heading="Repositories", classes="is-primary")
    assert view.tag == "nav"
    assert list(view.attrs["class"]) == ["panel", "is-primary"]
    assert view.children[0].attrs["class"] == view.find("panel-heading").attrs["class"]
    assert view.find("panel-heading").children == ["Repositories"]
    assert view.find("panel-block").children == ["a"]


def test_panel_tabs():
    view = panel_tabs("All", "Public")
    assert view.tag == "p"
    assert view.children == ["All", "Public"]


def test_panel_block_click_and_tag():
    clicks = []
    block = panel_block("x", tag="a", active=True, onclick=clicks.append)
    assert block.tag == "a"
    assert list(block.attrs["class"]) == ["panel-block", "is-active"]
    block.dispatch("click", "evt")
    assert clicks == ["evt"]


# Tabs


def test_tabs_classes_and_list():
    view = tabs(
        "A",
        alignment=Alignment.CENTERED,
        size=Size.LARGE,
        boxed=True,
        toggle=True,
        rounded=True,
        fullwidth=True,
    )
    assert list(view.attrs["class"]) == [
        "tabs",
        "is-centered",
        "is-large",
        "is-boxed",
        "is-toggle",
        "is-rounded",
        "is-fullwidth",
    ]
    assert view.children[0].tag == "ul"
    assert view.children[0].children == ["A"]


@pytest.mark.parametrize("flag", ["boxed", "toggle", "rounded", "fullwidth"])
def test_tabs_flags_off_by_default(flag):
    view = tabs()
    assert f"is-{flag}" not in view.attrs["class"]
    assert f"is-{flag}" in tabs(**{flag: True}).attrs["class"]


def test_tabs_render():
    assert tabs().render() == '<div class="tabs"><ul></ul></div>'