"""Single and multiple choice select wrappers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .common import Classes, Element, Size


def _text_content(node: Any) -> str:
    if isinstance(node, Element):
        return "".join(_text_content(child) for child in node.children)
    if isinstance(node, str):
        return node
    return ""


def _option_value(option: Any) -> str:
    if isinstance(option, Element):
        value = option.attrs.get("value")
        if value is not None:
            return str(value)
        return _text_content(option)
    return str(option)


def _selected_values(chosen: Any) -> list[str]:
    if chosen is None:
        return []
    if isinstance(chosen, (str, Element)):
        return [_option_value(chosen)]
    if isinstance(chosen, Iterable):
        return [_option_value(option) for option in chosen]
    raise TypeError(f"cannot read selected options from {type(chosen).__name__}")


def select(
    name: str,
    value: str,
    update: Callable[[str], Any],
    *args: Any,
    classes: Any = None,
    size: Size | None = None,
    loading: bool = False,
    disabled: bool = False,
) -> Element:
    """A controlled select; the change event passes the chosen value to ``update``.

    The positional children are the ``option`` and ``optgroup`` elements.
    """
    class_list = Classes("select", classes, size, "is-loading" if loading else None)

    def on_change(new_value: Any) -> Any:
        return update("" if new_value is None else _option_value(new_value))

    select_el = Element(
        "select",
        {"name": name, "value": value, "disabled": disabled},
        list(args),
        {"change": on_change},
    )
    return Element("div", {"class": class_list}, [select_el])


def multi_select(
    name: str,
    value: Iterable[str],
    update: Callable[[list[str]], Any],
    *args: Any,
    classes: Any = None,
    size: Size | None = None,
    list_size: int = 4,
    loading: bool = False,
    disabled: bool = False,
) -> Element:
    """A controlled multiple select; the change event passes the chosen values to ``update``.

    The change payload is an iterable of option values or option elements; an option
    element without a ``value`` attribute contributes its text content.
    """
    class_list = Classes(
        "select",
        "is-multiple",
        classes,
        size,
        "is-loading" if loading else None,
    )

    def on_change(chosen: Any) -> Any:
        return update(_selected_values(chosen))

    select_el = Element(
        "select",
        {
            "multiple": True,
            "size": str(list_size),
            "name": name,
            "value": ",".join(value),
            "disabled": disabled,
        },
        list(args),
        {"change": on_change},
    )
    return Element("div", {"class": class_list}, [select_el])