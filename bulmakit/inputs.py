"""Text inputs, file inputs and text areas."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from .common import Alignment, Classes, Element, Size


class InputType(Enum):
    """The allowed types for a text input."""

    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    TEL = "tel"

    def __str__(self) -> str:
        return self.value


def _text_value(new_value: Any) -> str:
    return "" if new_value is None else str(new_value)


def _file_name(file: Any) -> str:
    if isinstance(file, str):
        return file
    name = getattr(file, "name", None)
    if name is None:
        raise TypeError(f"cannot take a file name from {type(file).__name__}")
    return str(name)


def text_input(
    name: str,
    value: str,
    update: Callable[[str], Any],
    classes: Any = None,
    type: InputType = InputType.TEXT,
    placeholder: str = "",
    size: Size | None = None,
    rounded: bool = False,
    loading: bool = False,
    disabled: bool = False,
    readonly: bool = False,
    static: bool = False,
) -> Element:
    """A controlled text input; the input event passes the new text to ``update``."""
    class_list = Classes(
        "input",
        classes,
        size,
        "is-rounded" if rounded else None,
        "is-loading" if loading else None,
        "is-static" if static else None,
    )

    def on_input(new_value: Any) -> Any:
        return update(_text_value(new_value))

    attrs = {
        "name": name,
        "value": value,
        "class": class_list,
        "type": type.value,
        "placeholder": placeholder,
        "disabled": disabled,
        "readonly": readonly,
    }
    return Element("input", attrs, [], {"input": on_input})


def file_input(
    name: str,
    files: Iterable[Any],
    update: Callable[[list[Any]], Any],
    selector_label: str = "Choose a file...",
    selector_icon: Any = None,
    classes: Any = None,
    has_name: str | None = None,
    right: bool = False,
    fullwidth: bool = False,
    boxed: bool = False,
    multiple: bool = False,
    size: Size | None = None,
    alignment: Alignment | None = None,
) -> Element:
    """A controlled file upload input; the change event passes the chosen files to ``update``.

    Files are strings or objects with a ``name`` attribute.
    """
    class_list = Classes(
        "file",
        classes,
        "has-name" if has_name is not None else None,
        "is-right" if right else None,
        "is-fullwidth" if fullwidth else None,
        "is-boxed" if boxed else None,
        size,
        alignment,
    )
    filenames = [Element("span", {"class": "file-name"}, [_file_name(f)]) for f in files]

    def on_change(chosen: Any) -> Any:
        return update([] if chosen is None else list(chosen))

    file_el = Element(
        "input",
        {"type": "file", "class": "file-input", "name": name, "multiple": multiple},
        [],
        {"change": on_change},
    )
    cta = Element(
        "span",
        {"class": "file-cta"},
        [
            Element("span", {"class": "file-icon"}, [selector_icon]),
            Element("span", {"class": "file-label"}, [selector_label]),
        ],
    )
    label = Element("label", {"class": "file-label"}, [file_el, cta, filenames])
    return Element("div", {"class": class_list}, [label])


def textarea(
    name: str,
    value: str,
    update: Callable[[str], Any],
    classes: Any = None,
    placeholder: str = "",
    rows: int = 0,
    size: Size | None = None,
    fixed_size: bool = False,
    loading: bool = False,
    disabled: bool = False,
    readonly: bool = False,
    static: bool = False,
) -> Element:
    """A controlled multiline text area; the input event passes the new text to ``update``."""
    class_list = Classes(
        "textarea",
        classes,
        size,
        "is-loading" if loading else None,
        "is-static" if static else None,
        "has-fixed-size" if fixed_size else None,
    )

    def on_input(new_value: Any) -> Any:
        return update(_text_value(new_value))

    attrs = {
        "name": name,
        "value": value,
        "class": class_list,
        "rows": str(rows),
        "placeholder": placeholder,
        "disabled": disabled,
        "readonly": readonly,
    }
    return Element("textarea", attrs, [], {"input": on_input})