# bulmakit

Bulma CSS components for Python. Each component is a function or a small
stateful class that builds an element tree with the classes, structure and
defaults Bulma expects. You can walk the tree, find elements by class, send
events to their handlers, and render the tree to an HTML string.

The package needs only the standard library.

## Installation

```
pip install bulmakit
```

## Building markup

Components take their children as positional arguments and their options as
keyword arguments. Extra classes go in `classes`, which accepts a string, an
enum member, a `Classes` object or an iterable of these.

```python
from bulmakit.common import render
from bulmakit.columns import columns, column
from bulmakit.labels import title, HeaderSize
from bulmakit.buttons import buttons, button

page = columns(
    column(title("Welcome", size=HeaderSize.IS_1)),
    column(
        buttons(
            button("Save", classes="is-primary"),
            button("Cancel", loading=True),
        )
    ),
    vcentered=True,
)

print(render(page))
```

Modifier enumerations such as `Size`, `Alignment`, `HeaderSize`, `ImageSize`,
`ButtonGroupSize` or `BreadcrumbSeparator` stand for Bulma class names: their
value and `str()` are the class, so `Size.LARGE` gives `is-large` and
`HeaderSize.IS_1` gives `is-1`.

## Element trees

`bulmakit.common` holds the building blocks every component returns:

- `Classes` is an ordered class list without duplicates; `push()` adds more
  names, strings are split on whitespace, and `None` and booleans are skipped.
  `classes(...)` builds one.
- `Element` has a `tag`, `attrs`, `children` and `events`. `render()` gives
  HTML, `iter()` walks the tree depth first, `find()` and `find_all()` look up
  elements by class name, and `dispatch(event, payload)` calls the handler
  bound to an event (an unbound event does nothing).
- `Fragment` is a run of sibling nodes without a wrapping element.
- `render(node)` serialises an element, fragment, text or nested list of them.
  Text is HTML-escaped; attributes set to `False` or `None` are left out and
  `True` renders as a bare attribute.

## Forms

Form components are controlled: you pass in the current value and an `update`
callable, and dispatching the element's event calls `update` with the new
value.

```python
from bulmakit.field import field
from bulmakit.inputs import text_input

values = {}

form = field(
    text_input("email", "", lambda v: values.update(email=v),
               placeholder="someone@example.com"),
    label="Email",
    help="We never share it.",
)

form.find("input").dispatch("input", "someone@example.com")
assert values == {"email": "someone@example.com"}
```

`checkbox` passes the toggled state on `click`, `radio` its own value on
`input`, `text_input` and `textarea` the new text on `input`, `file_input`
the chosen files on `change`, `select` the chosen value and `multi_select` the
list of chosen values on `change`.

## Stateful components

`Dropdown`, `Navbar` and `NavbarDropdown` take messages through `update()`
(`DropdownMsg.OPEN`, `DropdownMsg.CLOSE`, `NavbarMsg.TOGGLE_MENU`); a
hoverable dropdown ignores them and returns `False`. `Modal` and `ModalCard`
have `open()`, `close()` and `receive()`. Call `view()` for the current tree;
the handlers in that tree change the component's state when dispatched.

A `ModalCloser` forwards a `ModalCloseMsg` to every modal connected to it, and
only the modal with the matching id closes.

```python
from bulmakit.modal import Modal, ModalCloser, ModalCloseMsg

closer = ModalCloser()
dialog = Modal("modal-0", "Hello", closer=closer)
dialog.open()
closer.send(ModalCloseMsg("modal-0"))
assert not dialog.is_active
```

## Modules

- `bulmakit.common`: `Classes`, `classes`, `Element`, `Fragment`, `render`, `Size`, `Alignment`
- `bulmakit.columns`: `columns`, `column`
- `bulmakit.elements`: `block`, `box`, `content`, `delete`, `icon`, `notification`, `progress`, `table`
- `bulmakit.labels`: `image`, `ImageSize`, `tag`, `tags`, `title`, `subtitle`, `HeaderSize`
- `bulmakit.buttons`: `buttons`, `ButtonGroupSize`, `button`, `button_anchor`, `button_input_submit`, `button_input_reset`
- `bulmakit.containers`: `card`, `card_header`, `card_image`, `card_content`, `card_footer`, `menu`, `menu_list`, `menu_label`, `message`, `message_header`, `message_body`
- `bulmakit.navigation`: `Dropdown`, `DropdownMsg`, `Navbar`, `NavbarMsg`, `NavbarFixed`, `NavbarDropdown`, `navbar_item`, `NavbarItemTag`, `navbar_divider`, `panel`, `panel_tabs`, `panel_block`, `tabs`
- `bulmakit.modal`: `Modal`, `ModalCard`, `ModalCloser`, `ModalCloseMsg`
- `bulmakit.pagination`: `pagination`, `pagination_item`, `PaginationItemType`, `pagination_ellipsis`
- `bulmakit.breadcrumb`: `breadcrumb`, `BreadcrumbSize`, `BreadcrumbSeparator`
- `bulmakit.forms`: `checkbox`, `control`, `radio`
- `bulmakit.field`: `field`, `AddonsAlign`, `GroupedAlign`, `LabelSize`
- `bulmakit.inputs`: `text_input`, `InputType`, `file_input`, `textarea`
- `bulmakit.select`: `select`, `multi_select`

## What it does not do

- There are no helpers for Bulma's page layout parts: containers, footers,
  sections, heroes, tiles, levels and media objects. Build those with
  `Element` and `Classes` directly.
- There are no router-aware links or buttons.
- Nothing runs in a browser: events reach handlers only when you call
  `Element.dispatch()`, and the output is an HTML string.

## Running the tests

```
pip install -e ".[test]"
pytest
```