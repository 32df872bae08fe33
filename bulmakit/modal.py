"""Modal overlays and a broadcaster for closing them by ID."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import count
from typing import Any

from .common import Classes, Element, Fragment


@dataclass(frozen=True)
class ModalCloseMsg:
    """A request to close the modal whose ID matches; other modals ignore it."""

    id: str


class ModalCloser:
    """Forwards close requests to every connected modal."""

    def __init__(self) -> None:
        self._ids = count()
        self._subscribers: dict[int, Callable[[ModalCloseMsg], Any]] = {}

    def connect(self, handler: Callable[[ModalCloseMsg], Any]) -> int:
        """Register a handler and return the ID under which it was registered."""
        handler_id = next(self._ids)
        self._subscribers[handler_id] = handler
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        """Remove a handler; an unknown ID is ignored."""
        self._subscribers.pop(handler_id, None)

    def send(self, msg: ModalCloseMsg) -> None:
        """Deliver the message to every connected handler."""
        for handler in list(self._subscribers.values()):
            handler(msg)

    def __len__(self) -> int:
        return len(self._subscribers)


class _ModalBase:
    def __init__(self, id: str, trigger: Any, classes: Any, closer: ModalCloser | None) -> None:
        self.id = id
        self.trigger = trigger
        self.classes = Classes(classes)
        self.is_active = False
        self.closer = closer
        self.handler_id = closer.connect(self._on_message) if closer is not None else None

    def _on_message(self, msg: ModalCloseMsg) -> None:
        if msg.id == self.id:
            self.is_active = False

    def _callbacks(self) -> tuple[Callable[[Any], Any] | None, Callable[[Any], Any] | None]:
        if self.is_active:
            return None, self._close_handler
        return self._open_handler, None

    def _open_handler(self, _event: Any) -> None:
        self.is_active = True

    def _close_handler(self, _event: Any) -> None:
        self.is_active = False

    def _wrap(self, inner: Element) -> Fragment:
        on_open, on_close = self._callbacks()
        class_list = Classes("modal", self.classes, "is-active" if self.is_active else None)
        trigger = Element("div", {}, [self.trigger], {"click": on_open})
        body = Element(
            "div",
            {"id": self.id, "class": class_list},
            [
                Element("div", {"class": "modal-background"}, [], {"click": on_close}),
                inner,
                Element(
                    "button",
                    {"class": "modal-close is-large", "aria-label": "close"},
                    [],
                    {"click": on_close},
                ),
            ],
        )
        return Fragment([trigger, body])


class Modal(_ModalBase):
    """A classic modal overlay holding any content."""

    def __init__(
        self,
        id: str,
        *children: Any,
        trigger: Any = None,
        classes: Any = None,
        closer: ModalCloser | None = None,
    ) -> None:
        super().__init__(id, trigger, classes, closer)
        self.children = list(children)

    def open(self) -> None:
        """Show the modal."""
        self.is_active = True

    def close(self) -> None:
        """Hide the modal."""
        self.is_active = False

    def receive(self, msg: ModalCloseMsg) -> None:
        """Close this modal if the message carries its ID."""
        if msg.id == self.id:
            self.close()

    def view(self) -> Fragment:
        """Render the trigger followed by the modal itself."""
        return self._wrap(Element("div", {"class": "modal-content"}, self.children))


class ModalCard(_ModalBase):
    """A modal with a header, body and footer section."""

    def __init__(
        self,
        id: str,
        title: str,
        body: Any = None,
        footer: Any = None,
        trigger: Any = None,
        classes: Any = None,
        closer: ModalCloser | None = None,
    ) -> None:
        super().__init__(id, trigger, classes, closer)
        self.title = title
        self.body = body
        self.footer = footer

    def open(self) -> None:
        """Show the modal."""
        self.is_active = True

    def close(self) -> None:
        """Hide the modal."""
        self.is_active = False

    def receive(self, msg: ModalCloseMsg) -> None:
        """Close this modal if the message carries its ID."""
        if msg.id == self.id:
            self.close()

    def view(self) -> Fragment:
        """Render the trigger followed by the modal card."""
        _on_open, on_close = self._callbacks()
        header = Element(
            "header",
            {"class": "modal-card-head"},
            [
                Element("p", {"class": "modal-card-title"}, [self.title]),
                Element("button", {"class": "delete", "aria-label": "close"}, [], {"click": on_close}),
            ],
        )
        card = Element(
            "div",
            {"class": "modal-card"},
            [
                header,
                Element("section", {"class": "modal-card-body"}, [self.body]),
                Element("footer", {"class": "modal-card-foot"}, [self.footer]),
            ],
        )
        return self._wrap(card)