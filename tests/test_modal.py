from bulmakit.common import Element
from bulmakit.modal import Modal, ModalCard, ModalCloseMsg, ModalCloser


def _parts(modal):
    trigger, body = modal.view().children
    return trigger, body


def test_modal_starts_closed():
    modal = Modal("modal-0", "hello")
    _trigger, body = _parts(modal)
    assert "is-active" not in body.attrs["class"]
    assert "modal" in body.attrs["class"]
    assert body.attrs["id"] == "modal-0"


def test_trigger_click_opens():
    modal = Modal("modal-0", "hello", trigger="open me")
    trigger, _body = _parts(modal)
    trigger.dispatch("click")
    assert modal.is_active
    _trigger, body = _parts(modal)
    assert "is-active" in body.attrs["class"]


def test_trigger_noop_when_open():
    modal = Modal("modal-0")
    modal.open()
    trigger, _body = _parts(modal)
    assert trigger.dispatch("click") is None
    assert modal.is_active


def test_background_and_close_button_close():
    modal = Modal("modal-0")
    modal.open()
    _trigger, body = _parts(modal)
    body.find("modal-background").dispatch("click")
    assert not modal.is_active
    modal.open()
    _trigger, body = _parts(modal)
    body.find("modal-close").dispatch("click")
    assert not modal.is_active


def test_background_does_nothing_when_closed():
    modal = Modal("modal-0")
    _trigger, body = _parts(modal)
    body.find("modal-background").dispatch("click")
    assert modal.is_active is False


def test_content_holds_children():
    modal = Modal("modal-0", "hello")
    _trigger, body = _parts(modal)
    assert body.find("modal-content").children == ["hello"]


def test_closer_closes_matching_modal_only():
    closer = ModalCloser()
    first = Modal("modal-0", closer=closer)
    second = Modal("modal-1", closer=closer)
    first.open()
    second.open()
    closer.send(ModalCloseMsg("modal-0"))
    assert not first.is_active
    assert second.is_active


def test_disconnect_stops_delivery():
    closer = ModalCloser()
    modal = Modal("modal-0", closer=closer)
    modal.open()
    closer.disconnect(modal.handler_id)
    assert len(closer) == 0
    closer.send(ModalCloseMsg("modal-0"))
    assert modal.is_active


def test_closer_forwards_to_every_handler():
    closer = ModalCloser()
    received = []
    closer.connect(received.append)
    closer.connect(received.append)
    msg = ModalCloseMsg("x")
    closer.send(msg)
    assert received == [msg, msg]


def test_modal_card_structure():
    card = ModalCard("modal-2", "Title", body="Body", footer="Foot")
    _trigger, body = _parts(card)
    assert body.find("modal-card-title").children == ["Title"]
    assert body.find("modal-card-body").children == ["Body"]
    assert body.find("modal-card-foot").children == ["Foot"]


def test_modal_card_delete_closes():
    closer = ModalCloser()
    card = ModalCard("modal-2", "Title", closer=closer)
    card.open()
    _trigger, body = _parts(card)
    body.find("delete").dispatch("click")
    assert not card.is_active
    card.open()
    closer.send(ModalCloseMsg("modal-2"))
    assert not card.is_active


def test_extra_classes_rendered():
    modal = Modal("modal-0", classes="is-clipped")
    _trigger, body = _parts(modal)
    assert isinstance(body, Element)
    assert list(body.attrs["class"]) == ["modal", "is-clipped"]