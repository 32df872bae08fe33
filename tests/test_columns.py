from bulmakit.columns import column, columns
from bulmakit.common import Element


def test_columns_default_classes():
    el = columns()
    assert el.tag == "div"
    assert list(el.attrs["class"]) == ["columns"]
    assert el.children == []


def test_columns_modifiers_in_order():
    el = columns(classes="extra", vcentered=True, multiline=True, centered=True)
    assert list(el.attrs["class"]) == ["columns", "extra", "is-vcentered", "is-multiline", "is-centered"]


def test_columns_wraps_children():
    a, b = column("one"), column("two")
    el = columns(a, b)
    assert el.children == [a, b]
    assert el.find_all("column") == [a, b]


def test_column_classes_and_content():
    el = column("text", Element("p"), classes="is-half")
    assert list(el.attrs["class"]) == ["column", "is-half"]
    assert el.children[0] == "text"
    assert "text" in el.render()