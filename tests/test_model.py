from model import DIRECTIONS, Shape, Table, TextStyle, direction_edges


def test_direction_edges():
    assert direction_edges("top-left") == (True, False, True, False)
    assert direction_edges("bottom-right") == (False, True, False, True)
    assert direction_edges("left") == (True, False, False, False)
    assert direction_edges("bottom") == (False, False, False, True)
    assert all(any(direction_edges(d)) for d in DIRECTIONS)


def test_table_grid_matches_dimensions():
    table = Table(id=1, x=0.0, y=0.0, rows=2, cols=3)
    assert table.data == [["", "", ""], ["", "", ""]]
    assert (table.width, table.height) == (300.0, 80.0)
    assert table.bounds() == (0.0, 0.0, 300.0, 80.0)
    assert table.cell(1, 2) == ""
    assert table.cell(2, 0) is None


def test_table_copy_is_deep():
    table = Table(id=1, x=0.0, y=0.0, rows=1, cols=1)
    clone = table.copy()
    clone.data[0][0] = "changed"
    assert table.data[0][0] == ""


def test_shape_copy_is_independent():
    shape = Shape(id=3, kind="text", x=1.0, y=2.0, width=200.0, height=50.0, text="hi", style=TextStyle(bold=True))
    clone = shape.copy()
    clone.style.bold = False
    assert shape.style.bold is True
    assert clone.to_dict()["text"] == "hi"


def test_shape_from_dict_never_negative():
    shape = Shape.from_dict({"id": 1, "kind": "rectangle", "width": -5, "height": -1})
    assert (shape.width, shape.height) == (0.0, 0.0)


def test_text_style_font_descriptor():
    assert TextStyle().font() == ("Arial", 16)
    assert TextStyle(italic=True, underline=True).font() == ("Arial", 16, "italic", "underline")
