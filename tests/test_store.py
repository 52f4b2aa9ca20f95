import config
from model import TextStyle
from store import ShapeStore


def test_add_shape_defaults():
    store = ShapeStore()
    rect = store.add_shape("rectangle")
    assert (rect.x, rect.y, rect.width, rect.height) == (50.0, 50.0, 100.0, 100.0)
    assert rect.outline == "black"
    image = store.add_image("cat.png")
    assert (image.width, image.height, image.src) == (150.0, 150.0, "cat.png")
    label = store.add_text("hello", TextStyle(bold=True))
    assert (label.width, label.height, label.text) == (200.0, 50.0, "hello")
    assert label.style.bold is True


def test_ids_are_unique_across_shapes_and_tables():
    store = ShapeStore()
    ids = [store.add_shape("circle").id, store.add_table(2, 2).id, store.add_shape("text").id]
    assert len(set(ids)) == 3
    assert ids == sorted(ids)


def test_unknown_kind_is_ignored():
    store = ShapeStore()
    assert store.add_shape("hexagon") is None
    assert store.shapes == []


def test_add_table_coerces_dimensions():
    store = ShapeStore()
    table = store.add_table(0, -2)
    assert (table.rows, table.cols) == (1, 1)
    assert table.data == [[""]]
    assert (table.x, table.y) == config.TABLE_ORIGIN
    assert (table.cell_width, table.cell_height) == (100.0, 40.0)


def test_set_cell_out_of_range_is_absorbed():
    store = ShapeStore()
    table = store.add_table(2, 2)
    assert store.set_cell(table.id, 5, 0, "x") is False
    assert store.set_cell(999, 0, 0, "x") is False
    assert store.set_cell(table.id, 1, 1, "x") is True
    assert table.data == [["", ""], ["", "x"]]


def test_update_shape_keeps_size_floor():
    store = ShapeStore()
    rect = store.add_shape("rectangle")
    store.update_shape(rect.id, width=2, height=-5, x=7.0)
    assert (rect.width, rect.height, rect.x) == (10.0, 10.0, 7.0)
    assert store.update_shape(12345, x=1.0) is None


def test_update_table_keeps_cell_floor_and_grid():
    store = ShapeStore()
    table = store.add_table(2, 3)
    store.update_table(table.id, cell_width=10, cell_height=5, rows=9)
    assert (table.cell_width, table.cell_height) == (50.0, 20.0)
    assert (table.rows, table.cols) == (2, 3)


def test_replace_and_clear():
    store = ShapeStore()
    first = store.add_shape("rectangle")
    store.add_table(1, 1)
    store.replace_shapes([first.copy()])
    assert store.shapes[0] is not first
    assert store.get_shape(first.id).to_dict() == first.to_dict()
    store.clear()
    assert store.shapes == [] and store.tables == []
