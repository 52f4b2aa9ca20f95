import geometry
from model import CellRef, Shape, Table


def rect(shape_id=1, x=50.0, y=50.0, w=100.0, h=100.0):
    return Shape(id=shape_id, kind="rectangle", x=x, y=y, width=w, height=h)


def test_shape_at_inside_and_outside():
    shape = rect()
    assert geometry.shape_at((51, 51), [shape]) is shape
    assert geometry.shape_at((49, 49), [shape]) is None


def test_shape_at_boundary_is_inside():
    shape = rect()
    assert geometry.shape_at((150, 150), [shape]) is shape


def test_shape_at_last_created_wins():
    lower = rect(1)
    upper = rect(2, x=100.0, y=100.0)
    assert geometry.shape_at((120, 120), [lower, upper]) is upper
    assert geometry.shape_at((60, 60), [lower, upper]) is lower


def test_shape_at_empty():
    assert geometry.shape_at((0, 0), []) is None


def test_edge_proximity_top_left_at_origin():
    shape = rect()
    assert geometry.edge_proximity((shape.x, shape.y), shape, 10) == "top-left"


def test_edge_proximity_corners():
    shape = rect()
    assert geometry.edge_proximity((52, 148), shape) == "bottom-left"
    assert geometry.edge_proximity((148, 52), shape) == "top-right"
    assert geometry.edge_proximity((150, 150), shape) == "bottom-right"


def test_edge_proximity_single_edges():
    shape = rect()
    assert geometry.edge_proximity((55, 100), shape) == "left"
    assert geometry.edge_proximity((145, 100), shape) == "right"
    assert geometry.edge_proximity((100, 53), shape) == "top"
    assert geometry.edge_proximity((100, 157), shape) == "bottom"
    assert geometry.edge_proximity((100, 147), shape) == "bottom"


def test_edge_proximity_interior_and_outside_span():
    shape = rect()
    assert geometry.edge_proximity((100, 100), shape) is None
    assert geometry.edge_proximity((60, 60), shape) is None
    # Near the left line but beyond the box vertically.
    assert geometry.edge_proximity((50, 170), shape) is None


def test_table_cell_at_half_open():
    table = Table(id=7, x=100.0, y=100.0, rows=3, cols=3)
    assert geometry.table_cell_at((100, 100), table) == CellRef(7, 0, 0)
    assert geometry.table_cell_at((200, 100), table) == CellRef(7, 0, 1)
    assert geometry.table_cell_at((399, 219), table) == CellRef(7, 2, 2)
    assert geometry.table_cell_at((400, 150), table) is None
    assert geometry.table_cell_at((99, 150), table) is None


def test_table_edge_proximity_uses_outer_box():
    table = Table(id=1, x=100.0, y=100.0, rows=2, cols=2)
    assert geometry.table_edge_proximity((300, 180), table) == "bottom-right"
    assert geometry.table_edge_proximity((200, 140), table) is None


def test_resize_bounds_moves_only_named_edges():
    bounds = (50.0, 50.0, 150.0, 150.0)
    assert geometry.resize_bounds(bounds, "right", (200, 0), 10, 10) == (50.0, 50.0, 150.0, 100.0)
    assert geometry.resize_bounds(bounds, "top", (0, 20), 10, 10) == (50.0, 20.0, 100.0, 130.0)
    assert geometry.resize_bounds(bounds, "top-left", (0, 0), 10, 10) == (0.0, 0.0, 150.0, 150.0)


def test_resize_bounds_clamps_to_floor():
    bounds = (50.0, 50.0, 150.0, 150.0)
    x, y, w, h = geometry.resize_bounds(bounds, "top-left", (300, 300), 10, 10)
    assert (w, h) == (10.0, 10.0)
    assert (x, y) == (140.0, 140.0)
    assert geometry.resize_bounds(bounds, "bottom-right", (0, 0), 10, 10) == (50.0, 50.0, 10.0, 10.0)


def test_cursor_for():
    assert geometry.cursor_for("top-left") == "nwse-resize"
    assert geometry.cursor_for("bottom-left") == "nesw-resize"
    assert geometry.cursor_for("right") == "ew-resize"
    assert geometry.cursor_for("bottom") == "ns-resize"
    assert geometry.cursor_for(None) == "default"
