from unittest.mock import MagicMock, Mock, patch

import pytest

tk = pytest.importorskip("tkinter")
Image = pytest.importorskip("PIL.Image")

import canvas_view
from canvas_view import CanvasView, TkPainter, TkTextMeasurer, load_image, tk_cursor
from engine import SceneEngine
from reflow import estimate_width


def test_painter_tags_every_item():
    canvas = MagicMock()
    painter = TkPainter(canvas)
    painter.clear("#ffffff", (100, 100))
    painter.rectangle(1, 2, 3, 4, "black")
    painter.ellipse(1, 2, 3, 4, "#ff0000")
    painter.text(5, 6, "hi", ("Arial", 16), "black", "nw")

    canvas.delete.assert_called_once_with("scene")
    canvas.configure.assert_called_once_with(bg="#ffffff")
    canvas.create_rectangle.assert_called_once_with(1, 2, 3, 4, outline="black", width=1, fill="", tags="scene")
    canvas.create_oval.assert_called_once_with(1, 2, 3, 4, outline="#ff0000", width=1, fill="", tags="scene")
    canvas.create_text.assert_called_once_with(5, 6, text="hi", font=("Arial", 16), fill="black", anchor="nw", tags="scene")


def test_engine_renders_into_tk_painter():
    canvas = MagicMock()
    engine = SceneEngine()
    engine.add_shape("rectangle")
    engine.add_table(1, 1)
    engine.render(TkPainter(canvas))
    assert canvas.create_rectangle.call_count == 2


@pytest.mark.parametrize(
    "hint, expected",
    [
        ("nwse-resize", "bottom_right_corner"),
        ("nesw-resize", "bottom_left_corner"),
        ("ew-resize", "sb_h_double_arrow"),
        ("ns-resize", "sb_v_double_arrow"),
        ("move", "fleur"),
        ("default", ""),
        ("unknown", ""),
    ],
)
def test_tk_cursor(hint, expected):
    assert tk_cursor(hint) == expected


def test_load_image(tmp_path):
    path = tmp_path / "dot.png"
    Image.new("RGB", (4, 3), "red").save(path)
    image = load_image(str(path))
    assert image.size == (4, 3)
    assert image.mode == "RGBA"


def test_load_image_rejects_non_images(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    with pytest.raises(OSError):
        load_image(str(path))


def test_measurer_falls_back_without_display():
    measurer = TkTextMeasurer(Mock())
    with patch.object(canvas_view.tkfont, "Font", side_effect=tk.TclError("no display")):
        assert measurer("abcd", ("Arial", 10)) == estimate_width("abcd", ("Arial", 10))


def test_measurer_caches_fonts():
    font = Mock()
    font.measure.return_value = 42
    measurer = TkTextMeasurer(Mock())
    with patch.object(canvas_view.tkfont, "Font", return_value=font) as factory:
        assert measurer("a", ("Arial", 16)) == 42.0
        assert measurer("b", ("Arial", 16)) == 42.0
    factory.assert_called_once()


def test_load_images_resolves_and_fails(tmp_path):
    good = tmp_path / "good.png"
    Image.new("RGB", (2, 2)).save(good)
    view = CanvasView.__new__(CanvasView)
    view.engine = SceneEngine()
    view.canvas = MagicMock()
    view.painter = TkPainter(view.canvas)
    view._on_scene_changed = None

    view._load_images([str(good), str(tmp_path / "missing.png")])

    assert view.engine.images.status(str(good)) == "ready"
    assert view.engine.images.status(str(tmp_path / "missing.png")) == "failed"
    view.canvas.delete.assert_called_with("scene")
