import pytest

from view import ViewTransform


def test_to_scene_inverts_to_screen():
    view = ViewTransform(zoom=2.0, pan_x=30.0, pan_y=-10.0)
    assert view.to_screen((10.0, 20.0)) == (50.0, 30.0)
    assert view.to_scene((50.0, 30.0)) == (10.0, 20.0)


def test_zoom_in_stops_at_upper_bound():
    view = ViewTransform()
    for _ in range(30):
        view.zoom_in()
    assert view.zoom == 3.0
    assert view.zoom_in() is False
    assert view.zoom == 3.0


def test_zoom_out_stops_at_lower_bound():
    view = ViewTransform()
    for _ in range(10):
        view.zoom_out()
    assert view.zoom == 0.5
    assert view.zoom_out() is False
    assert view.zoom == 0.5


def test_zoom_steps_by_tenths():
    view = ViewTransform()
    assert view.zoom_in() is True
    assert view.zoom == 1.1
    view.zoom_out()
    view.zoom_out()
    assert view.zoom == 0.9


def test_pan_to_anchor_keeps_anchor_under_pointer():
    view = ViewTransform(zoom=1.5)
    view.pan_to_anchor((100.0, 40.0), (300.0, 200.0))
    assert view.to_scene((300.0, 200.0)) == pytest.approx((100.0, 40.0))


def test_reset():
    view = ViewTransform(zoom=2.0, pan_x=5.0, pan_y=6.0)
    view.reset()
    assert (view.zoom, view.pan) == (1.0, (0.0, 0.0))
