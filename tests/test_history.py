import logging

from history import HistoryStack
from model import Shape


def make_shape(shape_id=1, x=50.0):
    return Shape(id=shape_id, kind="rectangle", x=x, y=50.0, width=100.0, height=100.0)


def test_undo_on_empty_is_noop(caplog):
    history = HistoryStack()
    with caplog.at_level(logging.DEBUG, logger="history"):
        assert history.undo([make_shape()]) is None
    assert history.redo([]) is None
    assert not history.can_undo()
    assert not history.can_redo()


def test_snapshot_is_independent_of_live_shapes():
    history = HistoryStack()
    shape = make_shape()
    history.snapshot([shape])
    shape.x = 400.0
    restored = history.undo([shape])
    assert restored[0].x == 50.0
    assert restored[0] is not shape


def test_undo_then_redo_round_trip():
    history = HistoryStack()
    before = [make_shape()]
    history.snapshot(before)
    after = [make_shape(), make_shape(2, x=10.0)]

    restored = history.undo(after)
    assert [s.to_dict() for s in restored] == [s.to_dict() for s in before]
    assert history.can_redo()

    again = history.redo(restored)
    assert [s.to_dict() for s in again] == [s.to_dict() for s in after]
    assert history.can_undo()


def test_snapshot_clears_redo():
    history = HistoryStack()
    history.snapshot([make_shape()])
    history.undo([])
    assert history.can_redo()
    history.snapshot([])
    assert not history.can_redo()


def test_limit_discards_oldest():
    history = HistoryStack(limit=3)
    for index in range(5):
        history.push([make_shape(x=float(index))])
    assert history.stats()["undo_count"] == 3
    assert history.stats()["undo_full"] is True
    assert history.peek()[0].x == 4.0
    xs = [history.pop()[0].x for _ in range(3)]
    assert xs == [4.0, 3.0, 2.0]
    assert history.pop() is None


def test_clear():
    history = HistoryStack()
    history.snapshot([make_shape()])
    history.undo([])
    history.clear()
    assert history.stats() == {"undo_count": 0, "redo_count": 0, "limit": history.limit, "undo_full": False}
