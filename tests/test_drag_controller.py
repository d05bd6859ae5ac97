from __future__ import annotations

from paskanet.wm import DragController, PanelRegistry, Point, WindowStore


def _setup() -> tuple[WindowStore, DragController]:
    store = WindowStore(PanelRegistry())
    return store, DragController(store)


def test_drag_keeps_the_grab_offset() -> None:
    store, drag = _setup()
    w = store.open("Services")  # at (50, 50)

    assert drag.begin(w.id, 60, 55) is True
    assert drag.active.grab_offset == Point(10, 5)

    drag.move(200, 100)
    assert store.get(w.id).position == Point(190, 95)

    drag.end()
    assert drag.is_dragging is False

    drag.move(400, 400)
    assert store.get(w.id).position == Point(190, 95)


def test_begin_focuses_the_window() -> None:
    store, drag = _setup()
    below = store.open("Services")
    store.open("Event Viewer")

    drag.begin(below.id, 55, 55)

    assert store.top() == below.id


def test_begin_on_missing_window_stays_idle() -> None:
    _store, drag = _setup()

    assert drag.begin(42, 0, 0) is False
    assert drag.active is None
    assert drag.move(10, 10) is False


def test_window_closed_mid_drag_stops_moving_without_error() -> None:
    store, drag = _setup()
    w = store.open("Services")
    drag.begin(w.id, 60, 60)
    store.close(w.id)

    assert drag.move(300, 300) is False
    drag.end()
    drag.end()
    assert drag.active is None


def test_move_without_begin_is_ignored() -> None:
    store, drag = _setup()
    w = store.open("Services")

    assert drag.move(0, 0) is False
    assert store.get(w.id).position == Point(50, 50)
