from __future__ import annotations

from paskanet.wm import PanelRegistry, Point, WindowStore


def test_operations_on_closed_ids_are_silent_noops() -> None:
    store = WindowStore(PanelRegistry())
    keep = store.open("Services")
    gone = store.open("Event Viewer")
    store.close(gone.id)
    snapshot = store.list()

    assert store.close(gone.id) is False
    assert store.focus(gone.id) is False
    assert store.set_position(gone.id, 10, 10) is False
    assert store.get(gone.id) is None
    assert store.close(12345) is False

    assert store.list() == snapshot
    assert store.get(keep.id).position == Point(50, 50)


def test_set_position_does_not_clamp() -> None:
    store = WindowStore(PanelRegistry(), viewport=(800, 600))
    w = store.open("Services")

    assert store.set_position(w.id, -300, 5000) is True
    assert store.get(w.id).position == Point(-300, 5000)
