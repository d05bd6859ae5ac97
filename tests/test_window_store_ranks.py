from __future__ import annotations

from paskanet.core.events import EventBus, WindowFocused
from paskanet.wm import PanelRegistry, WindowStore


def _store(bus: EventBus | None = None) -> WindowStore:
    return WindowStore(PanelRegistry(), bus)


def _ranks(store: WindowStore) -> dict[int, int]:
    return {w.id: w.z_index for w in store.list()}


def test_open_puts_each_window_on_top_with_dense_ranks() -> None:
    store = _store()
    a = store.open("Command Prompt")
    b = store.open("Services")
    c = store.open("Event Viewer")

    assert _ranks(store) == {a.id: 1, b.id: 2, c.id: 3}
    assert store.top() == c.id


def test_focus_moves_target_to_top_and_shifts_higher_windows_down() -> None:
    store = _store()
    a = store.open("Command Prompt")
    b = store.open("Services")
    c = store.open("Event Viewer")

    assert store.focus(a.id) is True

    assert _ranks(store) == {a.id: 3, b.id: 1, c.id: 2}
    assert [w.id for w in store.list()] == [b.id, c.id, a.id]


def test_focus_on_top_window_is_a_noop_and_publishes_nothing() -> None:
    bus = EventBus()
    focused: list[int] = []
    bus.subscribe(WindowFocused, lambda e: focused.append(e.window_id))
    store = _store(bus)
    store.open("Command Prompt")
    top = store.open("Services")

    before = _ranks(store)
    assert store.focus(top.id) is False
    assert _ranks(store) == before
    assert focused == []


def test_focus_is_idempotent() -> None:
    store = _store()
    a = store.open("Command Prompt")
    store.open("Services")

    store.focus(a.id)
    once = _ranks(store)
    store.focus(a.id)

    assert _ranks(store) == once


def test_close_leaves_gaps_and_ranks_stay_distinct() -> None:
    store = _store()
    a = store.open("Command Prompt")
    b = store.open("Services")
    c = store.open("Event Viewer")

    assert store.close(b.id) is True
    assert _ranks(store) == {a.id: 1, c.id: 3}

    d = store.open("Resource Monitor")
    assert store.get(d.id).z_index == 4

    store.focus(a.id)
    ranks = _ranks(store)
    assert len(set(ranks.values())) == len(ranks)
    assert store.top() == a.id


def test_random_focus_sequence_keeps_ranks_dense() -> None:
    store = _store()
    ids = [store.open("Command Prompt").id for _ in range(5)]

    for target in (3, 0, 4, 4, 1, 2, 0):
        store.focus(ids[target])
        assert sorted(_ranks(store).values()) == [1, 2, 3, 4, 5]
        assert store.top() == ids[target]
