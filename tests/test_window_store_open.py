from __future__ import annotations

from paskanet.core.events import EventBus, WindowOpened, WindowsCleared
from paskanet.wm import PanelRegistry, Point, Size, ToolKind, ToolNotFound, WindowStore


def _store(**kwargs) -> WindowStore:
    return WindowStore(PanelRegistry(), **kwargs)


def test_default_tools_are_640_by_480_and_staggered_by_id() -> None:
    store = _store()
    first = store.open("Command Prompt")
    second = store.open("Services")

    assert first.size == Size(640, 480)
    assert first.position == Point(50, 50)
    assert second.position == Point(70, 70)


def test_stagger_wraps_every_ten_windows() -> None:
    store = _store()
    opened = [store.open("Event Viewer") for _ in range(11)]

    assert opened[9].position == Point(230, 230)
    assert opened[10].position == Point(50, 50)


def test_server_manager_fills_the_viewport_minus_margins() -> None:
    store = _store(viewport=(1280, 800))
    sm = store.open("Server Manager")

    assert sm.position == Point(50, 40)
    assert sm.size == Size(1180, 650)
    assert sm.title == "Server Manager"


def test_viewport_change_only_affects_later_windows() -> None:
    store = _store(viewport=(1280, 800))
    before = store.open("Server Manager")
    store.set_viewport(1000, 700)
    after = store.open("Server Manager")

    assert store.get(before.id).size == Size(1180, 650)
    assert after.size == Size(900, 550)


def test_window_titles_come_from_the_registry() -> None:
    store = _store()

    assert store.open("Command Prompt").title == "Paskanet II Command Prompt"
    assert store.open("Disk Cleanup").title == "Disk Cleanup (C:)"
    opt = store.open("Defragment and Optimize Drives")
    assert opt.title == "Optimize Drives"
    assert opt.tool is ToolKind.OPTIMIZE_DRIVES


def test_unknown_tool_returns_not_found_and_store_is_unchanged() -> None:
    store = _store()
    store.open("Command Prompt")

    result = store.open("DNS")

    assert isinstance(result, ToolNotFound)
    assert result.tool_name == "DNS"
    assert len(store) == 1


def test_ids_strictly_increase_and_survive_clear() -> None:
    bus = EventBus()
    cleared: list[int] = []
    bus.subscribe(WindowsCleared, lambda e: cleared.append(e.count))
    store = _store(event_bus=bus)
    ids = [store.open("Services").id for _ in range(3)]
    store.close(ids[1])
    ids.append(store.open("Services").id)

    assert store.clear() == 3
    ids.append(store.open("Services").id)

    assert ids == [0, 1, 2, 3, 4]
    assert cleared == [3]


def test_open_publishes_window_opened() -> None:
    bus = EventBus()
    seen: list[WindowOpened] = []
    bus.subscribe(WindowOpened, seen.append)
    store = _store(event_bus=bus)

    w = store.open("Resource Monitor")

    assert seen == [WindowOpened(window_id=w.id, tool="Resource Monitor")]


def test_locked_store_ignores_mutations() -> None:
    store = _store()
    w = store.open("Services")
    store.set_locked(True)

    assert store.open("Services") is None
    assert store.close(w.id) is False
    assert store.set_position(w.id, 1, 1) is False
    assert len(store) == 1


def test_returned_entities_are_copies() -> None:
    store = _store()
    w = store.open("Services")
    w.position = Point(999, 999)

    assert store.get(w.id).position == Point(50, 50)
