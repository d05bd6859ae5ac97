from __future__ import annotations

from paskanet.core.events import ChromeChanged, EventBus
from paskanet.wm import ChromeControls, Menu


def _chrome(bus: EventBus | None = None):
    opened: list[str] = []
    shutdowns: list[bool] = []
    chrome = ChromeControls(
        lambda name: opened.append(name),
        lambda: shutdowns.append(True),
        event_bus=bus,
    )
    return chrome, opened, shutdowns


def test_start_menu_toggles() -> None:
    chrome, _, _ = _chrome()

    chrome.toggle_start_menu()
    assert chrome.start_menu_open is True
    chrome.toggle_start_menu()
    assert chrome.start_menu_open is False


def test_press_outside_start_menu_closes_it_unless_on_start_button() -> None:
    chrome, _, _ = _chrome()
    chrome.toggle_start_menu()

    chrome.press_outside_start_menu(on_start_button=True)
    assert chrome.start_menu_open is True

    chrome.press_outside_start_menu()
    assert chrome.start_menu_open is False


def test_only_one_menu_is_open_and_clicking_it_again_closes_it() -> None:
    chrome, _, _ = _chrome()

    chrome.toggle_menu(Menu.MANAGE)
    chrome.toggle_menu("Tools")
    assert chrome.open_menu is Menu.TOOLS

    chrome.toggle_menu(Menu.TOOLS)
    assert chrome.open_menu is None


def test_choose_tool_opens_it_and_closes_the_menu() -> None:
    chrome, opened, _ = _chrome()
    chrome.toggle_menu(Menu.TOOLS)

    chrome.choose_tool("Services")

    assert opened == ["Services"]
    assert chrome.open_menu is None


def test_press_outside_menu_bar_closes_menus() -> None:
    chrome, _, _ = _chrome()
    chrome.toggle_menu(Menu.VIEW)

    chrome.press_outside_menu_bar()

    assert chrome.open_menu is None


def test_shutdown_item_calls_back() -> None:
    chrome, _, shutdowns = _chrome()

    chrome.choose_shutdown()

    assert shutdowns == [True]


def test_changes_are_published() -> None:
    bus = EventBus()
    seen: list[ChromeChanged] = []
    bus.subscribe(ChromeChanged, seen.append)
    chrome, _, _ = _chrome(bus)

    chrome.toggle_start_menu()
    chrome.toggle_menu(Menu.HELP)
    chrome.reset()
    chrome.reset()

    assert seen == [
        ChromeChanged(start_menu_open=True, open_menu=None),
        ChromeChanged(start_menu_open=True, open_menu="Help"),
        ChromeChanged(start_menu_open=False, open_menu=None),
    ]


def test_tools_menu_lists_the_advertised_tools() -> None:
    chrome, _, _ = _chrome()

    assert len(chrome.tools) == 19
    assert "Command Prompt" in chrome.tools
    assert "DNS" in chrome.tools
