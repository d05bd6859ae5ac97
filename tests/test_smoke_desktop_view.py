from __future__ import annotations

import os

import pytest


def _qt_app_or_skip():
    pytest.importorskip("PySide6")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError as exc:
        pytest.skip(f"PySide6 QtWidgets unavailable in this environment: {exc}")
    return QApplication.instance() or QApplication([])


def _shell():
    from paskanet.application.container import Container
    from paskanet.application.ports.scheduler import ManualScheduler
    from paskanet.ui.shell import MainWindow

    scheduler = ManualScheduler()
    container = Container(scheduler, password="0000", seed=4)
    window = MainWindow(container)
    return container, scheduler, window


def test_login_screen_shows_error_inline_then_enters_desktop() -> None:
    _app = _qt_app_or_skip()
    from PySide6.QtWidgets import QLineEdit

    from paskanet.ui.components.buttons import PrimaryButton
    from paskanet.ui.shell.desktop import DesktopView
    from paskanet.ui.shell.login_screen import LoginScreen

    container, _, window = _shell()
    login = window.screens.current
    assert isinstance(login, LoginScreen)

    field = login.findChild(QLineEdit)
    button = login.findChild(PrimaryButton)
    field.setText("nope")
    button.click()
    assert login.error_text() == "Incorrect password."

    field.setText("0000")
    button.click()
    assert isinstance(window.screens.current, DesktopView)
    window.close()


def test_desktop_renders_frames_in_stacking_order() -> None:
    _app = _qt_app_or_skip()
    container, _, window = _shell()
    container.session.login("0000")
    desktop = window.screens.current

    a = container.open_tool("Command Prompt")
    b = container.open_tool("Event Viewer")
    assert desktop.frame_ids() == [a.id, b.id]

    container.windows.focus(a.id)
    assert desktop.frame_ids() == [b.id, a.id]

    container.windows.set_position(b.id, 300, 120)
    assert desktop.frame(b.id).pos().x() == 300
    assert desktop.frame(b.id).pos().y() == 120
    window.close()


def test_terminal_panel_runs_commands_and_exit_closes_window() -> None:
    _app = _qt_app_or_skip()
    from paskanet.ui.panels.terminal import TerminalPanel

    container, _, window = _shell()
    container.session.login("0000")
    desktop = window.screens.current
    w = container.open_tool("Command Prompt")
    panel = desktop.frame(w.id).body
    assert isinstance(panel, TerminalPanel)

    panel.run("echo hi there")
    assert panel.transcript()[-2:] == ["hi there", ""]

    panel.run("exit")
    assert w.id not in container.windows
    assert desktop.frame(w.id) is None
    window.close()


def test_closing_a_monitor_cancels_its_feed() -> None:
    _app = _qt_app_or_skip()
    container, scheduler, window = _shell()
    container.session.login("0000")
    desktop = window.screens.current
    w = container.open_tool("Performance Monitor")
    panel = desktop.frame(w.id).body

    scheduler.advance(1000)
    assert panel.chart.samples[-1] > 0

    container.close_window(w.id)
    assert panel.torn_down
    scheduler.advance(5000)
    assert scheduler.pending == 0
    window.close()


def test_unknown_tool_is_reported_through_notifications() -> None:
    app = _qt_app_or_skip()
    container, _, window = _shell()
    notices: list[str] = []

    class _Notes:
        def notice(self, message: str, **_kw) -> None:
            notices.append(message)

    container.notifications = _Notes()
    container.session.login("0000")

    container.chrome.choose_tool("DNS")
    app.processEvents()

    assert notices == ['Tool "DNS" is not available.']
    window.close()


def test_shutdown_shows_shutdown_screen_then_login() -> None:
    _app = _qt_app_or_skip()
    from paskanet.ui.shell.login_screen import LoginScreen
    from paskanet.ui.shell.shutdown_screen import ShutdownScreen

    container, scheduler, window = _shell()
    container.session.login("0000")
    container.open_tool("Server Manager")
    container.open_tool("Services")

    container.chrome.choose_shutdown()
    assert isinstance(window.screens.current, ShutdownScreen)

    scheduler.advance(1500)
    assert isinstance(window.screens.current, LoginScreen)
    assert len(container.windows) == 0
    window.close()


def test_every_registered_tool_builds_its_panel() -> None:
    _app = _qt_app_or_skip()
    from paskanet.ui.panels import PANEL_FACTORIES, PanelBody

    container, scheduler, window = _shell()
    container.session.login("0000")
    desktop = window.screens.current

    for spec in container.registry:
        w = container.open_tool(spec.name)
        assert isinstance(desktop.frame(w.id).body, PanelBody)
    assert set(PANEL_FACTORIES) == {spec.kind for spec in container.registry}

    scheduler.advance(3000)
    window.close()


def test_server_log_view_filters_by_level() -> None:
    _app = _qt_app_or_skip()
    from paskanet.services.mock_data import load_mock_data
    from paskanet.ui.components.log_view import LogView

    view = LogView()
    view.set_lines(list(load_mock_data().server_logs))
    assert view.visible_count() == 4

    view.set_filter("Error")
    assert view.visible_count() == 1

    view.set_filter("All")
    view.append_line("[Error] Disk quota exceeded")
    assert view.visible_count() == 5


def test_title_bar_press_raises_then_drags_until_release() -> None:
    _app = _qt_app_or_skip()
    from PySide6.QtCore import QPoint, Qt
    from PySide6.QtTest import QTest

    container, _, window = _shell()
    window.show()
    container.session.login("0000")
    desktop = window.screens.current
    below = container.open_tool("Services")
    container.open_tool("Event Viewer")
    title_bar = desktop.frame(below.id).title_bar
    start = container.windows.get(below.id).position

    QTest.mousePress(title_bar, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(20, 10))
    assert container.windows.top() == below.id
    assert container.drag.is_dragging

    QTest.mouseMove(title_bar, QPoint(120, 60))
    moved = container.windows.get(below.id).position
    assert (moved.x - start.x, moved.y - start.y) == (100, 50)
    assert desktop.frame(below.id).pos().x() == moved.x

    QTest.mouseRelease(title_bar, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(120, 60))
    assert not container.drag.is_dragging

    QTest.mouseMove(title_bar, QPoint(10, 10))
    assert container.windows.get(below.id).position == moved
    window.close()


def test_press_on_a_window_body_brings_it_to_front() -> None:
    _app = _qt_app_or_skip()
    from PySide6.QtCore import QPoint, Qt
    from PySide6.QtTest import QTest

    container, _, window = _shell()
    window.show()
    container.session.login("0000")
    desktop = window.screens.current
    below = container.open_tool("Services")
    top = container.open_tool("Event Viewer")
    assert container.windows.top() == top.id

    body = desktop.frame(below.id).body
    QTest.mouseClick(body, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(5, 5))

    assert container.windows.top() == below.id
    assert desktop.frame_ids()[-1] == below.id
    window.close()


def test_shell_views_release_their_bus_subscriptions() -> None:
    _app = _qt_app_or_skip()
    from paskanet.core.events import ChromeChanged, SessionModeChanged, WindowOpened

    container, scheduler, window = _shell()
    bus = container.event_bus
    assert bus.handler_count(SessionModeChanged) == 1

    container.session.login("0000")
    assert bus.handler_count(WindowOpened) == 1
    assert bus.handler_count(ChromeChanged) == 1

    container.chrome.choose_shutdown()
    scheduler.advance(1500)
    assert bus.handler_count(WindowOpened) == 0
    assert bus.handler_count(ChromeChanged) == 0

    window.close()
    assert bus.handler_count(SessionModeChanged) == 0
