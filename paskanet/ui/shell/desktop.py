"""
Desktop screen: menu bar, icon area with the window frames, taskbar, start menu.

Renders the window store. Frames are created, moved, raised and destroyed in
response to the window events; chrome widgets follow ChromeChanged. Presses
anywhere in the application pass through an event filter that implements
focus-on-press and click-outside dismissal.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from typing import TYPE_CHECKING

from PySide6.QtCore import QEvent, QObject, QPoint, Qt, QTimer
from PySide6.QtGui import QMouseEvent, QResizeEvent
from PySide6.QtWidgets import QApplication, QVBoxLayout, QWidget

from paskanet.config import DESKTOP_ICONS
from paskanet.core.events import WINDOW_EVENTS, ChromeChanged, Subscription, ToolUnavailable, WindowMoved
from paskanet.ui.panels import PANEL_FACTORIES
from paskanet.ui.shell.desktop_icon import DesktopIcon
from paskanet.ui.shell.menu_bar import MenuBar
from paskanet.ui.shell.screen_stack import ErrorWidget
from paskanet.ui.shell.start_menu import StartMenu
from paskanet.ui.shell.taskbar import Taskbar
from paskanet.ui.shell.window_frame import WindowFrame
from paskanet.wm.chrome import Menu

if TYPE_CHECKING:
    from paskanet.application.container import Container
    from paskanet.wm.store import WindowEntity

log = logging.getLogger(__name__)

ICON_MARGIN = 16
ICON_SPACING = 96


class DesktopArea(QWidget):
    """Free-positioning surface; its size is the viewport of the window store."""

    def __init__(self, on_resize: Callable[[int, int], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_resize = on_resize
        self.setObjectName("desktop")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._on_resize(event.size().width(), event.size().height())


class DesktopView(QWidget):
    def __init__(self, container: Container, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._container = container
        self._frames: dict[int, WindowFrame] = {}
        self._subs: list[Subscription] = []
        self._filter_installed = False

        self.area = DesktopArea(container.windows.set_viewport)
        self.menu_bar = MenuBar(container, overlay_parent=self)
        self.taskbar = Taskbar(container.chrome.toggle_start_menu)
        self.start_menu = StartMenu(container.chrome.choose_shutdown, self)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)
        root.addWidget(self.menu_bar)
        root.addWidget(self.area, 1)
        root.addWidget(self.taskbar)

        self.icons: list[DesktopIcon] = []
        for i, (label, tool) in enumerate(DESKTOP_ICONS):
            icon = DesktopIcon(label, lambda t=tool: container.open_tool(t), self.area)
            icon.move(ICON_MARGIN, ICON_MARGIN + i * ICON_SPACING)
            self.icons.append(icon)

        bus = container.event_bus
        for event_type in WINDOW_EVENTS:
            self._subs.append(bus.subscribe_weak(event_type, self._on_window_event))
        self._subs.append(bus.subscribe_weak(ChromeChanged, self._on_chrome_changed))
        self._subs.append(bus.subscribe_weak(ToolUnavailable, self._on_tool_unavailable))

        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)
            self._filter_installed = True

        self._sync()
        chrome = container.chrome
        self._render_chrome(chrome.start_menu_open, chrome.open_menu)

    # --- Queries (used by tests) ---
    def frame(self, window_id: int) -> WindowFrame | None:
        return self._frames.get(window_id)

    def frame_ids(self) -> list[int]:
        """Ids in paint order, bottom first."""
        return [w.id for w in self._container.windows.list() if w.id in self._frames]

    def to_desktop(self, global_pos: QPoint) -> QPoint:
        return self.area.mapFromGlobal(global_pos)

    # --- Store -> widgets ---
    def _on_window_event(self, event: object) -> None:
        if isinstance(event, WindowMoved):
            frame = self._frames.get(event.window_id)
            if frame is not None:
                frame.move(event.x, event.y)
                return
        self._sync()

    def _sync(self) -> None:
        entities = self._container.windows.list()
        live = {e.id for e in entities}
        for window_id in [i for i in self._frames if i not in live]:
            self._destroy_frame(self._frames.pop(window_id))
        for entity in entities:
            frame = self._frames.get(entity.id)
            if frame is None:
                frame = self._create_frame(entity)
                self._frames[entity.id] = frame
            else:
                frame.apply(entity)
            frame.raise_()

    def _create_frame(self, entity: WindowEntity) -> WindowFrame:
        factory = PANEL_FACTORIES.get(entity.tool)
        try:
            if factory is None:
                raise KeyError(f"No panel for {entity.tool_name}")
            body = factory(self._container, entity.id)
        except Exception as exc:
            log.exception("Failed to build panel '%s'", entity.tool_name, extra={"tool": entity.tool_name})
            body = ErrorWidget(entity.tool_name, exc, traceback.format_exc())
        frame = WindowFrame(entity, body, self._container, self.to_desktop, self.area)
        frame.show()
        return frame

    def _destroy_frame(self, frame: WindowFrame) -> None:
        frame.teardown()
        frame.hide()
        frame.deleteLater()

    # --- Chrome ---
    def _on_chrome_changed(self, event: ChromeChanged) -> None:
        self._render_chrome(event.start_menu_open, None if event.open_menu is None else Menu(event.open_menu))

    def _render_chrome(self, start_menu_open: bool, open_menu: Menu | None) -> None:
        self.menu_bar.render_state(open_menu)
        if start_menu_open:
            self.start_menu.adjustSize()
            self.start_menu.move(0, self.taskbar.y() - self.start_menu.height())
            self.start_menu.show()
            self.start_menu.raise_()
        else:
            self.start_menu.hide()

    def _on_tool_unavailable(self, event: ToolUnavailable) -> None:
        notifications = self._container.notifications
        if notifications is not None:
            # After the menu that triggered it has closed.
            QTimer.singleShot(0, lambda: notifications.notice(event.message))

    # --- Pointer presses anywhere in the app ---
    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if (
            event.type() == QEvent.Type.MouseButtonPress
            and isinstance(event, QMouseEvent)
            and obj.isWidgetType()
        ):
            self._on_press(obj, event.globalPosition().toPoint())
        return False

    def _on_press(self, target: QObject, global_pos: QPoint) -> None:
        chrome = self._container.chrome
        if chrome.start_menu_open and not _contains(self.start_menu, global_pos):
            chrome.press_outside_start_menu(
                on_start_button=_contains(self.taskbar.start_button, global_pos)
            )
        if chrome.open_menu is not None and not self.menu_bar.contains_global(global_pos):
            chrome.press_outside_menu_bar()
        frame = _enclosing_frame(target)
        if frame is not None and self._frames.get(frame.window_id) is frame:
            self._container.windows.focus(frame.window_id)

    def teardown(self) -> None:
        if self._filter_installed:
            app = QApplication.instance()
            if app is not None:
                app.removeEventFilter(self)
            self._filter_installed = False
        bus = self._container.event_bus
        for sub in self._subs:
            bus.unsubscribe(sub)
        self._subs.clear()
        self._container.drag.end()
        for frame in self._frames.values():
            self._destroy_frame(frame)
        self._frames.clear()
        self.taskbar.teardown()


def _contains(widget: QWidget, global_pos: QPoint) -> bool:
    return widget.isVisible() and widget.rect().contains(widget.mapFromGlobal(global_pos))


def _enclosing_frame(obj: QObject | None) -> WindowFrame | None:
    while obj is not None:
        if isinstance(obj, WindowFrame):
            return obj
        obj = obj.parent()
    return None
