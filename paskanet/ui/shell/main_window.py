"""
Host window: one stacked page per session mode (login, desktop, shutdown).
Only its own geometry is persisted.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QByteArray
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from paskanet.config import DEFAULT_VIEWPORT, OS_NAME
from paskanet.core.events import SessionModeChanged
from paskanet.core.version import get_version_string
from paskanet.ui.shell.desktop import DesktopView
from paskanet.ui.shell.login_screen import LoginScreen
from paskanet.ui.shell.screen_stack import ScreenController
from paskanet.ui.shell.shutdown_screen import ShutdownScreen
from paskanet.wm.session import SessionMode

if TYPE_CHECKING:
    from paskanet.application.container import Container
    from paskanet.ui.infrastructure.settings import AppSettings


class MainWindow(QMainWindow):
    def __init__(self, container: Container, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._container = container
        self._settings = settings
        self.setWindowTitle(f"{OS_NAME} - {get_version_string()}")
        self.setMinimumSize(800, 600)
        self.resize(*DEFAULT_VIEWPORT)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)
        self._screens = ScreenController(
            self._stack,
            {
                SessionMode.LOGGED_OUT: lambda: LoginScreen(container),
                SessionMode.DESKTOP: lambda: DesktopView(container),
                SessionMode.SHUTTING_DOWN: ShutdownScreen,
            },
        )
        self._sub = container.event_bus.subscribe_weak(SessionModeChanged, self._on_mode_changed)
        self._screens.show(container.session.mode)
        self._restore_geometry()

    @property
    def screens(self) -> ScreenController:
        return self._screens

    def _on_mode_changed(self, event: SessionModeChanged) -> None:
        self._screens.show(SessionMode(event.new))

    def _restore_geometry(self) -> None:
        if self._settings is None:
            return
        geom = self._settings.get_main_window_geometry()
        if isinstance(geom, QByteArray) and not geom.isEmpty():
            self.restoreGeometry(geom)

    def _save_geometry(self) -> None:
        if self._settings is None:
            return
        self._settings.set_main_window_geometry(self.saveGeometry())
        self._settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._save_geometry()
        self._container.event_bus.unsubscribe(self._sub)
        self._screens.dispose()
        super().closeEvent(event)
