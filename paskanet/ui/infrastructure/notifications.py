from __future__ import annotations

import logging

from PySide6.QtWidgets import QMessageBox, QWidget

from paskanet.config import OS_NAME

log = logging.getLogger(__name__)


class NotificationCenter:
    """Blocking notices for the shell.

    The desktop has no status bar, so everything the user must see goes through
    a modal message box parented to the host window.
    """

    def __init__(self, window: QWidget) -> None:
        self._window = window

    def notice(self, message: str, *, title: str = OS_NAME) -> None:
        """Blocking informational notice (e.g. a tool that is not available)."""
        log.info("Notice: %s", message)
        QMessageBox.information(self._window, title, message)

    def error(self, message: str) -> None:
        QMessageBox.critical(self._window, "Error", message)
