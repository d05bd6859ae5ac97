"""
QSettings wrapper: host window geometry and theme.

Panel layout inside the desktop is deliberately not stored.
"""
from __future__ import annotations

from typing import cast

from PySide6.QtCore import QByteArray, QSettings


class AppSettings:
    """Preferences via QSettings (platform-specific path)."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._q = settings or QSettings("Paskanet", "Paskanet II")

    # --- Host window ---
    def get_main_window_geometry(self) -> QByteArray | None:
        return cast(QByteArray | None, self._q.value("mainWindow/geometry", None, QByteArray))

    def set_main_window_geometry(self, geometry: QByteArray) -> None:
        self._q.setValue("mainWindow/geometry", geometry)

    # --- Theme ---
    def get_theme(self) -> str:
        return str(self._q.value("theme/name", "light", str))  # "light" | "dark"

    def set_theme(self, name: str) -> None:
        self._q.setValue("theme/name", name)

    def sync(self) -> None:
        self._q.sync()
