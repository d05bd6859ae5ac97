"""
ThemeManager: light/dark token sets, runtime switch from the View menu,
QPalette and the application stylesheet for the shell chrome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from paskanet.ui.theme.tokens import DARK, LIGHT, TokenSet, Tokens, apply_token_set

if TYPE_CHECKING:
    from paskanet.ui.infrastructure.settings import AppSettings

THEME_LIGHT = "light"
THEME_DARK = "dark"


class ThemeManager(QObject):
    """Current theme; injected through the Container, never a global."""

    theme_changed = Signal(str)  # theme name

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings
        self._current: str | None = None

    def get_theme(self) -> str:
        return self._current or THEME_LIGHT

    def set_theme(self, name: str) -> None:
        if name not in (THEME_LIGHT, THEME_DARK):
            name = THEME_LIGHT
        if name == self._current:
            return
        self._current = name
        source = DARK if name == THEME_DARK else LIGHT
        apply_token_set(source)
        self._apply_palette(source)
        self._apply_stylesheet(source)
        if self._settings:
            self._settings.set_theme(name)
            self._settings.sync()
        self.theme_changed.emit(name)

    def tokens(self) -> TokenSet:
        return Tokens

    def _apply_palette(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not app:
            return
        pal = QPalette()
        pal.setColor(QPalette.ColorRole.Window, QColor(t.surface))
        pal.setColor(QPalette.ColorRole.Base, QColor(t.surface_alt))
        pal.setColor(QPalette.ColorRole.Button, QColor(t.surface))
        pal.setColor(QPalette.ColorRole.WindowText, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.ButtonText, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.Text, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.Highlight, QColor(t.accent))
        pal.setColor(QPalette.ColorRole.HighlightedText, QColor(t.text_on_accent))
        app.setPalette(pal)

    def _apply_stylesheet(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not app:
            return
        app.setStyleSheet(_build_application_stylesheet(t))


def _build_application_stylesheet(t: TokenSet) -> str:
    """Single global stylesheet so every screen follows a theme switch."""
    return f"""
        #desktop {{
            background-color: {t.desktop};
        }}
        #loginScreen, #shutdownScreen {{
            background-color: {t.desktop};
        }}
        #loginBox {{
            background-color: {t.surface};
            border: 1px solid {t.border};
            padding: {t.space_lg}px;
        }}
        #loginError {{
            color: {t.error};
        }}
        #shutdownScreen QLabel {{
            color: #ffffff;
            font-size: 22px;
        }}
        #windowFrame {{
            background-color: {t.surface};
            border: 1px solid {t.border};
        }}
        #titleBar {{
            background-color: {t.title_bar};
            min-height: {t.title_bar_height}px;
            max-height: {t.title_bar_height}px;
        }}
        #titleBarText {{
            color: {t.title_bar_text};
            font-weight: 600;
        }}
        #titleBarButton {{
            background: transparent;
            color: {t.title_bar_text};
            border: none;
            min-width: 28px;
        }}
        #titleBarButton:disabled {{
            color: {t.text_secondary};
        }}
        #titleBarButton[role="close"]:hover {{
            background-color: {t.error};
        }}
        #menuBar, #menuDropdown {{
            background-color: {t.menu_bar};
            color: {t.text_primary};
            border-bottom: 1px solid {t.border};
        }}
        #menuDropdown {{
            border: 1px solid {t.border};
        }}
        #menuItem, #dropdownItem {{
            background: transparent;
            color: {t.text_primary};
            border: none;
            padding: {t.space_sm}px {t.space_md}px;
            text-align: left;
        }}
        #menuItem:checked, #menuItem:hover, #dropdownItem:hover {{
            background-color: {t.accent};
            color: {t.text_on_accent};
        }}
        #taskbar {{
            background-color: {t.taskbar};
            min-height: {t.taskbar_height}px;
            max-height: {t.taskbar_height}px;
        }}
        #startButton {{
            background-color: {t.accent};
            color: {t.text_on_accent};
            border: none;
            font-weight: bold;
            min-width: 48px;
        }}
        #taskbarClock {{
            color: #ffffff;
            padding: 0 {t.space_md}px;
        }}
        #startMenu {{
            background-color: {t.taskbar};
            border: 1px solid {t.border};
        }}
        #startMenu QPushButton {{
            background: transparent;
            color: #ffffff;
            border: none;
            padding: {t.space_md}px {t.space_lg}px;
            text-align: left;
        }}
        #startMenu QPushButton:hover {{
            background-color: {t.accent};
        }}
        #desktopIcon QLabel {{
            color: #ffffff;
        }}
        #consoleBody {{
            background-color: #0c0c0c;
            color: #cccccc;
            font-family: Consolas, "Courier New", monospace;
            font-size: 12px;
            border: none;
        }}
        #consoleInput, #consolePrompt {{
            background-color: #0c0c0c;
            color: #cccccc;
            font-family: Consolas, "Courier New", monospace;
            font-size: 12px;
            border: none;
        }}
        #card {{
            background-color: {t.surface_alt};
            border: 1px solid {t.border};
        }}
        #metricValue {{
            font-size: 26px;
            font-weight: 600;
        }}
        #primaryButton {{
            background-color: {t.accent};
            color: {t.text_on_accent};
            border: none;
            padding: {t.space_sm}px {t.space_lg}px;
        }}
        #primaryButton:hover {{
            background-color: {t.accent_hover};
        }}
        #primaryButton:disabled {{
            background-color: {t.border};
            color: {t.text_secondary};
        }}
        QProgressBar {{
            border: 1px solid {t.border};
            text-align: center;
        }}
        QProgressBar::chunk {{
            background: {t.accent};
        }}
    """
