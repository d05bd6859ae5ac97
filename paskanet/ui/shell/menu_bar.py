"""
Application menu bar (Manage, Tools, View, Help) and its dropdown.

Open/closed state lives in ChromeControls; the widgets only render it. The
dropdown is parented to the desktop so it can float above the windows.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PySide6.QtCore import QPoint, Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from paskanet.config import OS_NAME
from paskanet.core.version import os_banner
from paskanet.terminal.session import COPYRIGHT_LINE
from paskanet.ui.theme.manager import THEME_DARK, THEME_LIGHT
from paskanet.wm.chrome import Menu

if TYPE_CHECKING:
    from paskanet.application.container import Container


class MenuDropdown(QFrame):
    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setObjectName("menuDropdown")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 2, 0, 2)
        self._layout.setSpacing(0)
        self.hide()

    def set_items(self, items: list[tuple[str, Callable[[], object]]]) -> None:
        while self._layout.count():
            child = self._layout.takeAt(0).widget()
            if child is not None:
                child.deleteLater()
        for label, action in items:
            btn = QPushButton(label)
            btn.setObjectName("dropdownItem")
            btn.clicked.connect(lambda checked=False, a=action: a())
            self._layout.addWidget(btn)
        self.adjustSize()

    def item_labels(self) -> list[str]:
        labels = []
        for i in range(self._layout.count()):
            w = self._layout.itemAt(i).widget()
            if isinstance(w, QPushButton):
                labels.append(w.text())
        return labels


class MenuBar(QFrame):
    def __init__(self, container: Container, overlay_parent: QWidget, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._container = container
        self._overlay_parent = overlay_parent
        self.setObjectName("menuBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        row = QHBoxLayout(self)
        row.setContentsMargins(4, 0, 4, 0)
        row.setSpacing(0)
        self._buttons: dict[Menu, QPushButton] = {}
        for menu in Menu:
            btn = QPushButton(menu.value)
            btn.setObjectName("menuItem")
            btn.setCheckable(True)
            btn.clicked.connect(lambda checked=False, m=menu: self._container.chrome.toggle_menu(m))
            row.addWidget(btn)
            self._buttons[menu] = btn
        row.addStretch(1)

        self.dropdown = MenuDropdown(overlay_parent)

    def button(self, menu: Menu) -> QPushButton:
        return self._buttons[menu]

    def contains_global(self, pos: QPoint) -> bool:
        """True for a press on the bar itself or inside the open dropdown."""
        if self.rect().contains(self.mapFromGlobal(pos)):
            return True
        return self.dropdown.isVisible() and self.dropdown.rect().contains(self.dropdown.mapFromGlobal(pos))

    def render_state(self, open_menu: Menu | None) -> None:
        for menu, btn in self._buttons.items():
            btn.setChecked(menu is open_menu)
        if open_menu is None:
            self.dropdown.hide()
            return
        self.dropdown.set_items(self._items_for(open_menu))
        anchor = self._buttons[open_menu]
        pos = self._overlay_parent.mapFromGlobal(anchor.mapToGlobal(QPoint(0, anchor.height())))
        self.dropdown.move(pos)
        self.dropdown.show()
        self.dropdown.raise_()

    def _items_for(self, menu: Menu) -> list[tuple[str, Callable[[], object]]]:
        chrome = self._container.chrome
        if menu is Menu.MANAGE:
            return [("Shutdown", self._shutdown)]
        if menu is Menu.TOOLS:
            return [(name, lambda n=name: chrome.choose_tool(n)) for name in chrome.tools]
        if menu is Menu.VIEW:
            return [
                ("Light theme", lambda: self._set_theme(THEME_LIGHT)),
                ("Dark theme", lambda: self._set_theme(THEME_DARK)),
            ]
        return [(f"About {OS_NAME}", self._about)]

    def _shutdown(self) -> None:
        chrome = self._container.chrome
        chrome.close_menus()
        chrome.choose_shutdown()

    def _set_theme(self, name: str) -> None:
        self._container.chrome.close_menus()
        if self._container.theme_manager is not None:
            self._container.theme_manager.set_theme(name)

    def _about(self) -> None:
        self._container.chrome.close_menus()
        if self._container.notifications is not None:
            self._container.notifications.notice(f"{os_banner()}\n{COPYRIGHT_LINE}", title="About")
