"""
Chrome controls: start menu and menu bar open/closed state.

Both dismiss on a press outside of them. Items only ever call back into the
shell (open a tool, shut down); the chrome keeps no other state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from paskanet.config import TOOLS_LIST
from paskanet.core.events import ChromeChanged, EventBus

log = logging.getLogger(__name__)


class Menu(str, Enum):
    MANAGE = "Manage"
    TOOLS = "Tools"
    VIEW = "View"
    HELP = "Help"


class ChromeControls:
    def __init__(
        self,
        open_tool: Callable[[str], Any],
        shutdown: Callable[[], Any],
        *,
        event_bus: EventBus | None = None,
        tools: tuple[str, ...] = TOOLS_LIST,
    ) -> None:
        self._open_tool = open_tool
        self._shutdown = shutdown
        self._bus = event_bus
        self._tools = tuple(tools)
        self._start_menu_open = False
        self._open_menu: Menu | None = None

    @property
    def tools(self) -> tuple[str, ...]:
        return self._tools

    @property
    def start_menu_open(self) -> bool:
        return self._start_menu_open

    @property
    def open_menu(self) -> Menu | None:
        return self._open_menu

    # --- Start menu ---
    def toggle_start_menu(self) -> None:
        self._start_menu_open = not self._start_menu_open
        self._changed()

    def close_start_menu(self) -> None:
        if self._start_menu_open:
            self._start_menu_open = False
            self._changed()

    def press_outside_start_menu(self, *, on_start_button: bool = False) -> None:
        # The start button toggles by itself; closing here would reopen it.
        if not on_start_button:
            self.close_start_menu()

    # --- Menu bar ---
    def toggle_menu(self, menu: Menu | str) -> None:
        menu = Menu(menu)
        self._open_menu = None if self._open_menu is menu else menu
        self._changed()

    def close_menus(self) -> None:
        if self._open_menu is not None:
            self._open_menu = None
            self._changed()

    def press_outside_menu_bar(self) -> None:
        self.close_menus()

    def choose_tool(self, tool_name: str) -> Any:
        result = self._open_tool(tool_name)
        self.close_menus()
        return result

    def choose_shutdown(self) -> None:
        self._shutdown()

    def reset(self) -> None:
        """Everything closed; used when the session returns to the login gate."""
        if self._start_menu_open or self._open_menu is not None:
            self._start_menu_open = False
            self._open_menu = None
            self._changed()

    def _changed(self) -> None:
        menu = None if self._open_menu is None else self._open_menu.value
        log.debug("Chrome state: start_menu=%s menu=%s", self._start_menu_open, menu)
        if self._bus is not None:
            self._bus.publish(ChromeChanged(start_menu_open=self._start_menu_open, open_menu=menu))
