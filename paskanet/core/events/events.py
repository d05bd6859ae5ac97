"""Shell events published on the EventBus.

The view layer re-renders from the store when it sees any of the window events.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WindowOpened:
    window_id: int
    tool: str


@dataclass(frozen=True, slots=True)
class WindowClosed:
    window_id: int


@dataclass(frozen=True, slots=True)
class WindowFocused:
    window_id: int


@dataclass(frozen=True, slots=True)
class WindowMoved:
    window_id: int
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class WindowsCleared:
    count: int


@dataclass(frozen=True, slots=True)
class ToolUnavailable:
    tool: str

    @property
    def message(self) -> str:
        return f'Tool "{self.tool}" is not available.'


@dataclass(frozen=True, slots=True)
class SessionModeChanged:
    old: str
    new: str


@dataclass(frozen=True, slots=True)
class LoginRejected:
    message: str


@dataclass(frozen=True, slots=True)
class ChromeChanged:
    start_menu_open: bool
    open_menu: str | None
