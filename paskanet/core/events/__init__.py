"""Lightweight in-process event bus.

Decouples the window manager from the widgets that draw it: the core publishes
events, the UI subscribes and re-renders.
"""

from .event_bus import EventBus, Subscription
from .events import (
    ChromeChanged,
    LoginRejected,
    SessionModeChanged,
    ToolUnavailable,
    WindowClosed,
    WindowFocused,
    WindowMoved,
    WindowOpened,
    WindowsCleared,
)

WINDOW_EVENTS = (WindowOpened, WindowClosed, WindowFocused, WindowMoved, WindowsCleared)

__all__ = [
    "EventBus",
    "Subscription",
    "WINDOW_EVENTS",
    "WindowOpened",
    "WindowClosed",
    "WindowFocused",
    "WindowMoved",
    "WindowsCleared",
    "ToolUnavailable",
    "SessionModeChanged",
    "LoginRejected",
    "ChromeChanged",
]
