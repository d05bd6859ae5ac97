"""Window manager: panel registry, window store, drag gesture, session and chrome state.

Pure Python, no Qt import. The UI renders from these objects and sends every
pointer/keyboard intent back through their operations.
"""

from paskanet.wm.chrome import ChromeControls, Menu
from paskanet.wm.drag import DragController, Dragging
from paskanet.wm.registry import PanelRegistry, SizePolicy, ToolKind, ToolNotFound, ToolSpec
from paskanet.wm.session import SessionMode, ShellSession
from paskanet.wm.store import Point, Size, WindowEntity, WindowStore

__all__ = [
    "ChromeControls",
    "Menu",
    "DragController",
    "Dragging",
    "PanelRegistry",
    "SizePolicy",
    "ToolKind",
    "ToolNotFound",
    "ToolSpec",
    "SessionMode",
    "ShellSession",
    "Point",
    "Size",
    "WindowEntity",
    "WindowStore",
]
