"""
Window entity store: the open panels, their position, size and stacking rank.

Single source of truth for the desktop view. Every operation is synchronous and
either fully applies or is a no-op; ids that are no longer present (callbacks
from a panel that was just closed) are absorbed silently.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, replace

from paskanet.config import (
    DEFAULT_VIEWPORT,
    DEFAULT_WINDOW_SIZE,
    SERVER_MANAGER_MARGINS,
    SERVER_MANAGER_ORIGIN,
    STAGGER_CYCLE,
    STAGGER_ORIGIN,
    STAGGER_STEP,
)
from paskanet.core.events import (
    EventBus,
    WindowClosed,
    WindowFocused,
    WindowMoved,
    WindowOpened,
    WindowsCleared,
)
from paskanet.wm.registry import PanelRegistry, SizePolicy, ToolKind, ToolNotFound, ToolSpec

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True, slots=True)
class Size:
    width: int
    height: int


@dataclass(slots=True)
class WindowEntity:
    id: int
    tool: ToolKind
    title: str
    position: Point
    size: Size
    z_index: int

    @property
    def tool_name(self) -> str:
        return self.tool.value


class WindowStore:
    """Ordered collection of open windows. Returns copies; mutate through the operations."""

    def __init__(
        self,
        registry: PanelRegistry,
        event_bus: EventBus | None = None,
        *,
        viewport: tuple[int, int] = DEFAULT_VIEWPORT,
    ) -> None:
        self._registry = registry
        self._bus = event_bus
        self._entities: dict[int, WindowEntity] = {}
        self._ids = itertools.count()
        self._viewport = Size(*viewport)
        self._locked = False

    # --- Gate (driven by the shell session) ---
    @property
    def locked(self) -> bool:
        return self._locked

    def set_locked(self, locked: bool) -> None:
        self._locked = locked

    @property
    def viewport(self) -> Size:
        return self._viewport

    def set_viewport(self, width: int, height: int) -> None:
        """Desktop area size; only windows opened afterwards are sized from it."""
        self._viewport = Size(max(0, int(width)), max(0, int(height)))

    # --- Queries ---
    def get(self, window_id: int) -> WindowEntity | None:
        entity = self._entities.get(window_id)
        return None if entity is None else replace(entity)

    def list(self) -> list[WindowEntity]:
        """Windows in paint order: ascending rank, so the last one is on top."""
        ordered = sorted(self._entities.values(), key=lambda e: (e.z_index, e.id))
        return [replace(e) for e in ordered]

    def top(self) -> int | None:
        if not self._entities:
            return None
        return max(self._entities.values(), key=lambda e: (e.z_index, e.id)).id

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, window_id: object) -> bool:
        return window_id in self._entities

    # --- Operations ---
    def open(self, tool_name: str) -> WindowEntity | ToolNotFound | None:
        """Open a window for tool_name on top of the stack.

        Returns the new window, ToolNotFound when the registry has no panel for
        the name, or None while the store is locked (not on the desktop).
        """
        if self._locked:
            log.debug("Ignoring open(%r): desktop is not active", tool_name)
            return None
        resolved = self._registry.resolve(tool_name)
        if isinstance(resolved, ToolNotFound):
            log.warning("Tool %r is not available", tool_name, extra={"tool": tool_name})
            return resolved

        window_id = next(self._ids)
        entity = WindowEntity(
            id=window_id,
            tool=resolved.kind,
            title=resolved.title,
            position=self._initial_position(resolved, window_id),
            size=self._initial_size(resolved),
            # Above the current top; equals count + 1 unless a close left a gap.
            z_index=self._max_rank() + 1,
        )
        self._entities[window_id] = entity
        log.debug("Opened window %d (%s)", window_id, tool_name, extra={"window_id": window_id})
        self._publish(WindowOpened(window_id=window_id, tool=tool_name))
        return replace(entity)

    def close(self, window_id: int) -> bool:
        """Remove a window. Remaining ranks are left as they are (gaps allowed)."""
        if self._locked or self._entities.pop(window_id, None) is None:
            return False
        log.debug("Closed window %d", window_id, extra={"window_id": window_id})
        self._publish(WindowClosed(window_id=window_id))
        return True

    def focus(self, window_id: int) -> bool:
        """Raise a window to the top rank. Returns False when nothing changed.

        The target takes the current maximum rank and every window ranked above
        its old slot moves down by one, so ranks stay dense after opens/focuses.
        """
        if self._locked:
            return False
        target = self._entities.get(window_id)
        if target is None:
            return False
        max_rank = self._max_rank()
        if target.z_index == max_rank:
            return False
        old_rank = target.z_index
        for entity in self._entities.values():
            if entity.z_index > old_rank:
                entity.z_index -= 1
        target.z_index = max_rank
        log.debug("Focused window %d", window_id, extra={"window_id": window_id})
        self._publish(WindowFocused(window_id=window_id))
        return True

    def set_position(self, window_id: int, x: int, y: int) -> bool:
        """Overwrite the top-left corner. No clamping: windows may leave the viewport."""
        if self._locked:
            return False
        entity = self._entities.get(window_id)
        if entity is None:
            return False
        entity.position = Point(int(x), int(y))
        self._publish(WindowMoved(window_id=window_id, x=entity.position.x, y=entity.position.y))
        return True

    def clear(self) -> int:
        """Destroy every window. The id counter keeps counting."""
        count = len(self._entities)
        self._entities.clear()
        if count:
            log.debug("Cleared %d window(s)", count)
        self._publish(WindowsCleared(count=count))
        return count

    # --- Helpers ---
    def _max_rank(self) -> int:
        return max((e.z_index for e in self._entities.values()), default=0)

    def _initial_position(self, spec: ToolSpec, window_id: int) -> Point:
        if spec.size_policy is SizePolicy.NEAR_FULLSCREEN:
            return Point(*SERVER_MANAGER_ORIGIN)
        offset = STAGGER_ORIGIN + (window_id % STAGGER_CYCLE) * STAGGER_STEP
        return Point(offset, offset)

    def _initial_size(self, spec: ToolSpec) -> Size:
        if spec.size_policy is SizePolicy.NEAR_FULLSCREEN:
            dw, dh = SERVER_MANAGER_MARGINS
            return Size(max(0, self._viewport.width - dw), max(0, self._viewport.height - dh))
        return Size(*DEFAULT_WINDOW_SIZE)

    def _publish(self, event: object) -> None:
        if self._bus is not None:
            self._bus.publish(event)
