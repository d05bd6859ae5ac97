"""
Drag controller: one pointer gesture (press on a title bar, move, release).

Holds only the window id and the grab offset; every position change goes
through the store, so a window closed mid-gesture just stops moving.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from paskanet.wm.store import Point, WindowStore

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Dragging:
    window_id: int
    grab_offset: Point


class DragController:
    """Idle <-> Dragging(window_id, grab_offset). At most one gesture at a time."""

    def __init__(self, store: WindowStore) -> None:
        self._store = store
        self._active: Dragging | None = None

    @property
    def active(self) -> Dragging | None:
        return self._active

    @property
    def is_dragging(self) -> bool:
        return self._active is not None

    def begin(self, window_id: int, pointer_x: int, pointer_y: int) -> bool:
        """Start dragging window_id. Raises the window first; False if it is gone."""
        entity = self._store.get(window_id)
        if entity is None:
            return False
        self._store.focus(window_id)
        offset = Point(int(pointer_x), int(pointer_y)) - entity.position
        self._active = Dragging(window_id=window_id, grab_offset=offset)
        log.debug("Drag started on window %d", window_id, extra={"window_id": window_id})
        return True

    def move(self, pointer_x: int, pointer_y: int) -> bool:
        if self._active is None:
            return False
        target = Point(int(pointer_x), int(pointer_y)) - self._active.grab_offset
        return self._store.set_position(self._active.window_id, target.x, target.y)

    def end(self) -> None:
        if self._active is None:
            return
        log.debug("Drag ended on window %d", self._active.window_id)
        self._active = None
