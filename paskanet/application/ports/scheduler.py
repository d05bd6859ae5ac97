"""Application port for deferred callbacks (shutdown delay, metric feeds, tool timers).

The UI provides a QTimer-backed implementation; tests and headless runs use
ManualScheduler and advance time explicitly.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from typing import Protocol


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run callback once, on the UI thread, after delay_ms."""


class ManualScheduler:
    """Scheduler driven by explicit advance() calls. Callbacks run in due order."""

    def __init__(self) -> None:
        self._now_ms = 0
        self._seq = itertools.count()
        self._queue: list[tuple[int, int, Callable[[], None]]] = []

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self._now_ms + max(0, int(delay_ms)), next(self._seq), callback))

    def advance(self, delay_ms: int) -> int:
        """Move the clock forward, running every callback that falls due. Returns how many ran."""
        deadline = self._now_ms + max(0, int(delay_ms))
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            due, _, callback = heapq.heappop(self._queue)
            self._now_ms = due
            callback()
            ran += 1
        self._now_ms = deadline
        return ran
