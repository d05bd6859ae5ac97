"""
Timer-driven metric feeds: subscribe(interval_ms, callback) -> FeedSubscription.

A feed ticks its MetricStream on the shell scheduler and hands every snapshot
to the subscriber. Cancelling stops the re-arm; a tick that was already queued
becomes a no-op.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from paskanet.application.ports.scheduler import Scheduler
from paskanet.services.metrics import MetricStream

T = TypeVar("T")


class FeedSubscription:
    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ScheduledFeed(Generic[T]):
    def __init__(self, stream: MetricStream[T], scheduler: Scheduler) -> None:
        self._stream = stream
        self._scheduler = scheduler

    @property
    def snapshot(self) -> T:
        return self._stream.snapshot

    def subscribe(self, interval_ms: int, callback: Callable[[T], None]) -> FeedSubscription:
        sub = FeedSubscription()

        def _tick() -> None:
            if sub.cancelled:
                return
            callback(self._stream.tick())
            if not sub.cancelled:
                self._scheduler.call_later(interval_ms, _tick)

        self._scheduler.call_later(interval_ms, _tick)
        return sub
