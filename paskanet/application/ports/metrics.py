"""Application port for metric feeds consumed by the monitor panels.

The window manager never depends on this; only panel widgets subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Cancellable(Protocol):
    def cancel(self) -> None: ...


@runtime_checkable
class MetricFeedPort(Protocol[T]):
    @property
    def snapshot(self) -> T:
        """Latest snapshot, for the first paint before the first tick."""

    def subscribe(self, interval_ms: int, callback: Callable[[T], None]) -> Cancellable:
        """Deliver a fresh snapshot every interval_ms until cancelled."""
