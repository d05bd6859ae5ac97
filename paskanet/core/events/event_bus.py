from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, cast
from weakref import WeakMethod

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Subscription:
    event_type: type[object]
    handler: Callable[[object], None]


TEvent = TypeVar("TEvent")


class EventBus:
    """Synchronous in-process event bus for the shell's UI thread.

    Every mutation of the shell happens on one event-processing thread, so the
    bus keeps no lock. Handlers run in subscription order inside ``publish``;
    a handler that subscribes or unsubscribes while an event is being delivered
    only affects the next publish.
    """

    def __init__(self) -> None:
        self._subs: defaultdict[type[object], list[Callable[[object], None]]] = defaultdict(list)

    def subscribe(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        def _wrapped(event: object) -> None:
            handler(cast(TEvent, event))

        self._subs[event_type].append(_wrapped)
        return Subscription(event_type=event_type, handler=_wrapped)

    def subscribe_weak(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        """Subscribe a bound method without keeping its owner alive.

        Meant for panel widgets: once the widget is garbage-collected the
        subscription drops itself on the next publish.
        """

        try:
            wm: WeakMethod | None = WeakMethod(cast(Any, handler))
        except TypeError:
            wm = None

        if wm is None:
            return self.subscribe(event_type, handler)

        sub: Subscription

        def _wrapped(event: object) -> None:
            alive = wm()
            if alive is None:
                self.unsubscribe(sub)
                return
            alive(cast(TEvent, event))

        sub = Subscription(event_type=event_type, handler=_wrapped)
        self._subs[event_type].append(_wrapped)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        handlers = self._subs.get(subscription.event_type)
        if not handlers:
            return
        try:
            handlers.remove(subscription.handler)
        except ValueError:
            return

    def publish(self, event: object) -> None:
        for handler in list(self._subs.get(type(event), ())):
            try:
                handler(event)
            except Exception:
                log.exception(
                    "Event handler failed",
                    extra={"event": type(event).__name__},
                )

    def handler_count(self, event_type: type[object]) -> int:
        return len(self._subs.get(event_type, ()))

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subs.clear()
