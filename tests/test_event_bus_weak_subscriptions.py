from __future__ import annotations

import gc
from dataclasses import dataclass

from paskanet.core.events.event_bus import EventBus


@dataclass(frozen=True)
class _Evt:
    value: int


class _Listener:
    def __init__(self) -> None:
        self.seen: list[int] = []

    def on_evt(self, evt: _Evt) -> None:
        self.seen.append(evt.value)


def test_weak_subscription_delivers_while_owner_alive() -> None:
    bus = EventBus()
    listener = _Listener()
    bus.subscribe_weak(_Evt, listener.on_evt)

    bus.publish(_Evt(3))

    assert listener.seen == [3]


def test_weak_subscription_drops_itself_after_owner_is_collected() -> None:
    bus = EventBus()
    listener = _Listener()
    bus.subscribe_weak(_Evt, listener.on_evt)
    del listener
    gc.collect()

    bus.publish(_Evt(1))

    assert bus.handler_count(_Evt) == 0


def test_subscribe_weak_with_plain_function_falls_back_to_strong() -> None:
    bus = EventBus()
    seen: list[int] = []
    bus.subscribe_weak(_Evt, lambda e: seen.append(e.value))
    gc.collect()

    bus.publish(_Evt(5))

    assert seen == [5]
