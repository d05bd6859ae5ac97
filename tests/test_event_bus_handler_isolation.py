from __future__ import annotations

from dataclasses import dataclass

import pytest

from paskanet.core.events.event_bus import EventBus


@dataclass(frozen=True)
class _Evt:
    value: int


def test_publish_continues_when_one_handler_raises(caplog: pytest.LogCaptureFixture) -> None:
    bus = EventBus()
    received: list[int] = []

    def broken(_evt: _Evt) -> None:
        raise RuntimeError("boom")

    def healthy(evt: _Evt) -> None:
        received.append(evt.value)

    bus.subscribe(_Evt, broken)
    bus.subscribe(_Evt, healthy)

    bus.publish(_Evt(7))

    assert received == [7]
    assert "Event handler failed" in caplog.text


def test_unsubscribe_stops_delivery() -> None:
    bus = EventBus()
    received: list[int] = []
    sub = bus.subscribe(_Evt, lambda e: received.append(e.value))

    bus.publish(_Evt(1))
    bus.unsubscribe(sub)
    bus.unsubscribe(sub)
    bus.publish(_Evt(2))

    assert received == [1]
    assert bus.handler_count(_Evt) == 0
