from __future__ import annotations

from paskanet.application.ports.scheduler import ManualScheduler


def test_callbacks_run_in_due_order() -> None:
    scheduler = ManualScheduler()
    order: list[str] = []
    scheduler.call_later(300, lambda: order.append("c"))
    scheduler.call_later(100, lambda: order.append("a"))
    scheduler.call_later(100, lambda: order.append("b"))

    assert scheduler.advance(250) == 2
    assert order == ["a", "b"]
    assert scheduler.advance(50) == 1
    assert order == ["a", "b", "c"]
    assert scheduler.now_ms == 300


def test_callback_scheduled_during_advance_runs_if_due() -> None:
    scheduler = ManualScheduler()
    seen: list[int] = []

    def first() -> None:
        seen.append(scheduler.now_ms)
        scheduler.call_later(100, lambda: seen.append(scheduler.now_ms))

    scheduler.call_later(100, first)
    scheduler.advance(500)

    assert seen == [100, 200]
    assert scheduler.pending == 0
