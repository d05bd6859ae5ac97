"""
Metric jitter: pure step functions that turn one snapshot into the next.

Numbers are cosmetic. Each step takes a numpy Generator so tests can seed it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Generic, TypeVar

import numpy as np

from paskanet.config import CPU_HISTORY_LENGTH
from paskanet.services.mock_data import ProcessRow, ServerRow

T = TypeVar("T")

CPU_SAMPLE_RANGE = (10.0, 90.0)
SERVER_FLOOR, SERVER_CEILING = 10, 99


class MetricStream(Generic[T]):
    """Current snapshot plus the step that produces the next one."""

    def __init__(
        self,
        initial: T,
        step: Callable[[T, np.random.Generator], T],
        rng: np.random.Generator | None = None,
    ) -> None:
        self._snapshot = initial
        self._step = step
        self._rng = rng if rng is not None else np.random.default_rng()

    @property
    def snapshot(self) -> T:
        return self._snapshot

    def tick(self) -> T:
        self._snapshot = self._step(self._snapshot, self._rng)
        return self._snapshot


def empty_cpu_history(length: int = CPU_HISTORY_LENGTH) -> tuple[float, ...]:
    return (0.0,) * length


def next_cpu_history(history: tuple[float, ...], rng: np.random.Generator) -> tuple[float, ...]:
    low, high = CPU_SAMPLE_RANGE
    return (*history[1:], float(rng.uniform(low, high)))


def jitter_processes(
    rows: tuple[ProcessRow, ...], rng: np.random.Generator
) -> tuple[ProcessRow, ...]:
    out = []
    for p in rows:
        cpu = int(np.clip(p.cpu + int(rng.integers(-2, 3)), 0, 100))
        memory = float(
            np.clip(p.memory + int(rng.integers(-5, 5)), p.memory * 0.95, p.memory * 1.05)
        )
        out.append(replace(p, cpu=cpu, memory=memory))
    return tuple(out)


def jitter_servers(rows: tuple[ServerRow, ...], rng: np.random.Generator) -> tuple[ServerRow, ...]:
    out = []
    for s in rows:
        if s.status == "offline":
            out.append(s)
            continue
        cpu = int(np.clip(s.cpu + int(rng.integers(-3, 4)), SERVER_FLOOR, SERVER_CEILING))
        mem = int(np.clip(s.mem + int(rng.integers(-2, 3)), SERVER_FLOOR, SERVER_CEILING))
        out.append(replace(s, cpu=cpu, mem=mem))
    return tuple(out)


def by_cpu_desc(rows: Sequence[ProcessRow]) -> list[ProcessRow]:
    return sorted(rows, key=lambda p: p.cpu, reverse=True)
