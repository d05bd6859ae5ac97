"""Mock tables for the tool panels, loaded from resources/mock_data.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from paskanet.config import MOCK_DATA_PATH
from paskanet.core.errors import InfrastructureError


@dataclass(frozen=True, slots=True)
class ProcessRow:
    name: str
    pid: int
    cpu: int
    memory: float


@dataclass(frozen=True, slots=True)
class ServiceRow:
    name: str
    status: str
    description: str


@dataclass(frozen=True, slots=True)
class EventRow:
    level: str
    source: str
    id: int
    message: str


@dataclass(frozen=True, slots=True)
class DriveRow:
    name: str
    media: str
    status: str


@dataclass(frozen=True, slots=True)
class CleanupCandidate:
    label: str
    size_mb: float


@dataclass(frozen=True, slots=True)
class ServerRow:
    name: str
    ip: str
    status: str
    cpu: int
    mem: int
    disk: int
    net_up: float
    net_down: float


@dataclass(frozen=True)
class MockData:
    processes: tuple[ProcessRow, ...] = ()
    services: tuple[ServiceRow, ...] = ()
    events: tuple[EventRow, ...] = ()
    drives: tuple[DriveRow, ...] = ()
    cleanup_candidates: tuple[CleanupCandidate, ...] = ()
    servers: tuple[ServerRow, ...] = ()
    server_logs: tuple[str, ...] = field(default_factory=tuple)


def _load_yaml(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _rows(data: dict[str, Any], key: str, row_type: type) -> tuple:
    return tuple(row_type(**item) for item in data.get(key) or [])


def load_mock_data(path: Path = MOCK_DATA_PATH) -> MockData:
    try:
        data = _load_yaml(path)
    except (OSError, yaml.YAMLError) as exc:
        raise InfrastructureError(f"Cannot read mock data from {path}", cause=exc) from exc
    try:
        return MockData(
            processes=_rows(data, "processes", ProcessRow),
            services=_rows(data, "services", ServiceRow),
            events=_rows(data, "events", EventRow),
            drives=_rows(data, "drives", DriveRow),
            cleanup_candidates=_rows(data, "cleanup_candidates", CleanupCandidate),
            servers=_rows(data, "servers", ServerRow),
            server_logs=tuple(str(line) for line in data.get("server_logs") or []),
        )
    except TypeError as exc:
        raise InfrastructureError(f"Malformed mock data in {path}", cause=exc) from exc
