"""Server Manager dashboard helpers: clusters, memory in GB, log line levels."""

from __future__ import annotations

from collections.abc import Sequence

from paskanet.services.mock_data import ServerRow

TOTAL_MEMORY_GB = 32.0

CLUSTER_WEB = "Web Servers"
CLUSTER_DB = "Database Servers"
CLUSTER_OTHER = "Other Servers"


def cluster_servers(servers: Sequence[ServerRow]) -> dict[str, list[ServerRow]]:
    clusters: dict[str, list[ServerRow]] = {CLUSTER_WEB: [], CLUSTER_DB: [], CLUSTER_OTHER: []}
    for s in servers:
        if "WEB" in s.name:
            clusters[CLUSTER_WEB].append(s)
        elif "DB" in s.name:
            clusters[CLUSTER_DB].append(s)
        else:
            clusters[CLUSTER_OTHER].append(s)
    return clusters


def memory_usage_text(mem_percent: int) -> str:
    return f"{mem_percent / 100 * TOTAL_MEMORY_GB:.1f} / {TOTAL_MEMORY_GB:.1f} GB"


def is_error_line(line: str) -> bool:
    return "Error" in line


def find_server(servers: Sequence[ServerRow], name: str) -> ServerRow | None:
    return next((s for s in servers if s.name == name), None)
