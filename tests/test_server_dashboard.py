from __future__ import annotations

from paskanet.services.dashboard import (
    cluster_servers,
    find_server,
    is_error_line,
    memory_usage_text,
)
from paskanet.services.mock_data import load_mock_data


def test_servers_are_grouped_by_name() -> None:
    clusters = cluster_servers(load_mock_data().servers)

    assert [s.name for s in clusters["Web Servers"]] == ["PN2-WEB-01", "PN2-WEB-02"]
    assert [s.name for s in clusters["Database Servers"]] == ["PN2-DB-01"]
    assert [s.name for s in clusters["Other Servers"]] == ["PN2-CACHE-01"]


def test_memory_usage_in_gigabytes() -> None:
    assert memory_usage_text(68) == "21.8 / 32.0 GB"
    assert memory_usage_text(0) == "0.0 / 32.0 GB"


def test_error_lines_are_detected() -> None:
    assert is_error_line("[Error] Failed to connect")
    assert not is_error_line("[Warning] High memory usage")


def test_find_server() -> None:
    servers = load_mock_data().servers

    assert find_server(servers, "PN2-DB-01").ip == "192.168.1.20"
    assert find_server(servers, "missing") is None
