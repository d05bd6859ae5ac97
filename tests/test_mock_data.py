from __future__ import annotations

from pathlib import Path

import pytest

from paskanet.core.errors import InfrastructureError
from paskanet.services.mock_data import load_mock_data


def test_bundled_mock_data_loads() -> None:
    data = load_mock_data()

    assert len(data.processes) == 6
    assert len(data.services) == 7
    assert len(data.events) == 6
    assert [d.status for d in data.drives] == ["OK", "Needs optimization"]
    assert [s.name for s in data.servers][0] == "PN2-WEB-01"
    assert data.servers[-1].status == "offline"
    assert any("Error" in line for line in data.server_logs)


def test_missing_file_raises_infrastructure_error(tmp_path: Path) -> None:
    with pytest.raises(InfrastructureError):
        load_mock_data(tmp_path / "nope.yaml")


def test_malformed_yaml_raises_infrastructure_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("processes: [unclosed\n", encoding="utf-8")

    with pytest.raises(InfrastructureError):
        load_mock_data(path)


def test_unknown_field_raises_infrastructure_error(tmp_path: Path) -> None:
    path = tmp_path / "extra.yaml"
    path.write_text("drives:\n  - {name: C, media: SSD, status: OK, colour: red}\n", encoding="utf-8")

    with pytest.raises(InfrastructureError):
        load_mock_data(path)


def test_empty_file_gives_empty_tables(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    data = load_mock_data(path)

    assert data.processes == ()
    assert data.server_logs == ()
