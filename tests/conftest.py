"""
Global pytest configuration and fixtures.
"""

import json
import pytest
from pathlib import Path

from metroplanner.core.models.metro_line import MetroLine
from metroplanner.core.models.network import MetroNetwork
from metroplanner.core.services.json_network_repository import JsonNetworkRepository
from metroplanner.core.services.route_service import RouteService
from metroplanner.core.services.station_service import StationService
from metroplanner.managers.config_manager import ConfigData, RoutingConfig, LoggingConfig


@pytest.fixture
def synthetic_network():
    """
    Provide a small two-line network.

    Purple: A -1.0- B -2.0- C
    Aqua:        B -1.0- C -1.0- D
    E is isolated.
    """
    network = MetroNetwork()
    network.connect("A", "B", 1.0, MetroLine.PURPLE)
    network.connect("B", "C", 2.0, MetroLine.PURPLE)
    network.connect("B", "C", 1.0, MetroLine.AQUA)
    network.connect("C", "D", 1.0, MetroLine.AQUA)
    network.add_station("E")
    network.freeze()
    return network


@pytest.fixture(scope="session")
def pune_network():
    """Provide the packaged Pune Metro network."""
    return JsonNetworkRepository().load_network()


@pytest.fixture
def routing_config():
    """Provide the default routing configuration."""
    return RoutingConfig()


@pytest.fixture
def route_service(pune_network, routing_config):
    """Provide a route service over the Pune Metro network."""
    return RouteService(pune_network, routing_config)


@pytest.fixture
def station_service(pune_network):
    """Provide a station service over the Pune Metro network."""
    return StationService(pune_network)


LINES_DATA_DIR = Path(__file__).parent.parent / "metroplanner" / "data" / "lines"


def load_segments(file_name):
    """Read the raw segment list of one packaged line file."""
    with open(LINES_DATA_DIR / file_name, "r", encoding="utf-8") as f:
        return json.load(f)["segments"]


@pytest.fixture
def aqua_segments():
    """Provide the raw Aqua Line segment data."""
    return load_segments("aqua_line.json")


@pytest.fixture
def purple_segments():
    """Provide the raw Purple Line segment data."""
    return load_segments("purple_line.json")


@pytest.fixture
def quiet_config_file(tmp_path):
    """Provide a config file path whose logging stays off disk."""
    config_path = tmp_path / "config.json"
    config = ConfigData(logging=LoggingConfig(level="WARNING", log_to_file=False))
    config_path.write_text(json.dumps(config.model_dump()), encoding="utf-8")
    return config_path


def write_line_file(directory: Path, file_name: str, line_key: str, segments):
    """Write one line data file in the packaged format."""
    directory.mkdir(parents=True, exist_ok=True)
    payload = {
        "metadata": {"line": line_key, "line_name": line_key.title(), "network": "Test"},
        "segments": segments,
    }
    (directory / file_name).write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    """Provide a small valid data directory with an index file."""
    root = tmp_path / "data"
    lines = root / "lines"
    write_line_file(lines, "purple_line.json", "purple", [
        {"from": "A", "to": "B", "distance_km": 1.0},
        {"from": "B", "to": "C", "distance_km": 2.0},
    ])
    write_line_file(lines, "aqua_line.json", "aqua", [
        {"from": "C", "to": "D", "distance_km": 1.5},
    ])
    index = {
        "network": "Test",
        "data_version": "9.9.9",
        "lines": [{"file": "purple_line.json"}, {"file": "aqua_line.json"}],
    }
    (root / "lines_index.json").write_text(json.dumps(index), encoding="utf-8")
    return root


@pytest.fixture
def line_file_writer():
    """Provide a helper that writes line data files."""
    return write_line_file
