"""
Unit tests for the MetroNetwork graph model and Connection.
"""

import pytest
from metroplanner.core.models.connection import Connection
from metroplanner.core.models.metro_line import MetroLine
from metroplanner.core.models.network import MetroNetwork, NetworkFrozenError, DEFAULT_SPEED_KMH


class TestConnection:
    """Test Connection model."""

    def test_travel_time_from_speed(self):
        """Test travel time is distance over reference speed in minutes."""
        connection = Connection.create(to=1, distance=3.5, line=MetroLine.AQUA, speed_kmh=35.0)
        assert connection.travel_time == pytest.approx(6.0)

    def test_cost_by_metric(self):
        """Test raw edge cost for each metric."""
        connection = Connection.create(to=1, distance=7.0, line=MetroLine.RED, speed_kmh=35.0)
        assert connection.cost(minimize_time=True) == pytest.approx(12.0)
        assert connection.cost(minimize_time=False) == 7.0


class TestNetworkConstruction:
    """Test building a MetroNetwork."""

    def test_default_speed(self):
        """Test default reference speed."""
        assert MetroNetwork().speed_kmh == DEFAULT_SPEED_KMH == 35.0

    @pytest.mark.parametrize("speed", [0, -10.0])
    def test_invalid_speed_rejected(self, speed):
        """Test non-positive speed raises ValueError."""
        with pytest.raises(ValueError):
            MetroNetwork(speed_kmh=speed)

    def test_add_station_idempotent(self):
        """Test indices are dense and repeated names keep their index."""
        network = MetroNetwork()

        assert network.add_station("Vanaz") == 0
        assert network.add_station("Ramwadi") == 1
        assert network.add_station("Vanaz") == 0
        assert network.station_count == 2

    def test_connect_is_bidirectional(self):
        """Test connect adds both directions and tags both stations."""
        network = MetroNetwork()
        network.connect("Vanaz", "Anand Nagar", 1.0, MetroLine.AQUA)

        vanaz = network.get_index("Vanaz")
        anand = network.get_index("Anand Nagar")

        forward = network.find_connection(vanaz, anand)
        backward = network.find_connection(anand, vanaz)
        assert forward.distance == backward.distance == 1.0
        assert forward.line == backward.line == MetroLine.AQUA
        assert network.get_station("Vanaz").serves_line(MetroLine.AQUA)
        assert network.get_station("Anand Nagar").serves_line(MetroLine.AQUA)

    def test_parallel_connections_on_different_lines(self):
        """Test a segment shared by two lines keeps one connection per line."""
        network = MetroNetwork()
        network.connect("Shivaji Nagar", "Civil Court", 1.4, MetroLine.PURPLE)
        network.connect("Shivaji Nagar", "Civil Court", 1.4, MetroLine.RED)

        shivaji = network.get_index("Shivaji Nagar")
        civil = network.get_index("Civil Court")

        assert len(network.connections_from(shivaji)) == 2
        assert network.find_connection(shivaji, civil, MetroLine.RED).line == MetroLine.RED
        assert network.find_connection(shivaji, civil, MetroLine.AQUA) is None
        assert network.get_station("Civil Court").is_interchange

    def test_freeze_blocks_changes(self):
        """Test a frozen network rejects new stations and connections."""
        network = MetroNetwork()
        network.connect("A", "B", 1.0, MetroLine.PURPLE)
        network.freeze()

        assert network.is_frozen
        assert network.add_station("A") == 0
        with pytest.raises(NetworkFrozenError):
            network.add_station("C")
        with pytest.raises(NetworkFrozenError):
            network.connect("A", "B", 1.0, MetroLine.AQUA)


class TestNetworkLookups:
    """Test read-only queries on a MetroNetwork."""

    def test_unknown_station_lookups(self, synthetic_network):
        """Test lookups for a name that is not in the network."""
        assert synthetic_network.get_index("Z") is None
        assert synthetic_network.get_station("Z") is None
        assert not synthetic_network.has_station("Z")
        assert "Z" not in synthetic_network

    def test_all_stations_sorted(self, synthetic_network):
        """Test all station names come back sorted."""
        assert synthetic_network.all_stations() == ["A", "B", "C", "D", "E"]
        assert len(synthetic_network) == 5

    def test_stations_on_line(self, synthetic_network):
        """Test per-line station listing."""
        assert synthetic_network.stations_on_line(MetroLine.PURPLE) == ["A", "B", "C"]
        assert synthetic_network.stations_on_line(MetroLine.AQUA) == ["B", "C", "D"]
        assert synthetic_network.stations_on_line(MetroLine.RED) == []

    def test_search_by_substring_case_insensitive(self, pune_network):
        """Test substring search ignores case and sorts results."""
        matches = pune_network.search_by_substring("BANER")
        assert matches == ["Baner", "Baner Gaon"]

    def test_search_by_substring_no_match(self, pune_network):
        """Test substring search with no hits."""
        assert pune_network.search_by_substring("Mumbai") == []

    def test_network_statistics(self, synthetic_network):
        """Test station and connection counts."""
        stats = synthetic_network.get_network_statistics()

        assert stats["total_stations"] == 5
        assert stats["stations_per_line"] == {
            MetroLine.PURPLE: 3,
            MetroLine.AQUA: 3,
            MetroLine.RED: 0,
        }
        assert stats["interchange_stations"] == 2
        assert stats["total_connections"] == 4

    def test_stations_in_index_order(self, synthetic_network):
        """Test stations property lists stations by index."""
        names = [station.name for station in synthetic_network.stations]
        assert names == ["A", "B", "C", "D", "E"]
        assert synthetic_network.get_station_by_index(2).name == "C"
