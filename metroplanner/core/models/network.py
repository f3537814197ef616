"""
Metro Network Model

Stations, lines and weighted connections forming the static routing graph.
"""

import logging
from typing import Dict, List, Optional, Any

from .metro_line import MetroLine
from .station import Station
from .connection import Connection

logger = logging.getLogger(__name__)

DEFAULT_SPEED_KMH = 35.0


class NetworkFrozenError(Exception):
    """Raised when a frozen network is asked to change."""

    pass


class MetroNetwork:
    """
    Undirected multi-line metro graph.

    Built once through add_station/connect, then frozen and shared
    read-only by every route query.
    """

    def __init__(self, speed_kmh: float = DEFAULT_SPEED_KMH):
        """
        Initialize an empty network.

        Args:
            speed_kmh: Reference speed used to derive connection travel times
        """
        if speed_kmh <= 0:
            raise ValueError("Reference speed must be positive")

        self.speed_kmh = speed_kmh
        self._station_map: Dict[str, int] = {}
        self._stations: List[Station] = []
        self._adjacency: List[List[Connection]] = []
        self._frozen = False

    # Construction

    def add_station(self, name: str) -> int:
        """
        Get the index for a station, registering it if new.

        Args:
            name: Station name

        Returns:
            The station's index
        """
        index = self._station_map.get(name)
        if index is not None:
            return index

        self._ensure_mutable()
        index = len(self._stations)
        self._station_map[name] = index
        self._stations.append(Station(index=index, name=name))
        self._adjacency.append([])
        return index

    def connect(self, from_name: str, to_name: str, distance: float, line: MetroLine) -> None:
        """
        Connect two stations on a line in both directions.

        Args:
            from_name: One end of the segment
            to_name: Other end of the segment
            distance: Segment length in kilometers
            line: Line the segment belongs to
        """
        self._ensure_mutable()
        from_index = self.add_station(from_name)
        to_index = self.add_station(to_name)

        self._stations[from_index].add_line(line)
        self._stations[to_index].add_line(line)

        self._adjacency[from_index].append(Connection.create(to_index, distance, line, self.speed_kmh))
        self._adjacency[to_index].append(Connection.create(from_index, distance, line, self.speed_kmh))

    def freeze(self) -> None:
        """Make the network read-only."""
        self._frozen = True
        logger.debug(f"Network frozen with {self.station_count} stations")

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise NetworkFrozenError("Cannot modify a frozen metro network")

    # Lookups

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def stations(self) -> List[Station]:
        """Get all stations in index order."""
        return list(self._stations)

    def has_station(self, name: str) -> bool:
        return name in self._station_map

    def get_index(self, name: str) -> Optional[int]:
        return self._station_map.get(name)

    def get_station(self, name: str) -> Optional[Station]:
        index = self._station_map.get(name)
        if index is None:
            return None
        return self._stations[index]

    def get_station_by_index(self, index: int) -> Station:
        return self._stations[index]

    def connections_from(self, index: int) -> List[Connection]:
        """Get the outgoing connections of a station."""
        return self._adjacency[index]

    def find_connection(self, from_index: int, to_index: int,
                        line: Optional[MetroLine] = None) -> Optional[Connection]:
        """
        Find the connection between two adjacent stations.

        Args:
            from_index: Origin station index
            to_index: Destination station index
            line: Restrict the match to this line when given

        Returns:
            The first matching connection, or None
        """
        for connection in self._adjacency[from_index]:
            if connection.to == to_index and (line is None or connection.line == line):
                return connection
        return None

    def all_stations(self) -> List[str]:
        """Get all station names, sorted."""
        return sorted(self._station_map)

    def stations_on_line(self, line: MetroLine) -> List[str]:
        """Get the names of stations served by a line, sorted."""
        return sorted(station.name for station in self._stations if line in station.lines)

    def search_by_substring(self, query: str) -> List[str]:
        """
        Find stations whose name contains the query, ignoring case.

        Args:
            query: Partial station name

        Returns:
            Sorted list of matching station names
        """
        query_lower = query.lower()
        return sorted(name for name in self._station_map if query_lower in name.lower())

    def get_network_statistics(self) -> Dict[str, Any]:
        """Get station counts for the whole network and per line."""
        return {
            "total_stations": self.station_count,
            "stations_per_line": {
                line: sum(1 for station in self._stations if line in station.lines)
                for line in MetroLine
            },
            "interchange_stations": sum(1 for station in self._stations if station.is_interchange),
            "total_connections": sum(len(connections) for connections in self._adjacency) // 2,
        }

    def __len__(self) -> int:
        return self.station_count

    def __contains__(self, name: str) -> bool:
        return self.has_station(name)

    def __repr__(self) -> str:
        return (f"MetroNetwork(stations={self.station_count}, "
                f"speed_kmh={self.speed_kmh}, frozen={self._frozen})")
