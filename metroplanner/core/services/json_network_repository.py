"""
JSON Network Repository Implementation

Repository implementation for loading the metro network from JSON line files.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any

from ..interfaces.i_network_repository import INetworkRepository
from ..models.metro_line import MetroLine
from ..models.network import MetroNetwork, DEFAULT_SPEED_KMH
from ...utils.data_path_resolver import get_data_directory

INDEX_FILE_NAME = "lines_index.json"


class NetworkDataError(Exception):
    """Raised when network data files are missing or malformed."""

    pass


class JsonNetworkRepository(INetworkRepository):
    """Repository implementation for JSON-based network data."""

    def __init__(self, data_directory: Optional[str] = None, speed_kmh: float = DEFAULT_SPEED_KMH):
        """
        Initialize the JSON network repository.

        Args:
            data_directory: Directory containing lines_index.json and lines/;
                defaults to the packaged data
            speed_kmh: Reference speed passed to the built network
        """
        if data_directory is None:
            self.data_directory = get_data_directory()
        else:
            self.data_directory = Path(data_directory)

        self.lines_directory = self.data_directory / "lines"
        self.speed_kmh = speed_kmh
        self.logger = logging.getLogger(__name__)

        self._network_cache: Optional[MetroNetwork] = None
        self._data_version = "unknown"
        self._last_loaded: Optional[datetime] = None

        self.logger.info(f"Initialized JsonNetworkRepository with data directory: {self.data_directory}")

    def load_network(self) -> MetroNetwork:
        """
        Load the metro network, building it on first use.

        Returns:
            A frozen MetroNetwork

        Raises:
            NetworkDataError: If a data file is missing or malformed
        """
        if self._network_cache is not None:
            return self._network_cache

        self.logger.info("Loading metro network from JSON files...")
        network = MetroNetwork(speed_kmh=self.speed_kmh)

        segment_count = 0
        line_files = self._get_line_files()
        for line_file in line_files:
            segment_count += self._load_line_file(network, line_file)

        network.freeze()
        self._network_cache = network
        self._last_loaded = datetime.now()

        self.logger.info(
            f"Loaded {network.station_count} stations and {segment_count} segments "
            f"from {len(line_files)} line files"
        )
        return network

    def refresh_data(self) -> None:
        """Discard the cached network."""
        self._network_cache = None
        self.logger.info("Network cache cleared")

    def get_data_version(self) -> str:
        return self._data_version

    def get_last_updated(self) -> Optional[str]:
        return self._last_loaded.isoformat() if self._last_loaded else None

    def _get_line_files(self) -> List[Path]:
        """Get line files in index order, or sorted by name without an index."""
        index_file = self.data_directory / INDEX_FILE_NAME
        if not index_file.exists():
            if not self.lines_directory.exists():
                raise NetworkDataError(f"Lines directory not found: {self.lines_directory}")
            self.logger.warning(f"No {INDEX_FILE_NAME} found, loading all line files by name")
            return sorted(self.lines_directory.glob("*.json"))

        index_data = self._read_json(index_file)
        self._data_version = str(index_data.get("data_version", "unknown"))

        entries = index_data.get("lines")
        if not isinstance(entries, list) or not entries:
            raise NetworkDataError(f"{index_file.name}: 'lines' must be a non-empty list")

        line_files = []
        for entry in entries:
            file_name = entry.get("file") if isinstance(entry, dict) else None
            if not file_name:
                raise NetworkDataError(f"{index_file.name}: line entry without 'file': {entry}")
            line_files.append(self.lines_directory / file_name)
        return line_files

    def _load_line_file(self, network: MetroNetwork, line_file: Path) -> int:
        """Connect every segment of one line file; returns the segment count."""
        data = self._read_json(line_file)

        metadata = data.get("metadata", {})
        try:
            line = MetroLine.from_key(metadata.get("line", ""))
        except ValueError as e:
            raise NetworkDataError(f"{line_file.name}: {e}")

        segments = data.get("segments")
        if not isinstance(segments, list):
            raise NetworkDataError(f"{line_file.name}: 'segments' must be a list")

        for position, segment in enumerate(segments, 1):
            from_name, to_name, distance = self._parse_segment(line_file, position, segment)
            network.connect(from_name, to_name, distance, line)

        self.logger.debug(f"Loaded {len(segments)} segments for {line.display_name} from {line_file.name}")
        return len(segments)

    @staticmethod
    def _parse_segment(line_file: Path, position: int, segment: Dict[str, Any]):
        """Validate one segment entry."""
        if not isinstance(segment, dict):
            raise NetworkDataError(f"{line_file.name}: segment {position} is not an object")

        from_name = segment.get("from")
        to_name = segment.get("to")
        distance = segment.get("distance_km")

        if not from_name or not to_name:
            raise NetworkDataError(f"{line_file.name}: segment {position} is missing a station name")
        if from_name == to_name:
            raise NetworkDataError(f"{line_file.name}: segment {position} connects '{from_name}' to itself")
        if isinstance(distance, bool) or not isinstance(distance, (int, float)) or distance <= 0:
            raise NetworkDataError(
                f"{line_file.name}: segment {position} needs a positive distance_km, got {distance!r}"
            )
        return from_name, to_name, float(distance)

    def _read_json(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise NetworkDataError(f"Network data file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.critical(f"JSON parsing failed in {path.name} at line {e.lineno}, column {e.colno}: {e}")
            raise NetworkDataError(f"Malformed JSON in {path.name}: {e}")

        if not isinstance(data, dict):
            raise NetworkDataError(f"{path.name}: top level must be an object")
        return data
