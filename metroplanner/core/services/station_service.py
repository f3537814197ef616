"""
Station Service Implementation

Resolves user-typed, possibly partial, station names to exact names.
"""

import logging
from typing import List, Optional

from ..interfaces.i_station_service import IStationService
from ..models.network import MetroNetwork


class StationService(IStationService):
    """Service implementation for station name lookups."""

    def __init__(self, network: MetroNetwork):
        """
        Initialize the station service.

        Args:
            network: Network whose station names are searched
        """
        self.network = network
        self.logger = logging.getLogger(__name__)

    def resolve_station_name(self, input_name: str) -> Optional[str]:
        """Resolve a station name from user input."""
        if not input_name or not input_name.strip():
            return None

        input_name = input_name.strip()
        matches = self.get_station_suggestions(input_name)

        if not matches:
            return None

        if len(matches) == 1:
            return matches[0]

        # Several matches: only an exact name settles it
        if input_name in matches:
            return input_name

        self.logger.debug(f"'{input_name}' is ambiguous: {len(matches)} matches")
        return None

    def get_station_suggestions(self, partial: str) -> List[str]:
        """Get station name suggestions based on partial input."""
        if not partial or not partial.strip():
            return []

        return self.network.search_by_substring(partial.strip())

    def validate_station_exists(self, name: str) -> bool:
        """Validate that a station exists."""
        if not name:
            return False

        return self.network.has_station(name)
