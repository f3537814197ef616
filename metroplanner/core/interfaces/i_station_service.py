"""
Station Service Interface

Defines the contract for resolving user-typed station names.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class IStationService(ABC):
    """Interface for station-related operations."""

    @abstractmethod
    def resolve_station_name(self, input_name: str) -> Optional[str]:
        """
        Resolve a station name from user input.

        Args:
            input_name: User input station name, possibly partial

        Returns:
            Resolved station name or None if not found or ambiguous
        """
        pass

    @abstractmethod
    def get_station_suggestions(self, partial: str) -> List[str]:
        """
        Get station name suggestions based on partial input.

        Args:
            partial: Partial station name

        Returns:
            Sorted list of matching station names
        """
        pass

    @abstractmethod
    def validate_station_exists(self, name: str) -> bool:
        """
        Validate that a station exists.

        Args:
            name: Exact station name

        Returns:
            True if station exists, False otherwise
        """
        pass
