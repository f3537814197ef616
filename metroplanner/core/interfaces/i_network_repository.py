"""
Network Repository Interface

Interface for loading the metro network from a data source.
"""

from abc import ABC, abstractmethod
from ..models.network import MetroNetwork


class INetworkRepository(ABC):
    """Interface for network data access."""

    @abstractmethod
    def load_network(self) -> MetroNetwork:
        """
        Load the metro network from the data source.

        Returns:
            A frozen MetroNetwork
        """
        pass

    @abstractmethod
    def refresh_data(self) -> None:
        """Discard any cached network so the next load reads the source again."""
        pass

    @abstractmethod
    def get_data_version(self) -> str:
        """
        Get the version of the loaded data.

        Returns:
            Data version string
        """
        pass
