"""
Service Factory

Factory for creating and wiring core service instances from configuration.
"""

import logging
from typing import Optional, Dict, Any

from ..interfaces.i_network_repository import INetworkRepository
from ..interfaces.i_route_service import IRouteService
from ..interfaces.i_station_service import IStationService
from ..models.network import MetroNetwork
from ...managers.config_manager import ConfigData

from .json_network_repository import JsonNetworkRepository
from .route_service import RouteService
from .station_service import StationService


class ServiceFactory:
    """Factory for creating and managing core service instances."""

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults to ConfigData()
        """
        self.config = config or ConfigData()
        self.logger = logging.getLogger(__name__)

        # One instance of each per factory
        self._network_repository: Optional[INetworkRepository] = None
        self._route_service: Optional[IRouteService] = None
        self._station_service: Optional[IStationService] = None

        self.logger.info("Initialized ServiceFactory")

    def get_network_repository(self) -> INetworkRepository:
        """Get or create the network repository instance."""
        if self._network_repository is None:
            self._network_repository = JsonNetworkRepository(
                data_directory=self.config.data.data_directory,
                speed_kmh=self.config.routing.base_speed_kmh,
            )
            self.logger.info("Created JsonNetworkRepository instance")

        return self._network_repository

    def get_network(self) -> MetroNetwork:
        """Get the loaded, frozen network."""
        return self.get_network_repository().load_network()

    def get_route_service(self) -> IRouteService:
        """Get or create the route service instance."""
        if self._route_service is None:
            self._route_service = RouteService(self.get_network(), self.config.routing)
            self.logger.info("Created RouteService instance")

        return self._route_service

    def get_station_service(self) -> IStationService:
        """Get or create the station service instance."""
        if self._station_service is None:
            self._station_service = StationService(self.get_network())
            self.logger.info("Created StationService instance")

        return self._station_service

    def get_service_statistics(self) -> Dict[str, Any]:
        """Get statistics about the loaded network data."""
        # The data version is read from the index while the network loads
        network = self.get_network()
        return {
            "data_version": self.get_network_repository().get_data_version(),
            "network": network.get_network_statistics(),
        }
