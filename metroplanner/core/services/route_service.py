"""
Route Service Implementation

Route queries and the fewer-interchanges alternative route heuristic.
"""

import logging
from typing import Optional

from ..interfaces.i_route_service import IRouteService
from ..models.network import MetroNetwork
from ..models.route import Objective, RouteResult
from ...managers.config_manager import RoutingConfig
from .pathfinding_algorithm import PathfindingAlgorithm


class RouteService(IRouteService):
    """Service implementation for route calculation."""

    def __init__(self, network: MetroNetwork, routing_config: Optional[RoutingConfig] = None):
        """
        Initialize the route service.

        Args:
            network: Read-only metro network
            routing_config: Interchange penalties used for every query
        """
        self.network = network
        self.routing_config = routing_config or RoutingConfig()
        self.pathfinder = PathfindingAlgorithm(network, self.routing_config)
        self.logger = logging.getLogger(__name__)

        self.logger.info(f"Initialized RouteService for {network.station_count} stations")

    def find_path(self, start_name: str, end_name: str,
                  objective: Objective = Objective.MINIMIZE_TIME) -> RouteResult:
        """Calculate the optimal route between two stations."""
        self.logger.info(f"Route query: '{start_name}' -> '{end_name}' ({objective.value})")

        result = self.pathfinder.find_path(start_name, end_name, objective)

        if result.found:
            self.logger.info(
                f"Route found: {result.station_count} stations, "
                f"{result.total_distance:.1f} km, {result.total_time:.1f} min, "
                f"{result.interchanges} interchanges"
            )
        return result

    def find_alternative(self, start_name: str, end_name: str) -> RouteResult:
        """
        Find a route with fewer interchanges than the fastest one.

        Compares only the time-optimal and the distance-optimal routes;
        this is not a search over every trade-off between time, distance
        and interchanges.
        """
        primary = self.find_path(start_name, end_name, Objective.MINIMIZE_TIME)
        if not primary.found or primary.interchanges == 0:
            return primary

        alternative = self.find_path(start_name, end_name, Objective.MINIMIZE_DISTANCE)
        if alternative.found and alternative.interchanges < primary.interchanges:
            self.logger.info(
                f"Alternative route saves {primary.interchanges - alternative.interchanges} "
                f"interchange(s) for {alternative.total_time - primary.total_time:.1f} extra minutes"
            )
            return alternative

        return primary

    def get_fastest_route(self, start_name: str, end_name: str) -> RouteResult:
        """Get the fastest route between two stations."""
        return self.find_path(start_name, end_name, Objective.MINIMIZE_TIME)

    def get_shortest_route(self, start_name: str, end_name: str) -> RouteResult:
        """Get the shortest distance route between two stations."""
        return self.find_path(start_name, end_name, Objective.MINIMIZE_DISTANCE)
