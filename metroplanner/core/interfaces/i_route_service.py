"""
Route Service Interface

Interface for route calculation services.
"""

from abc import ABC, abstractmethod
from ..models.route import Objective, RouteResult


class IRouteService(ABC):
    """Interface for route calculation services."""

    @abstractmethod
    def find_path(self, start_name: str, end_name: str,
                  objective: Objective = Objective.MINIMIZE_TIME) -> RouteResult:
        """
        Calculate the optimal route between two stations.

        Args:
            start_name: Exact name of the starting station
            end_name: Exact name of the destination station
            objective: Cost metric to optimize

        Returns:
            RouteResult; found is False when either station is unknown
            or no route exists
        """
        pass

    @abstractmethod
    def find_alternative(self, start_name: str, end_name: str) -> RouteResult:
        """
        Find a route that trades travel time for fewer interchanges.

        Args:
            start_name: Exact name of the starting station
            end_name: Exact name of the destination station

        Returns:
            The distance-optimal route if it needs strictly fewer
            interchanges than the fastest route, otherwise the fastest route
        """
        pass

    @abstractmethod
    def get_fastest_route(self, start_name: str, end_name: str) -> RouteResult:
        """
        Get the fastest route between two stations.

        Args:
            start_name: Exact name of the starting station
            end_name: Exact name of the destination station

        Returns:
            Time-optimal RouteResult
        """
        pass

    @abstractmethod
    def get_shortest_route(self, start_name: str, end_name: str) -> RouteResult:
        """
        Get the shortest distance route between two stations.

        Args:
            start_name: Exact name of the starting station
            end_name: Exact name of the destination station

        Returns:
            Distance-optimal RouteResult
        """
        pass
