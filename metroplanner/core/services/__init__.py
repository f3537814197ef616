"""
Core Services Package

Service implementations for the metro planner.
"""

from .pathfinding_algorithm import PathfindingAlgorithm, SearchLabel
from .path_reconstructor import PathReconstructor
from .route_service import RouteService
from .station_service import StationService
from .json_network_repository import JsonNetworkRepository, NetworkDataError
from .service_factory import ServiceFactory

__all__ = [
    'PathfindingAlgorithm',
    'SearchLabel',
    'PathReconstructor',
    'RouteService',
    'StationService',
    'JsonNetworkRepository',
    'NetworkDataError',
    'ServiceFactory'
]
