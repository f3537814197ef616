"""
Core Package

Core services, interfaces, and models for the metro planner.
"""

# Import interfaces
from .interfaces import IStationService, IRouteService, INetworkRepository

# Import models
from .models import (
    MetroLine, Station, Connection, MetroNetwork, NetworkFrozenError,
    Objective, RouteLeg, RouteResult
)

# Import services
from .services import (
    PathfindingAlgorithm, PathReconstructor, RouteService, StationService,
    JsonNetworkRepository, NetworkDataError, ServiceFactory
)

__all__ = [
    # Interfaces
    'IStationService',
    'IRouteService',
    'INetworkRepository',

    # Models
    'MetroLine',
    'Station',
    'Connection',
    'MetroNetwork',
    'NetworkFrozenError',
    'Objective',
    'RouteLeg',
    'RouteResult',

    # Services
    'PathfindingAlgorithm',
    'PathReconstructor',
    'RouteService',
    'StationService',
    'JsonNetworkRepository',
    'NetworkDataError',
    'ServiceFactory'
]
