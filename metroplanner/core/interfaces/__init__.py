"""
Core Interfaces Package

Interface definitions for the metro planner services.
"""

from .i_station_service import IStationService
from .i_route_service import IRouteService
from .i_network_repository import INetworkRepository

__all__ = [
    'IStationService',
    'IRouteService',
    'INetworkRepository'
]
