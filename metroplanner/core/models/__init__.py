"""
Core Models Package

Data models for the metro network and route results.
"""

from .metro_line import MetroLine
from .station import Station
from .connection import Connection
from .network import MetroNetwork, NetworkFrozenError, DEFAULT_SPEED_KMH
from .route import Objective, RouteLeg, RouteResult

__all__ = [
    'MetroLine',
    'Station',
    'Connection',
    'MetroNetwork',
    'NetworkFrozenError',
    'DEFAULT_SPEED_KMH',
    'Objective',
    'RouteLeg',
    'RouteResult'
]
