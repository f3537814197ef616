"""
Metro Planner: line-aware route planning for the Pune Metro network.
"""

from .core import (
    MetroLine, MetroNetwork, Objective, RouteResult,
    RouteService, StationService, ServiceFactory
)

__all__ = [
    "MetroLine",
    "MetroNetwork",
    "Objective",
    "RouteResult",
    "RouteService",
    "StationService",
    "ServiceFactory"
]
