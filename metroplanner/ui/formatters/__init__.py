"""
UI formatters package for text output.
"""

from .route_formatter import RouteFormatter

__all__ = ['RouteFormatter']
