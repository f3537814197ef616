"""
Utility functions for the Metro Planner application.
"""

from .data_path_resolver import get_data_directory

__all__ = ["get_data_directory"]
