"""
UI Package

Console presentation layer for the metro planner.
"""

from .console_menu import ConsoleMenu, MenuExit
from .formatters import RouteFormatter

__all__ = ['ConsoleMenu', 'MenuExit', 'RouteFormatter']
