"""
Managers Package

Application-level configuration management.
"""

from .config_manager import (
    ConfigManager, ConfigData, RoutingConfig, DisplayConfig,
    DataConfig, LoggingConfig, ConfigurationError
)

__all__ = [
    'ConfigManager',
    'ConfigData',
    'RoutingConfig',
    'DisplayConfig',
    'DataConfig',
    'LoggingConfig',
    'ConfigurationError'
]
