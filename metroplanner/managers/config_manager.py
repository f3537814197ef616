"""
Configuration management for the Metro Planner application.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from version import __version__

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RoutingConfig(BaseModel):
    """Configuration for route search costs."""

    base_speed_kmh: float = Field(35.0, gt=0, description="Reference train speed")
    interchange_penalty_minutes: float = Field(
        4.0, ge=0, description="Penalty for changing lines when minimizing time"
    )
    interchange_penalty_km: float = Field(
        0.5, ge=0, description="Penalty for changing lines when minimizing distance"
    )

    def penalty_for(self, minimize_time: bool) -> float:
        """Get the interchange penalty for the given cost metric."""
        return self.interchange_penalty_minutes if minimize_time else self.interchange_penalty_km


class DisplayConfig(BaseModel):
    """Configuration for console output."""

    use_emoji: bool = True
    separator_width: int = Field(70, ge=10, le=200)
    show_interchange_tip: bool = True


class DataConfig(BaseModel):
    """Configuration for network data location."""

    data_directory: Optional[str] = None  # None uses the packaged data


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"
    log_to_file: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                per-user configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/MetroPlanner/config.json
        On Linux, uses XDG_CONFIG_HOME/MetroPlanner/config.json or ~/.config/MetroPlanner/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "MetroPlanner" / "config.json"
        else:  # Linux/Unix
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                return Path(xdg_config) / "MetroPlanner" / "config.json"
            return Path.home() / ".config" / "MetroPlanner" / "config.json"

        # Fallback to current directory for development
        return Path("config.json")

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()
            if self.config is not None:
                return self.config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration values: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)

            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        default_config = ConfigData()
        if not self.save_config(default_config):
            # Unwritable location: run with defaults in memory
            self.config = default_config

    def update_routing(self, **changes) -> RoutingConfig:
        """
        Update routing settings and save to file.

        Args:
            **changes: RoutingConfig fields to change

        Returns:
            RoutingConfig: The updated routing settings

        Raises:
            ConfigurationError: If a value is invalid
        """
        if self.config is None:
            self.load_config()

        try:
            routing = RoutingConfig(**{**self.config.routing.model_dump(), **changes})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid routing settings: {e}")

        self.config = self.config.model_copy(update={"routing": routing})
        self.save_config(self.config)
        return routing

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        return {
            "app_version": __version__,
            "speed": f"{self.config.routing.base_speed_kmh} km/h",
            "interchange_penalty": f"{self.config.routing.interchange_penalty_minutes} minutes",
            "interchange_penalty_distance": f"{self.config.routing.interchange_penalty_km} km",
            "data_directory": self.config.data.data_directory or "packaged",
            "log_level": self.config.logging.level,
        }
