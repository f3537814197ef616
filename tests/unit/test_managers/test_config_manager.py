"""
Unit tests for configuration models and ConfigManager.
"""

import json
import os
import pytest
from pathlib import Path
from unittest.mock import patch
from pydantic import ValidationError

from metroplanner.managers.config_manager import (
    ConfigData,
    ConfigManager,
    ConfigurationError,
    DisplayConfig,
    LoggingConfig,
    RoutingConfig,
)


class TestConfigModels:
    """Test pydantic configuration models."""

    def test_routing_defaults(self):
        """Test default routing constants."""
        config = RoutingConfig()

        assert config.base_speed_kmh == 35.0
        assert config.interchange_penalty_minutes == 4.0
        assert config.interchange_penalty_km == 0.5

    def test_penalty_for(self):
        """Test the penalty is chosen by metric."""
        config = RoutingConfig(interchange_penalty_minutes=3.0, interchange_penalty_km=0.2)

        assert config.penalty_for(minimize_time=True) == 3.0
        assert config.penalty_for(minimize_time=False) == 0.2

    @pytest.mark.parametrize("field,value", [
        ("base_speed_kmh", 0),
        ("base_speed_kmh", -35.0),
        ("interchange_penalty_minutes", -1.0),
        ("interchange_penalty_km", -0.1),
    ])
    def test_routing_validation(self, field, value):
        """Test invalid routing values are rejected."""
        with pytest.raises(ValidationError):
            RoutingConfig(**{field: value})

    def test_display_validation(self):
        """Test separator width bounds."""
        assert DisplayConfig().separator_width == 70
        with pytest.raises(ValidationError):
            DisplayConfig(separator_width=5)

    def test_log_level_normalized(self):
        """Test log levels are upper-cased and validated."""
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")

    def test_config_data_defaults(self):
        """Test every section has a default."""
        config = ConfigData()

        assert config.routing == RoutingConfig()
        assert config.display.use_emoji is True
        assert config.data.data_directory is None
        assert config.logging.level == "WARNING"


class TestConfigManager:
    """Test ConfigManager file handling."""

    def test_creates_default_when_missing(self, tmp_path):
        """Test a missing config file is created with defaults."""
        config_path = tmp_path / "nested" / "config.json"
        manager = ConfigManager(str(config_path))

        config = manager.load_config()

        assert config == ConfigData()
        assert config_path.exists()
        saved = json.loads(config_path.read_text(encoding="utf-8"))
        assert saved["routing"]["interchange_penalty_minutes"] == 4.0

    def test_loads_existing_file(self, tmp_path):
        """Test values are read from an existing file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "routing": {"interchange_penalty_minutes": 6.0},
            "display": {"use_emoji": False},
        }), encoding="utf-8")

        config = ConfigManager(str(config_path)).load_config()

        assert config.routing.interchange_penalty_minutes == 6.0
        assert config.routing.base_speed_kmh == 35.0
        assert config.display.use_emoji is False

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ConfigurationError."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{broken", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigManager(str(config_path)).load_config()

    def test_invalid_values(self, tmp_path):
        """Test out-of-range values raise ConfigurationError."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"routing": {"base_speed_kmh": 0}}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid configuration values"):
            ConfigManager(str(config_path)).load_config()

    def test_save_failure_returns_false(self, tmp_path):
        """Test an unwritable file is reported, not raised."""
        manager = ConfigManager(str(tmp_path / "config.json"))

        with patch("builtins.open", side_effect=OSError("disk full")):
            assert manager.save_config(ConfigData()) is False

    def test_defaults_kept_in_memory_when_unwritable(self, tmp_path):
        """Test loading still works when the default cannot be saved."""
        manager = ConfigManager(str(tmp_path / "config.json"))

        with patch.object(manager, "save_config", return_value=False):
            config = manager.load_config()

        assert config == ConfigData()

    def test_update_routing(self, tmp_path):
        """Test routing updates are validated and saved."""
        config_path = tmp_path / "config.json"
        manager = ConfigManager(str(config_path))

        routing = manager.update_routing(interchange_penalty_minutes=5.0)

        assert routing.interchange_penalty_minutes == 5.0
        assert ConfigManager(str(config_path)).load_config().routing.interchange_penalty_minutes == 5.0

    def test_update_routing_invalid(self, tmp_path):
        """Test invalid routing updates raise ConfigurationError."""
        manager = ConfigManager(str(tmp_path / "config.json"))

        with pytest.raises(ConfigurationError, match="Invalid routing settings"):
            manager.update_routing(base_speed_kmh=-1)

    def test_config_summary(self, tmp_path):
        """Test the display summary."""
        summary = ConfigManager(str(tmp_path / "config.json")).get_config_summary()

        assert summary["speed"] == "35.0 km/h"
        assert summary["interchange_penalty"] == "4.0 minutes"
        assert summary["data_directory"] == "packaged"
        assert summary["log_level"] == "WARNING"

    @pytest.mark.skipif(os.name == "nt", reason="XDG paths apply to non-Windows platforms")
    def test_default_path_uses_xdg(self, tmp_path, monkeypatch):
        """Test the default path honours XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert ConfigManager.get_default_config_path() == tmp_path / "MetroPlanner" / "config.json"

    @pytest.mark.skipif(os.name == "nt", reason="XDG paths apply to non-Windows platforms")
    def test_default_path_without_xdg(self, monkeypatch):
        """Test the fallback under the home directory."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        expected = Path.home() / ".config" / "MetroPlanner" / "config.json"
        assert ConfigManager.get_default_config_path() == expected
