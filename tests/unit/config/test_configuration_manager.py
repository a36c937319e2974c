"""Tests for the configuration manager."""
import json

import pytest

from account_patterns.config import (
    AppConfig,
    CliConfig,
    ConfigurationManager,
    LogDestination,
    LoggingConfig,
    OutputFormat,
)
from account_patterns.domain.base.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test configuration loading, overrides and validation."""

    def test_defaults_without_file(self):
        manager = ConfigurationManager()

        config = manager.app_config

        assert config.logging.level == "WARNING"
        assert config.logging.destination == LogDestination.STDOUT
        assert config.cli.output_format == OutputFormat.JSON
        assert config.environment == "development"

    def test_load_json_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "environment": "testing",
            "logging": {"level": "debug"},
            "cli": {"output_format": "yaml"},
        }))

        manager = ConfigurationManager(str(config_file))

        assert manager.app_config.environment == "testing"
        assert manager.get_typed(LoggingConfig).level == "DEBUG"
        assert manager.get_typed(CliConfig).output_format == OutputFormat.YAML

    def test_load_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n  destination: both\n  max_size_mb: 2\n")

        manager = ConfigurationManager(str(config_file))

        assert manager.get_typed(LoggingConfig).destination == LogDestination.BOTH
        assert manager.get_typed(LoggingConfig).max_size_mb == 2

    def test_empty_yaml_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert ConfigurationManager(str(config_file)).app_config == AppConfig()

    def test_env_vars_expanded_in_values(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATTERNS_LOG_DIR", "/var/log/patterns")
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "logging": {"file_path": "${PATTERNS_LOG_DIR}/demo.log", "level": "${MISSING_LEVEL:ERROR}"},
        }))

        logging_config = ConfigurationManager(str(config_file)).get_typed(LoggingConfig)

        assert logging_config.file_path == "/var/log/patterns/demo.log"
        assert logging_config.level == "ERROR"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "INFO"}}))
        monkeypatch.setenv("ACCOUNT_PATTERNS_LOG_LEVEL", "CRITICAL")
        monkeypatch.setenv("ACCOUNT_PATTERNS_OUTPUT_FORMAT", "table")

        manager = ConfigurationManager(str(config_file))

        assert manager.app_config.logging.level == "CRITICAL"
        assert manager.app_config.cli.output_format == OutputFormat.TABLE

    def test_missing_file_raises(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "missing.json"))

        with pytest.raises(ConfigurationError, match="not found"):
            manager.app_config

    def test_malformed_json_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigurationManager(str(config_file)).app_config

    def test_undecodable_file_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_bytes(b"\xff\xfe\x00")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigurationManager(str(config_file)).app_config

    def test_unreadable_path_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to read"):
            ConfigurationManager(str(tmp_path)).app_config

    def test_non_mapping_file_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigurationManager(str(config_file)).app_config

    def test_invalid_values_raise_configuration_error(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "LOUD"}, "environment": "moon"}))

        with pytest.raises(ConfigurationError) as exc:
            ConfigurationManager(str(config_file)).app_config

        assert len(exc.value.details) == 2

    def test_configuration_is_cached_until_reload(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "INFO"}}))
        manager = ConfigurationManager(str(config_file))

        first = manager.app_config
        config_file.write_text(json.dumps({"logging": {"level": "ERROR"}}))

        assert manager.app_config is first
        assert manager.get_typed(LoggingConfig) is first.logging

        manager.reload()

        assert manager.app_config.logging.level == "ERROR"

    def test_unknown_typed_config_raises(self):
        with pytest.raises(ValueError, match="Unknown configuration type"):
            ConfigurationManager().get_typed(dict)
