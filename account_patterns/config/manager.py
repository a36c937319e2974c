"""Unified configuration management for the application."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError

from account_patterns.config.env_expansion import expand_env_vars
from account_patterns.config.schemas import AppConfig, CliConfig, LoggingConfig
from account_patterns.domain.base.exceptions import ConfigurationError
from account_patterns.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)

ENV_PREFIX = "ACCOUNT_PATTERNS_"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}OUTPUT_FORMAT": ("cli", "output_format"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from an optional JSON or
    YAML file, environment variables referenced in values are expanded, and
    ``ACCOUNT_PATTERNS_*`` variables override individual keys.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._load_file(self._config_file)

        config_data = expand_env_vars(config_data)
        config_data = self._apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)", details=e.errors()
            ) from e

        logger.debug(
            "Configuration loaded",
            config_file=self._config_file,
            environment=app_config.environment,
        )
        return app_config

    @staticmethod
    def _load_file(config_file: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file."""
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")
        return data

    @staticmethod
    def _apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ACCOUNT_PATTERNS_* environment overrides."""
        result = dict(config_data)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            section_data = dict(result.get(section) or {})
            section_data[key] = value
            result[section] = section_data
            logger.debug("Applied environment override", variable=env_name)
        return result

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Create typed configuration instance."""
        type_mapping = {
            LoggingConfig: 'logging',
            CliConfig: 'cli',
        }
        if config_type is AppConfig:
            return self.app_config  # type: ignore[return-value]
        if config_type in type_mapping:
            return getattr(self.app_config, type_mapping[config_type])
        raise ValueError(f"Unknown configuration type: {config_type.__name__}")

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
