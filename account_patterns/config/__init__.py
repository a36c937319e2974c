"""Configuration package."""

from .env_expansion import expand_env_vars
from .manager import ConfigurationManager
from .schemas import AppConfig, CliConfig, LogDestination, LoggingConfig, OutputFormat

__all__ = [
    "AppConfig",
    "CliConfig",
    "ConfigurationManager",
    "LogDestination",
    "LoggingConfig",
    "OutputFormat",
    "expand_env_vars",
]
