"""Application configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file_path: str = Field("logs/account_patterns.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Stdlib log record format for every handler",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased log level

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return level

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 0:
            raise ValueError("Rotation settings must not be negative")
        return v


class CliConfig(BaseModel):
    """CLI configuration."""

    output_format: OutputFormat = Field(OutputFormat.JSON, description="Default output format")


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    cli: CliConfig = Field(default_factory=lambda: CliConfig())
    environment: str = Field("development", description="Environment")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment."""
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
