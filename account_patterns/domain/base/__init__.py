"""Base domain layer - shared kernel for all pattern examples."""

from .exceptions import ConfigurationError, DomainException, PatternNotFoundError

__all__ = [
    "DomainException",
    "ConfigurationError",
    "PatternNotFoundError",
]
