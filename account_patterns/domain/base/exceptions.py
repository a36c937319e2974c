"""Domain exceptions shared by the pattern catalog."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.details = details
        self.missing_fields = missing_fields or []


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern is not registered in the catalog."""
    def __init__(self, pattern_name: str, available: Optional[List[str]] = None):
        super().__init__(f"Pattern '{pattern_name}' is not registered")
        self.pattern_name = pattern_name
        self.available = available or []
