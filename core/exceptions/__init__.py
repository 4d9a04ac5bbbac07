"""secconfig Core Exceptions Package - Core exception classes for error handling.

The hierarchy is rooted at SecConfigError:
- ValidationError for invalid domain model data
- ConfigurationError for unreadable configuration sources
"""

from .core import (
    ConfigurationError,
    SecConfigError,
    ValidationError,
)

__all__ = [
    # Base exception
    "SecConfigError",

    # Domain-specific exceptions
    "ValidationError",
    "ConfigurationError",
]
