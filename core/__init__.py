"""secconfig Core Package - Domain models, types, and exceptions.

This package contains the domain model, shared types and exception
hierarchy used by the secconfig store. It has no infrastructure
dependencies.

Modules:
    models: The ConfigEntry domain model
    types: Common type definitions and aliases
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    ConfigurationError,
    SecConfigError,
    ValidationError,
)
from .models import ConfigEntry
from .types import ConfigKey, ConfigSnapshot, ConfigValue, LogLevel

__all__ = [
    # Domain Models
    "ConfigEntry",

    # Types
    "LogLevel",
    "ConfigKey",
    "ConfigValue",
    "ConfigSnapshot",

    # Exceptions
    "SecConfigError",
    "ValidationError",
    "ConfigurationError",
]

__version__ = "0.1.0"
