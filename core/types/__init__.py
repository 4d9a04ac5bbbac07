"""secconfig Core Types Package - Common type definitions and aliases."""

from .common import (
    ConfigKey,
    ConfigSnapshot,
    ConfigValue,
    LogLevel,
)

__all__ = [
    # Enums
    "LogLevel",

    # String types
    "ConfigKey",

    # Value types
    "ConfigValue",
    "ConfigSnapshot",
]
