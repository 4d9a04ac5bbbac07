"""secconfig Core Types - Common type definitions and aliases.

This module contains the type aliases and enums shared by the store, the
settings models and the CLI.
"""

from enum import Enum
from typing import Any, Dict, NewType


# String-based type aliases for better semantic clarity
ConfigKey = NewType("ConfigKey", str)        # e.g., "detection.enabled"

# Values are dynamically typed: bool, number, string or any JSON-like structure
ConfigValue = Any
ConfigSnapshot = Dict[str, ConfigValue]


class LogLevel(str, Enum):
    """Logging levels recognized by the security settings."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def loguru_level(self) -> str:
        """Return the matching loguru level name."""
        return "WARNING" if self is LogLevel.WARN else self.value.upper()
