"""
Configuration models for secconfig.

- SecurityConfig: typed nested security settings, the source of the
  built-in store entries (pydantic)
- StoreSettings: process settings from SECCONFIG_* environment variables
  (pydantic-settings)
"""

from .security_config import (
    ContainmentConfig,
    DetectionConfig,
    LoggingConfig,
    SecurityConfig,
)
from .store_settings import StoreSettings

__all__ = [
    "SecurityConfig",
    "DetectionConfig",
    "ContainmentConfig",
    "LoggingConfig",
    "StoreSettings",
]
