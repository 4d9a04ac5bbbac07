"""
Process settings for secconfig.

Loaded from SECCONFIG_* environment variables, e.g.:
    SECCONFIG_DEBUG=true
    SECCONFIG_OVERRIDES_FILE=/etc/secconfig/overrides.yaml
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Environment-driven settings for the shared store and the CLI."""
    
    model_config = SettingsConfigDict(
        env_prefix='SECCONFIG_',
        case_sensitive=False,
        extra='ignore',
        env_file=None,  # Disable automatic .env loading
    )
    
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    
    overrides_file: Path | None = Field(
        default=None,
        description="JSON or YAML document applied on top of the built-in settings"
    )
