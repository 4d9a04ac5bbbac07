"""secconfig - In-memory store for security settings with mutability guards."""

from loguru import logger

__version__ = "0.1.0"
__description__ = "In-memory store for security settings with mutability guards"

# Library logging stays silent until an application enables it
logger.disable("secconfig")

__all__ = [
    "ConfigStore",
    "SecurityConfig",
    "get_config_store",
    "reset_config_store",
]

def __getattr__(name: str):
    """Lazy import to keep package import light."""
    if name in ("ConfigStore", "get_config_store", "reset_config_store"):
        from . import config
        return getattr(config, name)
    elif name == "SecurityConfig":
        from .core.config import SecurityConfig
        return SecurityConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
