"""secconfig CLI API package - modular command-line interface."""

from .commands import config_command

__all__ = [
    "config_command",
]
