"""secconfig Core Models Package - Domain model definitions.

Models are frozen dataclasses with type hints and validation in
__post_init__.
"""

from .entry import ConfigEntry

__all__ = [
    "ConfigEntry",
]
