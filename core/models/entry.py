"""secconfig Entry Domain Model - One named setting held by the store.

A ConfigEntry binds a key to a value, an optional description and a
mutability flag. Entries are immutable records; the store swaps in a new
record when a value changes.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from ..types import ConfigKey, ConfigValue
from ..exceptions import ValidationError


@dataclass(frozen=True)
class ConfigEntry:
    """Domain model representing a stored setting.
    
    Attributes:
        key: Unique key within the store (dots are a naming convention only)
        value: Arbitrary payload
        description: Optional human-readable description
        mutable: Whether update and delete may succeed for this entry
    """
    
    key: ConfigKey
    value: ConfigValue
    description: Optional[str] = None
    mutable: bool = True
    
    def __post_init__(self):
        """Validate entry after initialization."""
        self._validate()
    
    def _validate(self) -> None:
        """Validate entry attributes."""
        if not isinstance(self.key, str):
            raise ValidationError("key", self.key, "Key must be a string")
        
        if not isinstance(self.mutable, bool):
            raise ValidationError("mutable", self.mutable, "Mutable flag must be a boolean")
        
        if self.description is not None and not isinstance(self.description, str):
            raise ValidationError("description", self.description, "Description must be a string")
    
    def with_value(self, value: ConfigValue) -> "ConfigEntry":
        """Return a copy of this entry holding a new value."""
        return replace(self, value=value)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary format."""
        return {
            "key": self.key,
            "value": self.value,
            "description": self.description,
            "mutable": self.mutable,
        }
    
    def __str__(self) -> str:
        """Return a one-line representation of the entry."""
        flag = "mutable" if self.mutable else "immutable"
        return f"{self.key}={self.value!r} ({flag})"
