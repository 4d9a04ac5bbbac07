"""Configuration store for secconfig security settings.

This module provides:
- ConfigStore, an in-memory, thread-safe mapping of named settings
- Mutability guards on update and delete
- JSON export/import of the key -> value view
- Override files in JSON or YAML
- A process-wide shared store
"""

import json
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional, Union

import yaml
from loguru import logger

from core.exceptions import ConfigurationError
from core.models import ConfigEntry
from core.types import ConfigSnapshot, ConfigValue

from .core.config import SecurityConfig, StoreSettings


class ConfigStore:
    """In-memory store of named settings with per-entry mutability.

    The store starts with the entries derived from its default
    SecurityConfig. Expected failures (unknown key, immutable entry,
    malformed import) are reported through return values, never raised.
    """

    def __init__(self, defaults: Optional[SecurityConfig] = None):
        """Initialize the store and seed the built-in entries.

        Args:
            defaults: Settings to seed from (built-in defaults if None)
        """
        self._entries: Dict[str, ConfigEntry] = {}
        self._defaults = defaults if defaults is not None else SecurityConfig()
        self._lock = RLock()

        self._seed()

    def _seed(self) -> None:
        """Install the entries derived from the default settings."""
        for entry in self._defaults.to_entries():
            self._entries[entry.key] = entry
        logger.debug(f"Seeded {len(self._entries)} built-in entries")

    @property
    def defaults(self) -> SecurityConfig:
        """Settings the built-in entries are derived from."""
        return self._defaults.model_copy(deep=True)

    def set(
        self,
        key: str,
        value: ConfigValue,
        description: Optional[str] = None,
        mutable: bool = True
    ) -> None:
        """Insert or replace an entry.

        Always succeeds, even over an immutable entry; the new entry's
        description and mutable flag replace the old ones.

        Args:
            key: Entry key
            value: Entry value
            description: Optional human-readable description
            mutable: Whether later update/delete may succeed
        """
        entry = ConfigEntry(key=key, value=value, description=description, mutable=mutable)
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str, default: Any = None) -> Any:
        """Get the value stored under a key.

        Args:
            key: Entry key
            default: Value returned when the key is unknown

        Returns:
            Stored value or default
        """
        with self._lock:
            entry = self._entries.get(key)
        return entry.value if entry is not None else default

    def get_all(self) -> ConfigSnapshot:
        """Return a fresh key -> value snapshot of every entry."""
        with self._lock:
            return {key: entry.value for key, entry in self._entries.items()}

    def has(self, key: str) -> bool:
        """Check whether a key is present, regardless of mutability."""
        with self._lock:
            return key in self._entries

    def keys(self) -> List[str]:
        """List keys in insertion order."""
        with self._lock:
            return list(self._entries)

    def delete(self, key: str) -> bool:
        """Remove a mutable entry.

        Args:
            key: Entry key

        Returns:
            True if removed, False if the key is unknown or immutable
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if not entry.mutable:
                logger.debug(f"Rejected delete of immutable key: {key}")
                return False
            del self._entries[key]
            return True

    def update(self, key: str, value: ConfigValue) -> bool:
        """Replace the value of a mutable entry.

        Description and mutable flag are kept.

        Args:
            key: Entry key
            value: New value

        Returns:
            True if updated, False if the key is unknown or immutable
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if not entry.mutable:
                logger.debug(f"Rejected update of immutable key: {key}")
                return False
            self._entries[key] = entry.with_value(value)
            return True

    def get_metadata(self, key: str) -> Optional[ConfigEntry]:
        """Get the full entry for a key, or None if unknown."""
        with self._lock:
            return self._entries.get(key)

    def get_mutable(self) -> List[ConfigEntry]:
        """List mutable entries in insertion order."""
        with self._lock:
            return [entry for entry in self._entries.values() if entry.mutable]

    def get_immutable(self) -> List[ConfigEntry]:
        """List immutable entries in insertion order."""
        with self._lock:
            return [entry for entry in self._entries.values() if not entry.mutable]

    def export_config(self) -> str:
        """Serialize the key -> value view as a JSON object with two-space indentation."""
        return json.dumps(self.get_all(), indent=2, ensure_ascii=False, default=str)

    def import_config(self, document: str) -> bool:
        """Apply a JSON key -> value document.

        Every pair is written with set(), so imported entries are mutable,
        carry no description and overwrite existing entries, immutable ones
        included.

        Args:
            document: JSON text holding a top-level object

        Returns:
            True on success, False if the document is not a JSON object
        """
        try:
            data = json.loads(document)
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug(f"Rejected import: {e}")
            return False

        return self._apply(data)

    def load_file(self, path: Union[str, Path]) -> bool:
        """Apply an override file on top of the current entries.

        ``.yaml``/``.yml`` files are parsed as YAML, anything else as JSON.
        Entries are written the same way as import_config().

        Args:
            path: Path to the override file

        Returns:
            True if applied, False if the document is not a mapping

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        file_path = Path(path).expanduser()

        try:
            text = file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                config_key=str(file_path),
                reason=f"Cannot read override file: {e}",
                cause=e
            ) from e

        try:
            if file_path.suffix.lower() in ('.yaml', '.yml'):
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (yaml.YAMLError, ValueError, RecursionError) as e:
            raise ConfigurationError(
                config_key=str(file_path),
                reason=f"Cannot parse override file: {e}",
                cause=e
            ) from e

        applied = self._apply(data)
        if applied:
            logger.info(f"Loaded overrides from: {file_path}")
        else:
            logger.warning(f"Override file is not a key/value mapping: {file_path}")
        return applied

    def _apply(self, data: Any) -> bool:
        """Write every pair of a parsed document with set()."""
        if not isinstance(data, dict):
            logger.debug(f"Rejected import of non-object document: {type(data).__name__}")
            return False

        with self._lock:
            for key, value in data.items():
                self.set(str(key), value)

        logger.debug(f"Imported {len(data)} entries")
        return True

    def reset(self) -> None:
        """Discard every entry and reseed the built-in entries."""
        with self._lock:
            self._entries.clear()
            self._seed()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"ConfigStore(entries={len(self)})"


# Global config store instance
_config_store: Optional[ConfigStore] = None


def get_config_store(overrides_file: Optional[Union[str, Path]] = None) -> ConfigStore:
    """Get or create the global configuration store.

    Args:
        overrides_file: Override file applied on creation (falls back to
            SECCONFIG_OVERRIDES_FILE)

    Returns:
        Global ConfigStore instance
    """
    global _config_store

    if _config_store is None:
        store = ConfigStore()
        path = overrides_file or StoreSettings().overrides_file
        if path:
            try:
                store.load_file(path)
            except ConfigurationError as e:
                logger.warning(f"Failed to load overrides: {e}")
        _config_store = store

    return _config_store


def reset_config_store() -> None:
    """Reset the global configuration store (for testing)."""
    global _config_store
    _config_store = None
