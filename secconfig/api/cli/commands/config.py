"""Config command module - handles settings store operations."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from core.exceptions import ConfigurationError, SecConfigError
from secconfig.config import ConfigStore
from secconfig.core.config import SecurityConfig, StoreSettings
from ..utils.output import OutputFormatter, format_entry, format_value, print_section
from ..utils.validation import validate_file_path


def config_command(args: argparse.Namespace) -> None:
    """Execute the config command with appropriate subcommand.
    
    Args:
        args: Parsed command-line arguments
    """
    # Route to appropriate subcommand
    subcommand_handlers = {
        "list": config_list_command,
        "get": config_get_command,
        "export": config_export_command,
        "validate": config_validate_command,
        "defaults": config_defaults_command,
    }
    
    handler = subcommand_handlers.get(args.config_command)
    if handler:
        handler(args)
    else:
        logger.error(f"Unknown config command: {args.config_command}")
        sys.exit(1)


def load_store(overrides: Optional[Path] = None) -> ConfigStore:
    """Build a store with the built-in entries plus any override file.
    
    Args:
        overrides: Override file (falls back to SECCONFIG_OVERRIDES_FILE)
        
    Returns:
        Populated ConfigStore
        
    Raises:
        ConfigurationError: If the override file cannot be applied
    """
    store = ConfigStore()
    path = overrides or StoreSettings().overrides_file
    if path and not store.load_file(path):
        raise ConfigurationError(
            config_key=str(path),
            reason="Override file must contain a key/value mapping"
        )
    return store


def config_list_command(args: argparse.Namespace) -> None:
    """Handle config list command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    
    try:
        store = load_store(args.overrides)
        
        if args.mutable:
            entries = store.get_mutable()
        elif args.immutable:
            entries = store.get_immutable()
        else:
            entries = [store.get_metadata(key) for key in store.keys()]
        
        if args.json:
            formatter.json_output([entry.to_dict() for entry in entries])
            return
        
        if not entries:
            formatter.info("No entries match.")
            return
        
        lines = []
        for entry in entries:
            lines.extend(format_entry(entry))
        print_section(f"Configured entries ({len(entries)})", lines)
        
    except SecConfigError as e:
        formatter.error(f"Failed to list entries: {e}")
        sys.exit(1)


def config_get_command(args: argparse.Namespace) -> None:
    """Handle config get command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    
    try:
        store = load_store(args.overrides)
        
        if not store.has(args.key):
            formatter.error(f"Key '{args.key}' not found")
            sys.exit(1)
        
        entry = store.get_metadata(args.key)
        formatter.verbose_info(f"{entry.description or 'No description'} (mutable: {entry.mutable})")
        print(format_value(entry.value))
        
    except SecConfigError as e:
        formatter.error(f"Failed to read key: {e}")
        sys.exit(1)


def config_export_command(args: argparse.Namespace) -> None:
    """Handle config export command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    
    try:
        store = load_store(args.overrides)
        
        for key, value in args.assignments:
            if store.update(key, value):
                logger.debug(f"Applied override: {key}")
            else:
                formatter.warning(f"Skipped '{key}': key is unknown or immutable")
        
        print(store.export_config())
        
    except SecConfigError as e:
        formatter.error(f"Failed to export settings: {e}")
        sys.exit(1)


def config_validate_command(args: argparse.Namespace) -> None:
    """Handle config validate command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    
    if not validate_file_path(args.file):
        formatter.error(f"File not found: {args.file}")
        sys.exit(1)
    
    try:
        store = ConfigStore()
        if not store.load_file(args.file):
            formatter.error(f"'{args.file}' is not a key/value mapping")
            sys.exit(1)
        
        builtin_keys = set(ConfigStore().keys())
        unlocked = [entry.key for entry in store.get_mutable() if entry.key in builtin_keys and entry.description is None]
        
        formatter.success(f"'{args.file}' can be applied")
        for key in unlocked:
            formatter.warning(f"'{key}' replaces a built-in entry and drops its description")
        
    except SecConfigError as e:
        formatter.error(f"Invalid override file: {e}")
        sys.exit(1)


def config_defaults_command(args: argparse.Namespace) -> None:
    """Handle config defaults command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    formatter.json_output(SecurityConfig().to_dict())
