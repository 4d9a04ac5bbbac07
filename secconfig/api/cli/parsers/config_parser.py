"""Config command argument parser for secconfig CLI."""

import argparse
from pathlib import Path

from .main_parser import add_common_arguments
from ..utils.validation import parse_assignment


def add_config_subparser(subparsers) -> argparse.ArgumentParser:
    """Add config command subparser to the main parser.
    
    Args:
        subparsers: Subparsers object from the main argument parser
        
    Returns:
        The configured config subparser
    """
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect and override security settings",
        description="Inspect the settings store and export overridden settings"
    )
    
    config_subparsers = config_parser.add_subparsers(
        dest="config_command", 
        help="Configuration commands",
        required=True
    )
    
    # Config list command
    list_parser = config_subparsers.add_parser(
        "list", 
        help="List all entries with their descriptions"
    )
    add_common_arguments(list_parser)
    flags = list_parser.add_mutually_exclusive_group()
    flags.add_argument(
        "--mutable", 
        action="store_true", 
        help="Only list entries that can be updated"
    )
    flags.add_argument(
        "--immutable", 
        action="store_true", 
        help="Only list protected entries"
    )
    list_parser.add_argument(
        "--json", 
        action="store_true", 
        help="Output entries as JSON"
    )
    
    # Config get command
    get_parser = config_subparsers.add_parser(
        "get", 
        help="Print the value of one key"
    )
    add_common_arguments(get_parser)
    get_parser.add_argument(
        "key", 
        help="Entry key (e.g. logging.level)"
    )
    
    # Config export command
    export_parser = config_subparsers.add_parser(
        "export", 
        help="Print all settings as a JSON document"
    )
    add_common_arguments(export_parser)
    export_parser.add_argument(
        "--set", 
        dest="assignments",
        metavar="KEY=VALUE",
        type=parse_assignment,
        action="append",
        default=[],
        help="Update a mutable key before exporting (can be specified multiple times)"
    )
    
    # Config validate command
    validate_parser = config_subparsers.add_parser(
        "validate", 
        help="Check that an override file can be applied"
    )
    add_common_arguments(validate_parser)
    validate_parser.add_argument(
        "file", 
        type=Path,
        help="Override file to check"
    )
    
    # Config defaults command
    defaults_parser = config_subparsers.add_parser(
        "defaults", 
        help="Print the built-in settings as nested JSON"
    )
    add_common_arguments(defaults_parser)
    
    return config_parser


__all__ = ["add_config_subparser"]
