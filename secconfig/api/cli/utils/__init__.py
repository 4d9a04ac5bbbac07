"""Shared utilities for secconfig CLI commands."""

from .output import OutputFormatter, format_entry, format_value, print_section
from .validation import parse_assignment, validate_file_path

__all__ = [
    "OutputFormatter",
    "format_entry",
    "format_value",
    "print_section",
    "parse_assignment",
    "validate_file_path",
]
