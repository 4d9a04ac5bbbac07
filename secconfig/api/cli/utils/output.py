"""Output formatting utilities for secconfig CLI commands."""

import json
import sys
from typing import Any, List, Optional

from core.models import ConfigEntry


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print an info message.

        Args:
            message: Message to print
        """
        print(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        """Print a success message.

        Args:
            message: Message to print
        """
        print(f"✅ {message}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr so stdout stays machine-readable.

        Args:
            message: Message to print
        """
        print(f"⚠️  {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        """Print an error message.

        Args:
            message: Message to print
        """
        print(f"❌ {message}", file=sys.stderr)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled.

        Args:
            message: Message to print
        """
        if self.verbose:
            print(f"🔍 {message}")

    def json_output(self, data: Any) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def format_value(value: Any) -> str:
    """Render a stored value the way it appears in exported documents."""
    return json.dumps(value, ensure_ascii=False, default=str)


def format_entry(entry: ConfigEntry) -> List[str]:
    """Format an entry for list output.

    Args:
        entry: Entry to format

    Returns:
        Output lines for the entry
    """
    flag = "" if entry.mutable else " (immutable)"
    lines = [f"  {entry.key} = {format_value(entry.value)}{flag}"]
    if entry.description:
        lines.append(f"    {entry.description}")
    return lines


def print_section(title: str, lines: Optional[List[str]] = None) -> None:
    """Print a titled block of lines."""
    print(f"{title}:")
    print()
    for line in lines or []:
        print(line)
