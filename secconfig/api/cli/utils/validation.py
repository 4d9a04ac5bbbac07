"""Argument validation utilities for secconfig CLI commands."""

import argparse
import json
from pathlib import Path
from typing import Any, Tuple


def parse_assignment(text: str) -> Tuple[str, Any]:
    """Parse a KEY=VALUE command-line assignment.

    VALUE is read as JSON when possible (``true``, ``0.5``, ``"x"``,
    ``[1, 2]``) and kept as the raw string otherwise.

    Args:
        text: Raw argument

    Returns:
        (key, value) tuple

    Raises:
        argparse.ArgumentTypeError: If the argument has no '=' or an empty key
    """
    key, sep, raw_value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got: {text!r}")

    try:
        value = json.loads(raw_value)
    except ValueError:
        value = raw_value

    return key, value


def validate_file_path(path: Path) -> bool:
    """Check that a path points to an existing regular file.

    Args:
        path: Path to check

    Returns:
        True if the path is an existing file
    """
    return path.expanduser().is_file()
