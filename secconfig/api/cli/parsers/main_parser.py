"""Main argument parser for secconfig CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from secconfig import __version__

    parser = argparse.ArgumentParser(
        prog="secconfig",
        description="Inspect and override security settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  secconfig config list
  secconfig config list --immutable
  secconfig config get logging.level
  secconfig config export --set logging.level='"debug"'
  secconfig config export --overrides ./overrides.yaml
  secconfig config validate ./overrides.json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"secconfig {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--overrides",
        type=Path,
        help="JSON or YAML override file applied on top of the built-in settings",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
]
