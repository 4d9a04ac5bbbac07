"""CLI entry point for secconfig."""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError as SettingsError

from core.types import LogLevel


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()
    logger.enable("secconfig")

    if verbose:
        logger.add(
            sys.stderr,
            level=LogLevel.DEBUG.loguru_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level=LogLevel.INFO.loguru_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import create_main_parser, setup_subparsers
    from .parsers.config_parser import add_config_subparser

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_config_subparser(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI.

    Args:
        argv: Arguments to parse (sys.argv[1:] if None)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    from secconfig.core.config import StoreSettings
    from .utils.output import OutputFormatter

    try:
        settings = StoreSettings()
    except SettingsError as e:
        OutputFormatter().error(f"Invalid SECCONFIG_* settings: {e}")
        sys.exit(1)

    try:
        setup_logging(getattr(args, "verbose", False) or settings.debug)

        if args.command == "config":
            from .commands.config import config_command
            config_command(args)
        else:
            logger.error(f"Unknown command: {args.command}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        logger.opt(exception=e).debug("Full error details:")
        sys.exit(1)


if __name__ == "__main__":
    main()
