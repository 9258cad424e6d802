# Area: Shared
"""
lotto_cli.cli — Command-line interface
=======================================

Provides the CLI entry point.

Usage:
    lotto status            # Show the current game round
    lotto config            # View your settings
    lotto setup             # Create or reset your settings
    lotto -v status         # Include debug logs on stderr

Settings come from ~/.lotto-cli/config.json (or LOTTO_CONFIG_PATH),
overridden by LOTTO_* environment variables. Set LOTTO_LOG_FILE to also
write JSON logs to a file.
"""

import argparse
import locale
import logging
import os
from typing import List, Optional

from .commands import COMMANDS
from ._shared.logging_config import setup_logging

logger = logging.getLogger("lotto_cli")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="lotto",
        description="Read the state of the on-chain lottery game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lotto setup
  lotto status
  LOTTO_NETWORK=base-sepolia lotto status
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run", required=True)
    for name, command in COMMANDS.items():
        subparsers.add_parser(name, help=command.description, description=command.description)

    return parser


def use_default_locale() -> None:
    """Render dates with the user's locale instead of "C"."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.debug(f"Could not apply default locale: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file_path=os.environ.get("LOTTO_LOG_FILE"))
    use_default_locale()

    command = COMMANDS[args.command]()
    logger.debug(f"Running command '{args.command}'")
    return command.run()
