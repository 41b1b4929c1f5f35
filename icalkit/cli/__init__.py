"""CLI module for icalkit.

Provides argument parsing, logging setup and dispatch to the sub-command
handlers.
"""

import logging
import sys
from typing import Optional

from icalkit.config.settings import get_settings
from icalkit.ics.exceptions import ICalKitError
from icalkit.utils.logging import apply_command_line_overrides, setup_logging

from .commands import (
    run_clean_command,
    run_merge_command,
    run_split_command,
    run_view_command,
)
from .parser import create_parser

logger = logging.getLogger(__name__)

COMMANDS = {
    "split": run_split_command,
    "merge": run_merge_command,
    "view": run_view_command,
    "clean": run_clean_command,
}


async def main_entry(argv: Optional[list[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    settings = get_settings()
    parser = create_parser(settings)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = apply_command_line_overrides(settings, args)
    setup_logging(settings.log_level, enable_colors=settings.log_colors)

    handler = COMMANDS[args.command]
    try:
        return await handler(args)
    except ICalKitError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


__all__ = ["COMMANDS", "create_parser", "main_entry"]
