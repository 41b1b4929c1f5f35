"""Command-line argument parsing for icalkit.

Builds the top-level parser with the ``split``, ``merge``, ``view`` and
``clean`` sub-commands. Option defaults come from ``ICalKitSettings`` so
environment variables and config.yaml apply to every command.
"""

import argparse
from pathlib import Path
from typing import Optional

from icalkit import __version__
from icalkit.config.settings import ICalKitSettings
from icalkit.merger.models import DuplicateHandling
from icalkit.splitter.models import SortOrder
from icalkit.utils.logging import LOG_LEVELS


def parse_limit(value: str) -> int:
    """Parse a non-negative integer for ``--limit``.

    Raises:
        argparse.ArgumentTypeError: If the value is not a non-negative integer
    """
    try:
        limit = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid limit: {value}. Use a whole number") from err
    if limit < 0:
        raise argparse.ArgumentTypeError(f"Invalid limit: {value}. Must be 0 or greater")
    return limit


def _add_split_parser(
    subparsers: "argparse._SubParsersAction[argparse.ArgumentParser]",
    settings: ICalKitSettings,
) -> None:
    split_parser = subparsers.add_parser(
        "split",
        help="Split a large iCal file into chunks",
        description="Split a large iCal file into standalone files of at most N events.",
    )
    split_parser.add_argument("input", type=Path, help="Input .ics file")
    split_parser.add_argument(
        "--chunk-size",
        type=int,
        default=settings.chunk_size,
        help=f"Events per chunk (default: {settings.chunk_size})",
    )
    split_parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help=f"Output directory (default: {settings.output_dir})",
    )
    split_parser.add_argument(
        "--sort",
        "-s",
        dest="sort",
        choices=[order.value for order in SortOrder],
        default=settings.sort_by.value,
        help=f"Sort events before splitting (default: {settings.sort_by.value})",
    )
    split_parser.add_argument(
        "--pattern",
        default=settings.file_name_pattern,
        help="Chunk file name pattern with {n} and {total} placeholders",
    )
    split_parser.add_argument(
        "--zip",
        action="store_true",
        help="Write all chunks into a single ZIP archive in the output directory",
    )


def _add_merge_parser(
    subparsers: "argparse._SubParsersAction[argparse.ArgumentParser]",
    settings: ICalKitSettings,
) -> None:
    merge_parser = subparsers.add_parser(
        "merge",
        help="Merge multiple iCal files",
        description="Merge several iCal files into one, detecting duplicate UIDs.",
    )
    merge_parser.add_argument("inputs", nargs="+", type=Path, help="Input .ics files")
    merge_parser.add_argument("--output", "-o", type=Path, required=True, help="Output file path")
    merge_parser.add_argument(
        "--duplicates",
        "-d",
        choices=[policy.value for policy in DuplicateHandling],
        default=settings.duplicates.value,
        help=f"Duplicate handling (default: {settings.duplicates.value})",
    )
    merge_parser.add_argument("--name", "-n", help="Custom calendar name")


def _add_view_parser(subparsers: "argparse._SubParsersAction[argparse.ArgumentParser]") -> None:
    view_parser = subparsers.add_parser(
        "view",
        help="View iCal file information",
        description="Show calendar information and its events sorted by start date.",
    )
    view_parser.add_argument("input", type=Path, help="Input .ics file")
    view_parser.add_argument("--search", default="", help="Only list events matching this text")
    view_parser.add_argument(
        "--limit", type=parse_limit, default=None, help="List at most this many events"
    )


def _add_clean_parser(subparsers: "argparse._SubParsersAction[argparse.ArgumentParser]") -> None:
    clean_parser = subparsers.add_parser(
        "clean",
        help="Remove duplicate events",
        description="Remove events whose UID already appeared earlier in the file.",
    )
    clean_parser.add_argument("input", type=Path, help="Input .ics file")
    clean_parser.add_argument(
        "--output", "-o", type=Path, help="Output file path (default: overwrites input)"
    )


def create_parser(settings: Optional[ICalKitSettings] = None) -> argparse.ArgumentParser:
    """Create the command line argument parser.

    Args:
        settings: Settings supplying option defaults (fresh settings when omitted)

    Returns:
        Configured ArgumentParser

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["split", "calendar.ics", "--chunk-size", "500"])
        >>> args.chunk_size
        500
    """
    settings = settings if settings is not None else ICalKitSettings()

    parser = argparse.ArgumentParser(
        prog="icalkit",
        description="iCalKit - iCalendar file management tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s split calendar.ics --chunk-size 500
  %(prog)s split calendar.ics --sort original --zip
  %(prog)s merge file1.ics file2.ics -o merged.ics
  %(prog)s merge *.ics -o all.ics --duplicates remove
  %(prog)s view calendar.ics --search standup
  %(prog)s clean calendar.ics -o cleaned.ics
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show version"
    )

    logging_group = parser.add_argument_group("logging", "Logging configuration options")
    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    logging_group.add_argument(
        "--quiet", "-q", action="store_true", help="Only show errors (sets log level to ERROR)"
    )
    logging_group.add_argument("--log-level", choices=LOG_LEVELS, help="Set the log level")
    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored log output"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    _add_split_parser(subparsers, settings)
    _add_merge_parser(subparsers, settings)
    _add_view_parser(subparsers)
    _add_clean_parser(subparsers)

    return parser


__all__ = [
    "create_parser",
    "parse_limit",
]
