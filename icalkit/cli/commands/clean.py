"""Clean command handler."""

from typing import Any

from icalkit.merger import clean_calendar


async def run_clean_command(args: Any) -> int:
    """Remove repeated UIDs from a calendar file.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)
    """
    result = clean_calendar(args.input.read_bytes())

    output = args.output or args.input
    output.write_text(result.content, encoding="utf-8", newline="")

    print(f"Cleaned {args.input} into {output}")
    print(f"  Kept: {result.kept}")
    print(f"  Removed: {result.removed}")
    return 0
