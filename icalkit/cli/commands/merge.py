"""Merge command handler."""

from typing import Any

from icalkit.ics.exceptions import InvalidInputError
from icalkit.merger import DuplicateHandling, merge


async def run_merge_command(args: Any) -> int:
    """Merge several calendar files into one output file.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        InvalidInputError: If fewer than two files are given or a file cannot be read
    """
    if len(args.inputs) < 2:
        raise InvalidInputError("At least two input files are required for merging")

    contents = []
    for input_path in args.inputs:
        try:
            contents.append(input_path.read_bytes())
        except OSError as e:
            raise InvalidInputError(f'Failed to read file "{input_path}": {e}') from e

    result = await merge(contents, duplicates=args.duplicates, calendar_name=args.name)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(result.content, encoding="utf-8", newline="")

    print(f"Merged {result.source_count} calendars into {args.output}")
    print(f"  Total events: {result.total_events}")

    metadata = result.metadata
    if metadata.duplicates_found > 0:
        if metadata.duplicate_handling == DuplicateHandling.REMOVE:
            print(f"  Duplicates removed: {metadata.duplicates_removed}")
        else:
            print(f"  Duplicates found: {metadata.duplicates_found}")

    return 0
