"""Split command handler."""

import logging
from typing import Any

from icalkit.splitter import split

from ..output import write_chunks_to_directory, write_chunks_to_zip, zip_file_name

logger = logging.getLogger(__name__)


async def run_split_command(args: Any) -> int:
    """Split one calendar file into chunk files.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)
    """
    content = args.input.read_bytes()
    result = await split(
        content,
        chunk_size=args.chunk_size,
        sort_by=args.sort,
        file_name_pattern=args.pattern,
    )

    if not result.chunks:
        logger.warning(f"No events found in {args.input}; nothing written")
        print(f"Split {result.total_events} events into 0 files")
        return 0

    if args.zip:
        archive = write_chunks_to_zip(
            result.chunks, args.output_dir / zip_file_name(len(result.chunks))
        )
        print(f"Split {result.total_events} events into {len(result.chunks)} files")
        print(f"  Archive: {archive}")
        return 0

    paths = write_chunks_to_directory(result.chunks, args.output_dir)
    print(f"Split {result.total_events} events into {len(result.chunks)} files")
    for chunk, path in zip(result.chunks, paths):
        print(f"  - {path} ({chunk.event_count} event{'s' if chunk.event_count != 1 else ''})")
    return 0
