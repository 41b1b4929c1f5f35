"""Split a calendar's events into fixed-size standalone calendars."""

import logging
import math
from collections.abc import Sequence
from typing import Optional, Union

from pydantic import ValidationError

from ..ics.events import event_timestamp
from ..ics.exceptions import InvalidOptionError, describe_validation_error
from ..ics.models import CalendarDocument, EventNode
from ..ics.parser import parse_calendar
from .models import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_FILE_NAME_PATTERN,
    EventRange,
    ICSChunk,
    SortOrder,
    SplitMetadata,
    SplitOptions,
    SplitResult,
)

logger = logging.getLogger(__name__)


def build_split_options(
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sort_by: Union[SortOrder, str] = SortOrder.DTSTART,
    file_name_pattern: Optional[str] = None,
) -> SplitOptions:
    """Validate split options.

    Raises:
        InvalidOptionError: If chunk_size is not a positive integer or sort_by is unknown
    """
    try:
        return SplitOptions(
            chunk_size=chunk_size, sort_by=sort_by, file_name_pattern=file_name_pattern
        )
    except ValidationError as e:
        raise InvalidOptionError(
            f"Invalid split options: {describe_validation_error(e)}"
        ) from e


def sort_event_nodes(events: Sequence[EventNode], sort_by: SortOrder) -> list[EventNode]:
    """Order events for splitting without touching the input sequence.

    ``dtstart`` compares the raw DTSTART of each node; nodes without one sort
    last and ties keep their original order.
    """
    if sort_by == SortOrder.ORIGINAL:
        return list(events)
    if sort_by == SortOrder.DTSTART:
        return sorted(events, key=lambda node: event_timestamp(node.dtstart))
    raise InvalidOptionError(f"Unknown sort order: {sort_by}")


def chunk_file_name(index: int, total: int, pattern: Optional[str] = None) -> str:
    """File name for the 1-based chunk ``index`` of ``total``."""
    template = pattern or DEFAULT_FILE_NAME_PATTERN
    return template.replace("{n}", str(index)).replace("{total}", str(total))


def split_calendar_into_chunks(
    document: CalendarDocument,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sort_by: Union[SortOrder, str] = SortOrder.DTSTART,
    file_name_pattern: Optional[str] = None,
) -> list[ICSChunk]:
    """Partition a document's events into standalone calendar chunks.

    Every chunk keeps the calendar-level properties and timezones of
    ``document`` and holds at most ``chunk_size`` events. A document without
    events yields no chunks.

    Args:
        document: Parsed source calendar (never modified)
        chunk_size: Maximum events per chunk
        sort_by: ``dtstart`` or ``original``
        file_name_pattern: Optional pattern using ``{n}`` and ``{total}``

    Returns:
        Chunks in order; ``event_range`` refers to the sorted sequence

    Raises:
        InvalidOptionError: If the options are invalid
    """
    options = build_split_options(chunk_size, sort_by, file_name_pattern)
    events = sort_event_nodes(document.events, options.sort_by)

    total = len(events)
    num_chunks = math.ceil(total / options.chunk_size)
    chunks: list[ICSChunk] = []

    for i in range(num_chunks):
        start = i * options.chunk_size
        end = min(start + options.chunk_size, total)
        chunk_document = document.with_events(events[start:end])

        chunks.append(
            ICSChunk(
                file_name=chunk_file_name(i + 1, num_chunks, options.file_name_pattern),
                content=chunk_document.to_ical(),
                event_count=end - start,
                event_range=EventRange(start=start, end=end),
            )
        )

    logger.debug(
        f"Split {total} events into {num_chunks} chunks "
        f"(chunk_size={options.chunk_size}, sort_by={options.sort_by.value})"
    )
    return chunks


def split_calendar(
    content: Union[str, bytes, CalendarDocument],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sort_by: Union[SortOrder, str] = SortOrder.DTSTART,
    file_name_pattern: Optional[str] = None,
) -> SplitResult:
    """Parse ICS content and split it into chunks.

    Raises:
        InvalidOptionError: If the options are invalid (checked before parsing)
        ParseError: If the content cannot be parsed
    """
    options = build_split_options(chunk_size, sort_by, file_name_pattern)
    document = content if isinstance(content, CalendarDocument) else parse_calendar(content)
    chunks = split_calendar_into_chunks(
        document,
        chunk_size=options.chunk_size,
        sort_by=options.sort_by,
        file_name_pattern=options.file_name_pattern,
    )

    return SplitResult(
        chunks=chunks,
        total_events=document.total_events,
        metadata=SplitMetadata(chunk_size=options.chunk_size, sort_by=options.sort_by),
    )


async def split(
    content: Union[str, bytes, CalendarDocument],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    sort_by: Union[SortOrder, str] = SortOrder.DTSTART,
    file_name_pattern: Optional[str] = None,
) -> SplitResult:
    """Awaitable form of ``split_calendar`` for I/O-bound callers."""
    return split_calendar(content, chunk_size, sort_by, file_name_pattern)
