"""Splitter module - split large iCalendar files into smaller chunks."""

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
from .splitter import (
    build_split_options,
    chunk_file_name,
    sort_event_nodes,
    split,
    split_calendar,
    split_calendar_into_chunks,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_FILE_NAME_PATTERN",
    "EventRange",
    "ICSChunk",
    "SortOrder",
    "SplitMetadata",
    "SplitOptions",
    "SplitResult",
    "build_split_options",
    "chunk_file_name",
    "sort_event_nodes",
    "split",
    "split_calendar",
    "split_calendar_into_chunks",
]
