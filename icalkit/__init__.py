"""iCalKit - split, merge and inspect iCalendar (.ics) files."""

__version__ = "1.0.0"

from .ics import (  # noqa: E402
    CalendarDocument,
    EventRecord,
    ICalKitError,
    InvalidInputError,
    InvalidOptionError,
    ParseError,
    extract_events,
    filter_events,
    parse_calendar,
    sort_events_by_date,
)
from .merger import (  # noqa: E402
    DuplicateHandling,
    MergeResult,
    clean_calendar,
    merge,
    merge_calendars,
)
from .splitter import (  # noqa: E402
    ICSChunk,
    SortOrder,
    SplitResult,
    split,
    split_calendar,
    split_calendar_into_chunks,
)

__all__ = [
    "CalendarDocument",
    "DuplicateHandling",
    "EventRecord",
    "ICSChunk",
    "ICalKitError",
    "InvalidInputError",
    "InvalidOptionError",
    "MergeResult",
    "ParseError",
    "SortOrder",
    "SplitResult",
    "__version__",
    "clean_calendar",
    "extract_events",
    "filter_events",
    "merge",
    "merge_calendars",
    "parse_calendar",
    "sort_events_by_date",
    "split",
    "split_calendar",
    "split_calendar_into_chunks",
]
