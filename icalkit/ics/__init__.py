"""iCalendar document model, parsing and event projection."""

from .events import (
    NO_TITLE,
    event_timestamp,
    extract_events,
    filter_events,
    normalize_datetime,
    sort_events_by_date,
)
from .exceptions import (
    ICalKitError,
    InvalidInputError,
    InvalidOptionError,
    ParseError,
    describe_validation_error,
)
from .models import (
    CALENDAR_NAME_PROPERTY,
    CalendarDocument,
    CalendarProperty,
    EventNode,
    EventRecord,
)
from .parser import document_from_calendar, parse_calendar
from .summary import CalendarSummary, summarize_calendar

__all__ = [
    "CALENDAR_NAME_PROPERTY",
    "NO_TITLE",
    "CalendarDocument",
    "CalendarProperty",
    "CalendarSummary",
    "EventNode",
    "EventRecord",
    "ICalKitError",
    "InvalidInputError",
    "InvalidOptionError",
    "ParseError",
    "describe_validation_error",
    "document_from_calendar",
    "event_timestamp",
    "extract_events",
    "filter_events",
    "normalize_datetime",
    "parse_calendar",
    "sort_events_by_date",
    "summarize_calendar",
]
