"""Event projection helpers: extraction, date sort and text filter."""

import math
from collections.abc import Iterable
from datetime import date, datetime, time, timezone
from typing import Optional

from .models import EventNode, EventRecord

NO_TITLE = "(no title)"


def normalize_datetime(value: Optional[date]) -> Optional[datetime]:
    """Normalize an ICS date value to an aware datetime.

    All-day dates become midnight and floating times are read as UTC; values
    that already carry a timezone are returned unchanged.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return None


def event_timestamp(value: Optional[date]) -> float:
    """Sort key for a start value; missing values sort after everything else."""
    normalized = normalize_datetime(value)
    if normalized is None:
        return math.inf
    return normalized.timestamp()


def extract_events(events: Iterable[EventNode]) -> list[EventRecord]:
    """Project event nodes into EventRecords, ids assigned in input order."""
    records = []
    for index, node in enumerate(events):
        start = normalize_datetime(node.dtstart)
        end = normalize_datetime(node.dtend)
        if end is None and start is not None and node.duration is not None:
            end = start + node.duration

        records.append(
            EventRecord(
                id=index,
                summary=node.summary or NO_TITLE,
                description=node.description,
                location=node.location,
                start_date=start,
                end_date=end,
            )
        )
    return records


def sort_events_by_date(records: Iterable[EventRecord]) -> list[EventRecord]:
    """Return a new list sorted by start date.

    Records without a start go last; ``sorted`` is stable so ties keep
    their input order.
    """
    return sorted(records, key=lambda record: event_timestamp(record.start_date))


def filter_events(records: list[EventRecord], query: str) -> list[EventRecord]:
    """Case-insensitive substring match on summary, description or location."""
    if not query.strip():
        return records

    needle = query.lower()
    return [
        record
        for record in records
        if needle in record.summary.lower()
        or needle in record.description.lower()
        or needle in record.location.lower()
    ]
