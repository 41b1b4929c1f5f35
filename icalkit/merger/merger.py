"""Merge several calendars into one with UID-based duplicate handling."""

import logging
from collections.abc import Sequence
from typing import Optional, Union

from icalendar import Component
from pydantic import ValidationError

from ..ics.events import NO_TITLE
from ..ics.exceptions import InvalidInputError, InvalidOptionError, describe_validation_error
from ..ics.models import CALENDAR_NAME_PROPERTY, CalendarDocument, EventNode
from ..ics.parser import parse_calendar
from .models import (
    CleanResult,
    DuplicateHandling,
    DuplicateInfo,
    DuplicateReporter,
    MergeMetadata,
    MergeOptions,
    MergeResult,
)

logger = logging.getLogger(__name__)

MergeInput = Union[str, bytes, CalendarDocument]


def log_duplicate_warnings(details: list[DuplicateInfo]) -> None:
    """Default duplicate reporter: one WARNING line per duplicate."""
    logger.warning(f"Found {len(details)} duplicate event(s)")
    for dup in details:
        logger.warning(
            f'  - "{dup.summary}" (UID: {dup.uid}) appears in calendars '
            f"{dup.original_index + 1} and {dup.source_index + 1}"
        )


def build_merge_options(
    duplicates: Union[DuplicateHandling, str] = DuplicateHandling.WARN,
    calendar_name: Optional[str] = None,
) -> MergeOptions:
    """Validate merge options.

    Raises:
        InvalidOptionError: If the duplicate policy is unknown
    """
    try:
        return MergeOptions(duplicates=duplicates, calendar_name=calendar_name)
    except ValidationError as e:
        raise InvalidOptionError(
            f"Invalid merge options: {describe_validation_error(e)}"
        ) from e


def normalize_input(source: MergeInput, index: int) -> CalendarDocument:
    """Turn raw ICS text into a document; documents pass through unchanged."""
    if isinstance(source, CalendarDocument):
        return source
    if isinstance(source, (str, bytes)):
        return parse_calendar(source)
    raise InvalidInputError(
        f"Unsupported merge input at index {index}: {type(source).__name__}"
    )


def _collect_timezones(documents: Sequence[CalendarDocument]) -> list[Component]:
    """Gather VTIMEZONEs from all sources; the first definition of a TZID wins."""
    seen: set[str] = set()
    timezones: list[Component] = []
    for document in documents:
        for tz in document.timezones:
            tzid = str(tz.get("TZID", ""))
            if tzid in seen:
                continue
            seen.add(tzid)
            timezones.append(tz)
    return timezones


def _scan_events(
    documents: Sequence[CalendarDocument], policy: DuplicateHandling
) -> tuple[list[EventNode], list[DuplicateInfo], int]:
    """Single ordered pass over all events, source by source.

    The first source holding a UID owns it; every later occurrence is reported
    as a duplicate and dropped only under the ``remove`` policy. Events without
    a UID are always kept and never reported.
    """
    first_seen: dict[str, int] = {}
    retained: list[EventNode] = []
    details: list[DuplicateInfo] = []
    removed = 0

    for source_index, document in enumerate(documents):
        for event in document.events:
            uid = event.uid
            if uid is None:
                retained.append(event)
                continue

            if uid in first_seen:
                details.append(
                    DuplicateInfo(
                        uid=uid,
                        summary=event.summary or NO_TITLE,
                        source_index=source_index,
                        original_index=first_seen[uid],
                    )
                )
                if policy == DuplicateHandling.REMOVE:
                    removed += 1
                    continue
            else:
                first_seen[uid] = source_index

            retained.append(event)

    return retained, details, removed


def merge_calendars(
    inputs: Sequence[MergeInput],
    duplicates: Union[DuplicateHandling, str] = DuplicateHandling.WARN,
    calendar_name: Optional[str] = None,
    reporter: Optional[DuplicateReporter] = None,
) -> MergeResult:
    """Merge multiple calendars into one.

    Calendar-level properties come from the first input. Events are appended
    in source order, then event order; they are never re-sorted.

    Args:
        inputs: ICS strings/bytes or parsed documents, at least one
        duplicates: ``warn`` (default), ``remove`` or ``keep-all``
        calendar_name: Replaces (or adds) X-WR-CALNAME in the output
        reporter: Called with the duplicate list under ``warn`` when duplicates
            exist; defaults to ``log_duplicate_warnings``

    Returns:
        Merged content with counts and a duplicate report

    Raises:
        InvalidOptionError: If the duplicate policy is unknown
        InvalidInputError: If ``inputs`` is empty or holds an unsupported type
        ParseError: If any input cannot be parsed
    """
    options = build_merge_options(duplicates, calendar_name)

    if len(inputs) == 0:
        raise InvalidInputError("At least one calendar input is required")

    documents = [normalize_input(source, index) for index, source in enumerate(inputs)]

    events, details, removed = _scan_events(documents, options.duplicates)

    if options.duplicates == DuplicateHandling.WARN and details:
        (reporter or log_duplicate_warnings)(details)

    merged = documents[0].with_events(events).with_timezones(_collect_timezones(documents))
    if options.calendar_name:
        merged = merged.with_property(CALENDAR_NAME_PROPERTY, options.calendar_name)

    logger.debug(
        f"Merged {len(documents)} calendars into {len(events)} events "
        f"({len(details)} duplicates found, {removed} removed)"
    )

    return MergeResult(
        content=merged.to_ical(),
        total_events=len(events),
        source_count=len(documents),
        metadata=MergeMetadata(
            duplicate_handling=options.duplicates,
            duplicates_found=len(details),
            duplicates_removed=removed,
            duplicate_details=details,
        ),
    )


async def merge(
    inputs: Sequence[MergeInput],
    duplicates: Union[DuplicateHandling, str] = DuplicateHandling.WARN,
    calendar_name: Optional[str] = None,
    reporter: Optional[DuplicateReporter] = None,
) -> MergeResult:
    """Awaitable form of ``merge_calendars`` for I/O-bound callers."""
    return merge_calendars(inputs, duplicates, calendar_name, reporter)


def clean_calendar(content: MergeInput) -> CleanResult:
    """Drop every repeated UID from a single calendar, keeping the first."""
    document = normalize_input(content, 0)
    result = merge_calendars([document], duplicates=DuplicateHandling.REMOVE)
    return CleanResult(
        content=result.content,
        kept=result.total_events,
        removed=result.metadata.duplicates_removed,
        duplicate_details=result.metadata.duplicate_details,
    )
