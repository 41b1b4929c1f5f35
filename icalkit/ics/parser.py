"""ICS text to CalendarDocument parsing on top of the icalendar library."""

import logging
from typing import Union

from icalendar import Calendar

from .exceptions import ParseError
from .models import CalendarDocument, CalendarProperty, EventNode

logger = logging.getLogger(__name__)


def _property_pairs(calendar: Calendar) -> tuple[CalendarProperty, ...]:
    """Flatten calendar-level properties, expanding repeated ones in place."""
    pairs: list[CalendarProperty] = []
    for name, values in calendar.items():
        if not isinstance(values, list):
            values = [values]
        for value in values:
            pairs.append(CalendarProperty(name, value))
    return tuple(pairs)


def document_from_calendar(calendar: Calendar) -> CalendarDocument:
    """Build a CalendarDocument from an already parsed VCALENDAR component.

    Only direct subcomponents are considered. VEVENTs become the event list,
    VTIMEZONEs are carried separately, everything else is only counted.
    """
    events: list[EventNode] = []
    timezones = []
    todo_count = 0
    other_count = 0

    for component in calendar.subcomponents:
        if component.name == "VEVENT":
            events.append(EventNode(component))
        elif component.name == "VTIMEZONE":
            timezones.append(component)
        elif component.name == "VTODO":
            todo_count += 1
        else:
            other_count += 1

    return CalendarDocument(
        properties=_property_pairs(calendar),
        events=tuple(events),
        timezones=tuple(timezones),
        todo_count=todo_count,
        other_component_count=other_count,
    )


def parse_calendar(content: Union[str, bytes]) -> CalendarDocument:
    """Parse ICS content into a CalendarDocument.

    Args:
        content: Raw ICS text (or UTF-8 bytes)

    Returns:
        Parsed document with properties, events and timezones

    Raises:
        ParseError: If the content is empty, malformed, or not a VCALENDAR
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"ICS content is not valid UTF-8: {e}") from e

    if not content or not content.strip():
        raise ParseError("Empty ICS content")

    try:
        calendar = Calendar.from_ical(content)
    except (ValueError, IndexError) as e:
        raise ParseError(f"Failed to parse ICS content: {e}") from e

    if getattr(calendar, "name", None) != "VCALENDAR":
        raise ParseError(
            f"Expected a VCALENDAR document, found {getattr(calendar, 'name', None)!r}"
        )

    document = document_from_calendar(calendar)
    logger.debug(
        f"Parsed calendar: {len(document.properties)} properties, "
        f"{document.total_events} events, {len(document.timezones)} timezones"
    )
    return document
