"""Data models for the in-memory calendar document and its event projection."""

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional

from icalendar import Calendar, Component
from pydantic import BaseModel, ConfigDict, Field, field_serializer

CALENDAR_NAME_PROPERTY = "X-WR-CALNAME"


def _first(value: Any) -> Any:
    """Return the first value of a repeated property, or the value itself."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _decoded(value: Any) -> Any:
    """Return the ``.dt`` of a date/duration property, or None if unusable.

    icalendar 7 keeps unparsable values as broken properties whose ``.dt``
    raises a ValueError subclass instead of being absent.
    """
    try:
        return getattr(value, "dt", None)
    except ValueError:
        return None


@dataclass(frozen=True)
class CalendarProperty:
    """A single calendar-level property in source order."""

    name: str
    value: Any


@dataclass(frozen=True)
class EventNode:
    """One VEVENT in its parsed structured form.

    The wrapped component is shared read-only between every document that
    contains the event; nothing in icalkit mutates it after parsing.
    """

    component: Component

    def _text(self, name: str) -> str:
        value = _first(self.component.get(name))
        if value is None:
            return ""
        return str(value)

    def _temporal(self, name: str) -> Optional[date]:
        dt = _decoded(_first(self.component.get(name)))
        # datetime is a subclass of date, so this covers timed and all-day values
        if isinstance(dt, date):
            return dt
        return None

    @property
    def uid(self) -> Optional[str]:
        """Event UID, or None when the event has no usable identifier."""
        uid = self._text("UID").strip()
        return uid or None

    @property
    def summary(self) -> str:
        return self._text("SUMMARY")

    @property
    def description(self) -> str:
        return self._text("DESCRIPTION")

    @property
    def location(self) -> str:
        return self._text("LOCATION")

    @property
    def dtstart(self) -> Optional[date]:
        return self._temporal("DTSTART")

    @property
    def dtend(self) -> Optional[date]:
        return self._temporal("DTEND")

    @property
    def duration(self) -> Optional[timedelta]:
        dt = _decoded(_first(self.component.get("DURATION")))
        return dt if isinstance(dt, timedelta) else None

    def to_ical(self) -> str:
        """Serialize this event on its own (BEGIN:VEVENT ... END:VEVENT)."""
        return self.component.to_ical(sorted=False).decode("utf-8")


@dataclass(frozen=True)
class CalendarDocument:
    """Immutable calendar document: calendar-level properties plus ordered events.

    Derived documents are produced with ``with_events`` / ``with_property``;
    the receiver is never modified.
    """

    properties: tuple[CalendarProperty, ...] = ()
    events: tuple[EventNode, ...] = ()
    timezones: tuple[Component, ...] = ()
    todo_count: int = 0
    other_component_count: int = 0

    @property
    def total_events(self) -> int:
        return len(self.events)

    def get_property(self, name: str) -> Optional[Any]:
        """Get the first calendar-level property value with the given name."""
        wanted = name.upper()
        for prop in self.properties:
            if prop.name.upper() == wanted:
                return prop.value
        return None

    @property
    def calendar_name(self) -> Optional[str]:
        value = self.get_property(CALENDAR_NAME_PROPERTY)
        return str(value) if value is not None else None

    def with_events(self, events: Iterable[EventNode]) -> "CalendarDocument":
        """Return a copy of this document carrying only the given events."""
        return replace(self, events=tuple(events))

    def with_timezones(self, timezones: Iterable[Component]) -> "CalendarDocument":
        return replace(self, timezones=tuple(timezones))

    def with_property(self, name: str, value: Any) -> "CalendarDocument":
        """Return a copy with ``name`` set to ``value``.

        The first existing occurrence keeps its position, later occurrences are
        dropped. When the property is absent it is appended.
        """
        wanted = name.upper()
        properties: list[CalendarProperty] = []
        replaced = False
        for prop in self.properties:
            if prop.name.upper() != wanted:
                properties.append(prop)
            elif not replaced:
                properties.append(CalendarProperty(prop.name, value))
                replaced = True
        if not replaced:
            properties.append(CalendarProperty(wanted, value))
        return replace(self, properties=tuple(properties))

    def to_calendar(self) -> Calendar:
        """Build a fresh icalendar ``Calendar`` for serialization."""
        calendar = Calendar()
        for prop in self.properties:
            calendar.add(prop.name, prop.value)
        for tz in self.timezones:
            calendar.add_component(tz)
        for event in self.events:
            calendar.add_component(event.component)
        return calendar

    def to_ical(self) -> str:
        """Serialize to ICS text, keeping property insertion order."""
        return self.to_calendar().to_ical(sorted=False).decode("utf-8")


class EventRecord(BaseModel):
    """Flat, display-oriented projection of one event."""

    id: int = Field(..., description="Position assigned at extraction time (0-based)")
    summary: str = Field(..., min_length=1, description="Event title, never empty")
    description: str = Field(default="", description="Event description")
    location: str = Field(default="", description="Event location")
    start_date: Optional[datetime] = Field(default=None, description="Normalized start")
    end_date: Optional[datetime] = Field(default=None, description="Normalized end")

    model_config = ConfigDict(frozen=True)

    @field_serializer("start_date", "end_date", when_used="unless-none")
    def serialize_datetime(self, dt: datetime) -> str:
        """Serialize datetime fields to ISO format."""
        return dt.isoformat()
