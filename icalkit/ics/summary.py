"""Calendar-level summary used by the view command."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .models import CalendarDocument


class CalendarSummary(BaseModel):
    """Overview of a parsed calendar document."""

    calendar_name: Optional[str] = None
    prodid: Optional[str] = None
    version: Optional[str] = None

    event_count: int = 0
    todo_count: int = 0
    timezone_count: int = 0
    other_component_count: int = 0

    model_config = ConfigDict(frozen=True)


def _text(value: object) -> Optional[str]:
    return str(value) if value is not None else None


def summarize_calendar(document: CalendarDocument) -> CalendarSummary:
    """Summarize a calendar document."""
    return CalendarSummary(
        calendar_name=document.calendar_name,
        prodid=_text(document.get_property("PRODID")),
        version=_text(document.get_property("VERSION")),
        event_count=document.total_events,
        todo_count=document.todo_count,
        timezone_count=len(document.timezones),
        other_component_count=document.other_component_count,
    )
