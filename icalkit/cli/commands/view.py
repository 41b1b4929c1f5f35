"""View command handler."""

from datetime import datetime
from typing import Any, Optional

from icalkit.ics import (
    extract_events,
    filter_events,
    parse_calendar,
    sort_events_by_date,
    summarize_calendar,
)


def format_date(value: Optional[datetime]) -> str:
    """Format an event date for the listing."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M")


async def run_view_command(args: Any) -> int:
    """Print calendar information and its events sorted by start date.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)
    """
    document = parse_calendar(args.input.read_bytes())
    summary = summarize_calendar(document)

    print(f"Calendar: {summary.calendar_name or '(unnamed)'}")
    if summary.prodid:
        print(f"  Product: {summary.prodid}")
    if summary.version:
        print(f"  Version: {summary.version}")
    print(f"  Events: {summary.event_count}")
    print(f"  Todos: {summary.todo_count}")
    if summary.timezone_count:
        print(f"  Timezones: {summary.timezone_count}")
    if summary.other_component_count:
        print(f"  Other components: {summary.other_component_count}")

    records = filter_events(sort_events_by_date(extract_events(document.events)), args.search)
    if args.search.strip():
        print(f"  Matching '{args.search}': {len(records)}")

    shown = records if args.limit is None else records[: args.limit]
    for record in shown:
        line = f"  {format_date(record.start_date)}  {record.summary}"
        if record.location:
            line += f" @ {record.location}"
        print(line)

    if len(shown) < len(records):
        print(f"  ... {len(records) - len(shown)} more")

    return 0
