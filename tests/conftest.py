"""Shared fixtures for icalkit tests."""

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Optional

import pytest

from icalkit.config.settings import ENV_PREFIX, reset_settings

CRLF = "\r\n"

BERLIN_TIMEZONE = CRLF.join(
    [
        "BEGIN:VTIMEZONE",
        "TZID:Europe/Berlin",
        "BEGIN:STANDARD",
        "DTSTART:19701025T030000",
        "TZOFFSETFROM:+0200",
        "TZOFFSETTO:+0100",
        "TZNAME:CET",
        "END:STANDARD",
        "END:VTIMEZONE",
    ]
)


def make_event(
    uid: Optional[str] = None,
    summary: Optional[str] = None,
    dtstart: Optional[str] = "20240115T100000Z",
    dtend: Optional[str] = None,
    extra: Optional[list[str]] = None,
) -> str:
    """Build one VEVENT block; ``None`` leaves the property out."""
    lines = ["BEGIN:VEVENT"]
    if uid is not None:
        lines.append(f"UID:{uid}")
    if summary is not None:
        lines.append(f"SUMMARY:{summary}")
    if dtstart is not None:
        lines.append(dtstart if ":" in dtstart else f"DTSTART:{dtstart}")
    if dtend is not None:
        lines.append(dtend if ":" in dtend else f"DTEND:{dtend}")
    lines.extend(extra or [])
    lines.append("END:VEVENT")
    return CRLF.join(lines)


def make_calendar(
    events: list[str],
    name: Optional[str] = None,
    components: Optional[list[str]] = None,
) -> str:
    """Wrap VEVENT blocks (and any other components) in a VCALENDAR."""
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//icalkit tests//EN"]
    if name is not None:
        lines.append(f"X-WR-CALNAME:{name}")
    lines.extend(components or [])
    lines.extend(events)
    lines.append("END:VCALENDAR")
    return CRLF.join(lines) + CRLF


@pytest.fixture
def ics_builder() -> Callable[..., str]:
    """Calendar builder usable from tests that need custom content."""
    return make_calendar


@pytest.fixture
def event_builder() -> Callable[..., str]:
    """VEVENT builder usable from tests that need custom content."""
    return make_event


@pytest.fixture
def three_event_ics() -> str:
    """Calendar with three timed events listed out of date order."""
    return make_calendar(
        [
            make_event("evt-3", "Retro", "20240117T150000Z", "20240117T160000Z"),
            make_event("evt-1", "Standup", "20240115T090000Z", "20240115T091500Z"),
            make_event("evt-2", "Planning", "20240116T130000Z", "20240116T140000Z"),
        ],
        name="Team",
    )


@pytest.fixture
def empty_ics() -> str:
    """Valid calendar without any events."""
    return make_calendar([], name="Empty")


@pytest.fixture
def timezone_ics() -> str:
    """Calendar carrying a VTIMEZONE and an event that refers to it."""
    return make_calendar(
        [
            make_event(
                "tz-1",
                "Berlin meeting",
                "DTSTART;TZID=Europe/Berlin:20240115T100000",
                "DTEND;TZID=Europe/Berlin:20240115T110000",
            )
        ],
        name="Berlin",
        components=[BERLIN_TIMEZONE],
    )


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Keep settings and logging state from leaking between tests.

    Runs every test from an empty working directory with an empty home so no
    config.yaml or .env on the machine is picked up.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    reset_settings()
    yield
    reset_settings()

    logger = logging.getLogger("icalkit")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
