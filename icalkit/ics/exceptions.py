"""Exceptions raised by the iCalendar core."""

from pydantic import ValidationError


class ICalKitError(Exception):
    """Base exception for all icalkit errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(ICalKitError):
    """Exception raised when ICS content is not a parseable calendar document."""


class InvalidOptionError(ICalKitError):
    """Exception raised when a split or merge option is out of range or unknown."""


class InvalidInputError(ICalKitError):
    """Exception raised when the inputs to an operation are unusable."""


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line message."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail.get("loc", ()))
        parts.append(f"{location}: {detail.get('msg')}" if location else str(detail.get("msg")))
    return "; ".join(parts)
