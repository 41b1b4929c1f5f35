"""Merger module - combine several iCalendar files into one."""

from .merger import (
    MergeInput,
    build_merge_options,
    clean_calendar,
    log_duplicate_warnings,
    merge,
    merge_calendars,
    normalize_input,
)
from .models import (
    CleanResult,
    DuplicateHandling,
    DuplicateInfo,
    DuplicateReporter,
    MergeMetadata,
    MergeOptions,
    MergeResult,
)

__all__ = [
    "CleanResult",
    "DuplicateHandling",
    "DuplicateInfo",
    "DuplicateReporter",
    "MergeInput",
    "MergeMetadata",
    "MergeOptions",
    "MergeResult",
    "build_merge_options",
    "clean_calendar",
    "log_duplicate_warnings",
    "merge",
    "merge_calendars",
    "normalize_input",
]
