"""Utility helpers for icalkit."""

from .logging import (
    VERBOSE,
    AutoColoredFormatter,
    apply_command_line_overrides,
    get_log_level,
    setup_logging,
)

__all__ = [
    "VERBOSE",
    "AutoColoredFormatter",
    "apply_command_line_overrides",
    "get_log_level",
    "setup_logging",
]
