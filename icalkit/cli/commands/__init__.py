"""Sub-command handlers for the icalkit CLI."""

from .clean import run_clean_command
from .merge import run_merge_command
from .split import run_split_command
from .view import run_view_command

__all__ = [
    "run_clean_command",
    "run_merge_command",
    "run_split_command",
    "run_view_command",
]
