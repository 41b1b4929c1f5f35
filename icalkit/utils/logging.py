"""Console logging setup for the icalkit command-line tool."""

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Optional, TextIO

if TYPE_CHECKING:
    from icalkit.config.settings import ICalKitSettings

# Between DEBUG(10) and INFO(20)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

_LEVELS_BY_NAME = {
    "DEBUG": logging.DEBUG,
    "VERBOSE": VERBOSE,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_LEVELS = list(_LEVELS_BY_NAME)


def get_log_level(level_name: str) -> int:
    """Map a level name (any case, VERBOSE included) to its number.

    Raises:
        ValueError: If the level name is not recognized
    """
    try:
        return _LEVELS_BY_NAME[level_name.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level_name}") from None


# Level name -> (bright palette, basic 8-color palette)
LEVEL_COLORS = {
    "DEBUG": ("\033[95m", "\033[35m"),
    "VERBOSE": ("\033[92m", "\033[32m"),
    "INFO": ("\033[94m", "\033[34m"),
    "WARNING": ("\033[93m", "\033[33m"),
    "ERROR": ("\033[91m", "\033[31m"),
    "CRITICAL": ("\033[1;91m", "\033[1;31m"),
}
RESET = "\033[0m"


def detect_color_mode(stream: TextIO) -> str:
    """Return ``bright``, ``basic`` or ``none`` for the given output stream."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty() or "NO_COLOR" in os.environ:
        return "none"

    term = os.environ.get("TERM", "").lower()
    if term == "dumb":
        return "none"
    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit") or "256color" in term:
        return "bright"
    return "basic" if "color" in term else "none"


class AutoColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when the stream is a color terminal."""

    def __init__(
        self,
        *args: Any,
        enable_colors: bool = True,
        stream: Optional[TextIO] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.stream = stream if stream is not None else sys.stderr
        self.color_mode = detect_color_mode(self.stream) if enable_colors else "none"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        colors = LEVEL_COLORS.get(record.levelname)
        if self.color_mode == "none" or colors is None:
            return formatted

        color = colors[0] if self.color_mode == "bright" else colors[1]
        return formatted.replace(record.levelname, f"{color}{record.levelname}{RESET}", 1)


def setup_logging(
    log_level: str = "INFO", enable_colors: bool = True, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Set up console logging for the ``icalkit`` logger hierarchy.

    Args:
        log_level: Level name understood by ``get_log_level``
        enable_colors: Allow ANSI colors when the stream is a terminal
        stream: Output stream (defaults to stderr)

    Returns:
        The configured ``icalkit`` logger
    """
    numeric_level = get_log_level(log_level)
    target = stream if stream is not None else sys.stderr

    logger = logging.getLogger("icalkit")
    logger.setLevel(numeric_level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(target)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        AutoColoredFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            enable_colors=enable_colors,
            stream=target,
        )
    )
    logger.addHandler(handler)

    # icalendar logs parse recoveries at DEBUG/INFO
    logging.getLogger("icalendar").setLevel(logging.WARNING)

    logger.debug(f"Logging initialized at {log_level.upper()} level")
    return logger


def apply_command_line_overrides(
    settings: "ICalKitSettings", args: Any
) -> "ICalKitSettings":
    """Apply command-line logging overrides to settings.

    Priority: --log-level > --quiet > --verbose > settings. Returns an updated
    copy; the given settings object is left untouched.
    """
    updates: dict[str, Any] = {}

    if getattr(args, "verbose", False):
        updates["log_level"] = "VERBOSE"

    if getattr(args, "quiet", False):
        updates["log_level"] = "ERROR"

    if getattr(args, "log_level", None):
        updates["log_level"] = args.log_level

    if getattr(args, "no_log_colors", False):
        updates["log_colors"] = False

    if not updates:
        return settings
    return settings.model_copy(update=updates)
