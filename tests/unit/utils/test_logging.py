"""Unit tests for logging setup."""

import io
import logging
from types import SimpleNamespace

import pytest

from icalkit.config.settings import ICalKitSettings
from icalkit.utils.logging import (
    VERBOSE,
    AutoColoredFormatter,
    apply_command_line_overrides,
    get_log_level,
    setup_logging,
)

pytestmark = pytest.mark.unit


class TestGetLogLevel:
    """Tests for get_log_level."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("verbose", VERBOSE),
            ("Info", logging.INFO),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_get_log_level_when_known_then_numeric(self, name, expected) -> None:
        """Test level names resolve case-insensitively."""
        assert get_log_level(name) == expected

    def test_get_log_level_when_unknown_then_raises(self) -> None:
        """Test unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            get_log_level("LOUD")


class TestAutoColoredFormatter:
    """Tests for AutoColoredFormatter."""

    def test_formatter_when_not_tty_then_plain(self) -> None:
        """Test non-terminal streams get no escape codes."""
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", stream=io.StringIO())
        record = logging.LogRecord("icalkit", logging.WARNING, __file__, 1, "hello", None, None)

        assert formatter.color_mode == "none"
        assert formatter.format(record) == "WARNING hello"

    def test_formatter_when_tty_and_color_term_then_colored(self, monkeypatch) -> None:
        """Test terminals with color support get colored level names."""

        class FakeTTY(io.StringIO):
            def isatty(self) -> bool:
                return True

        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", stream=FakeTTY())
        record = logging.LogRecord("icalkit", logging.ERROR, __file__, 1, "boom", None, None)

        assert formatter.color_mode == "bright"
        assert "\033[91mERROR\033[0m" in formatter.format(record)

    def test_formatter_when_no_color_env_then_plain(self, monkeypatch) -> None:
        """Test NO_COLOR disables colors even on terminals."""

        class FakeTTY(io.StringIO):
            def isatty(self) -> bool:
                return True

        monkeypatch.setenv("NO_COLOR", "1")

        assert AutoColoredFormatter(stream=FakeTTY()).color_mode == "none"

    def test_formatter_when_colors_disabled_then_plain(self) -> None:
        """Test enable_colors=False skips detection."""
        assert AutoColoredFormatter(enable_colors=False).color_mode == "none"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_setup_logging_writes_to_stream(self) -> None:
        """Test messages from icalkit modules reach the configured stream."""
        stream = io.StringIO()

        setup_logging("INFO", enable_colors=False, stream=stream)
        logging.getLogger("icalkit.merger").warning("duplicate found")
        logging.getLogger("icalkit.merger").debug("hidden")

        output = stream.getvalue()
        assert "icalkit.merger - WARNING - duplicate found" in output
        assert "hidden" not in output

    def test_setup_logging_verbose_level(self) -> None:
        """Test the VERBOSE level sits between DEBUG and INFO."""
        stream = io.StringIO()

        logger = setup_logging("VERBOSE", enable_colors=False, stream=stream)
        logging.getLogger("icalkit.splitter").log(VERBOSE, "verbose detail")

        assert logger.level == VERBOSE
        assert "VERBOSE - verbose detail" in stream.getvalue()

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test repeated setup does not stack handlers."""
        setup_logging("INFO", stream=io.StringIO())
        logger = setup_logging("INFO", stream=io.StringIO())

        assert len(logger.handlers) == 1
        assert logger.propagate is False


class TestApplyCommandLineOverrides:
    """Tests for apply_command_line_overrides."""

    def make_args(self, **overrides) -> SimpleNamespace:
        values = {"verbose": False, "quiet": False, "log_level": None, "no_log_colors": False}
        values.update(overrides)
        return SimpleNamespace(**values)

    def test_overrides_when_none_then_same_settings(self) -> None:
        """Test settings pass through untouched without flags."""
        settings = ICalKitSettings()

        assert apply_command_line_overrides(settings, self.make_args()) is settings

    def test_overrides_verbose(self) -> None:
        """Test --verbose selects the VERBOSE level."""
        settings = apply_command_line_overrides(ICalKitSettings(), self.make_args(verbose=True))

        assert settings.log_level == "VERBOSE"

    def test_overrides_priority(self) -> None:
        """Test --log-level beats --quiet which beats --verbose."""
        args = self.make_args(verbose=True, quiet=True)
        assert apply_command_line_overrides(ICalKitSettings(), args).log_level == "ERROR"

        args = self.make_args(verbose=True, quiet=True, log_level="DEBUG")
        assert apply_command_line_overrides(ICalKitSettings(), args).log_level == "DEBUG"

    def test_overrides_no_log_colors(self) -> None:
        """Test --no-log-colors turns colors off without touching the original."""
        original = ICalKitSettings()

        updated = apply_command_line_overrides(original, self.make_args(no_log_colors=True))

        assert updated.log_colors is False
        assert original.log_colors is True
