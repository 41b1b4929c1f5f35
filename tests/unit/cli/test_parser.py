"""Tests for CLI argument parser functionality."""

import argparse
from pathlib import Path

import pytest

from icalkit import __version__
from icalkit.cli.parser import create_parser, parse_limit
from icalkit.config.settings import ICalKitSettings

pytestmark = pytest.mark.unit


class TestCreateParser:
    """Test suite for create_parser function."""

    def test_create_parser_returns_argument_parser(self) -> None:
        """Test that create_parser returns a configured ArgumentParser."""
        parser = create_parser()

        assert isinstance(parser, argparse.ArgumentParser)
        assert "iCalKit" in parser.description
        assert parser.epilog is not None

    def test_parser_when_no_command_then_none(self) -> None:
        """Test the command is optional at parse time."""
        args = create_parser().parse_args([])

        assert args.command is None

    def test_parser_version(self, capsys) -> None:
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_parser_split_defaults(self) -> None:
        """Test split options default from settings."""
        args = create_parser().parse_args(["split", "calendar.ics"])

        assert args.command == "split"
        assert args.input == Path("calendar.ics")
        assert args.chunk_size == 1000
        assert args.output_dir == Path(".")
        assert args.sort == "dtstart"
        assert args.pattern is None
        assert args.zip is False

    def test_parser_split_options(self) -> None:
        """Test split accepts every option."""
        args = create_parser().parse_args(
            [
                "split",
                "calendar.ics",
                "--chunk-size",
                "50",
                "--output-dir",
                "out",
                "-s",
                "original",
                "--pattern",
                "part-{n}.ics",
                "--zip",
            ]
        )

        assert args.chunk_size == 50
        assert args.output_dir == Path("out")
        assert args.sort == "original"
        assert args.pattern == "part-{n}.ics"
        assert args.zip is True

    def test_parser_split_when_bad_sort_then_exits(self) -> None:
        """Test unknown sort choices are rejected by argparse."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["split", "calendar.ics", "--sort", "summary"])

    def test_parser_split_defaults_follow_settings(self) -> None:
        """Test settings supply the split defaults."""
        settings = ICalKitSettings(chunk_size=25, sort_by="original", output_dir=Path("chunks"))

        args = create_parser(settings).parse_args(["split", "calendar.ics"])

        assert args.chunk_size == 25
        assert args.sort == "original"
        assert args.output_dir == Path("chunks")

    def test_parser_merge_options(self) -> None:
        """Test merge takes several inputs, an output and a policy."""
        args = create_parser().parse_args(
            ["merge", "a.ics", "b.ics", "-o", "all.ics", "-d", "remove", "-n", "All"]
        )

        assert args.command == "merge"
        assert args.inputs == [Path("a.ics"), Path("b.ics")]
        assert args.output == Path("all.ics")
        assert args.duplicates == "remove"
        assert args.name == "All"

    def test_parser_merge_when_no_output_then_exits(self) -> None:
        """Test merge requires --output."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["merge", "a.ics", "b.ics"])

    def test_parser_merge_default_policy_is_warn(self) -> None:
        """Test duplicates default to warn."""
        args = create_parser().parse_args(["merge", "a.ics", "b.ics", "-o", "all.ics"])

        assert args.duplicates == "warn"
        assert args.name is None

    def test_parser_view_options(self) -> None:
        """Test view accepts search and limit."""
        args = create_parser().parse_args(["view", "cal.ics", "--search", "team", "--limit", "5"])

        assert args.search == "team"
        assert args.limit == 5

    def test_parser_clean_options(self) -> None:
        """Test clean output is optional."""
        args = create_parser().parse_args(["clean", "cal.ics"])

        assert args.output is None

    def test_parser_logging_options(self) -> None:
        """Test global logging switches."""
        args = create_parser().parse_args(
            ["-v", "--log-level", "DEBUG", "--no-log-colors", "view", "cal.ics"]
        )

        assert args.verbose is True
        assert args.log_level == "DEBUG"
        assert args.no_log_colors is True


class TestParseLimit:
    """Test suite for parse_limit."""

    @pytest.mark.parametrize("value,expected", [("0", 0), ("12", 12)])
    def test_parse_limit_when_valid_then_int(self, value, expected) -> None:
        """Test non-negative integers are accepted."""
        assert parse_limit(value) == expected

    @pytest.mark.parametrize("value", ["-1", "abc", "1.5"])
    def test_parse_limit_when_invalid_then_raises(self, value) -> None:
        """Test negative and non-integer values are rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_limit(value)
