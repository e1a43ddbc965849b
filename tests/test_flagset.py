"""Tests for the flag-set usage builder (core/flagset.py).

Coverage:
* Usage layout: synopsis lines, ``[OPTIONS]`` marker, description.
* Deprecated flags: accepted when parsing, hidden from usage.
* Error policy: continue-on-error raises, exit-on-error exits.
"""

from __future__ import annotations

import io

import pytest

from clidispatch.core.flagset import ErrorHandling, FlagSet, subcmd
from clidispatch.exceptions import FlagHelpRequested, FlagParseError


class TestShortUsage:
    def test_single_synopsis_without_options(self) -> None:
        flags = subcmd("ls", ["PATH"], "List things", False)
        assert flags.format_usage() == "\nUsage:\tclidispatch ls PATH\n\nList things\n"

    def test_options_marker_when_flag_registered(self) -> None:
        flags = subcmd("ls", ["PATH"], "List things", False)
        flags.add_flag("-a", "--all", action="store_true", help="Show all")
        assert flags.format_usage() == "\nUsage:\tclidispatch ls [OPTIONS] PATH\n\nList things\n"

    def test_multiple_synopses(self) -> None:
        flags = subcmd("cp", ["SRC DEST", "SRC... DIR"], "Copy files", False, prog="tool")
        assert flags.format_usage() == (
            "\nUsage:\ttool cp SRC DEST"
            "\n\ttool cp SRC... DIR"
            "\n\nCopy files\n"
        )

    def test_empty_synopses(self) -> None:
        flags = subcmd("version", [], "Show the version", False)
        assert flags.format_usage() == "\nUsage:\tclidispatch version\n\nShow the version\n"

    def test_help_flag_alone_does_not_add_marker(self) -> None:
        flags = subcmd("ps", [], "", False)
        assert flags.flag_count_undeprecated() == 0
        assert "[OPTIONS]" not in flags.format_usage()


class TestDeprecatedFlags:
    def test_deprecated_flag_is_not_counted(self) -> None:
        flags = subcmd("ps", [], "List", False)
        flags.add_flag("--old-style", deprecated=True, action="store_true")
        assert flags.flag_count_undeprecated() == 0
        assert "[OPTIONS]" not in flags.format_usage()

    def test_deprecated_flag_is_hidden_but_parses(self) -> None:
        flags = subcmd("ps", [], "List", False)
        flags.add_flag("--old-style", deprecated=True, action="store_true")
        flags.add_flag("-q", "--quiet", action="store_true", help="Only IDs")

        assert "--old-style" not in flags.format_help()
        assert flags.parse_args(["--old-style"]).old_style is True


class TestFullHelp:
    def test_lists_options_section(self) -> None:
        flags = subcmd("ls", ["PATH"], "List things", False)
        flags.add_flag("-a", "--all", action="store_true", help="Show all")
        text = flags.format_help()
        assert text.startswith("\nUsage:\tclidispatch ls [OPTIONS] PATH\n\nList things\n")
        assert "Options:" in text
        assert "--all" in text
        assert "Show all" in text
        assert "Print usage" in text

    def test_help_goes_to_configured_stream(self) -> None:
        out = io.StringIO()
        flags = FlagSet("ls", ["PATH"], "List", ErrorHandling.CONTINUE_ON_ERROR, out=out)
        with pytest.raises(FlagHelpRequested):
            flags.parse_args(["--help"])
        assert "Usage:\tclidispatch ls PATH" in out.getvalue()


class TestContinueOnError:
    def test_help_raises_after_printing(self, capsys: pytest.CaptureFixture[str]) -> None:
        flags = subcmd("ls", ["PATH"], "List things", False)
        with pytest.raises(FlagHelpRequested) as exc_info:
            flags.parse_args(["--help"])
        assert exc_info.value.status == 0
        assert "Usage:\tclidispatch ls PATH" in capsys.readouterr().out

    def test_unknown_flag_raises_parse_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        flags = subcmd("ls", [], "List things", False)
        with pytest.raises(FlagParseError):
            flags.parse_args(["--bogus"])
        err = capsys.readouterr().err
        assert "Usage:\tclidispatch ls" in err
        assert "--bogus" in err

    def test_parses_known_flags(self) -> None:
        flags = subcmd("ls", [], "List things", False)
        flags.add_flag("-a", "--all", action="store_true", help="Show all")
        assert flags.parse_args(["-a"]).all is True


class TestExitOnError:
    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        flags = subcmd("ls", [], "List things", True)
        with pytest.raises(SystemExit) as exc_info:
            flags.parse_args(["--help"])
        assert exc_info.value.code == 0
        assert "Usage:" in capsys.readouterr().out

    def test_unknown_flag_exits_two(self) -> None:
        flags = subcmd("ls", [], "List things", True)
        with pytest.raises(SystemExit) as exc_info:
            flags.parse_args(["--bogus"])
        assert exc_info.value.code == 2

    def test_error_handling_is_recorded(self) -> None:
        assert subcmd("ls", [], "", True).error_handling is ErrorHandling.EXIT_ON_ERROR
        assert subcmd("ls", [], "", False).error_handling is ErrorHandling.CONTINUE_ON_ERROR
