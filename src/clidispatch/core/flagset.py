"""Per-command flag sets with docker-style usage text.

:func:`subcmd` builds the :class:`FlagSet` a command action parses its
arguments with.  The flag set only formats usage and applies the
error-handling policy; it plays no part in command resolution.

Usage layout::

    Usage:	<prog> <name> [OPTIONS] <synopsis 1>
    	<prog> <name> [OPTIONS] <synopsis 2>

    <description>

    Options:
      --help   Print usage
"""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Sequence
from typing import IO, Any, NoReturn

from clidispatch.exceptions import FlagHelpRequested, FlagParseError


class ErrorHandling(enum.Enum):
    """What a flag set does when parsing fails or ``--help`` is given."""

    CONTINUE_ON_ERROR = "continue"
    """Raise :class:`FlagParseError` / :class:`FlagHelpRequested`."""

    EXIT_ON_ERROR = "exit"
    """Terminate the process the way ``argparse`` normally does."""


class FlagSet(argparse.ArgumentParser):
    """An ``ArgumentParser`` rendering the command's synopses as usage."""

    def __init__(
        self,
        name: str,
        synopses: Sequence[str] = (),
        description: str = "",
        error_handling: ErrorHandling = ErrorHandling.EXIT_ON_ERROR,
        *,
        prog: str = "clidispatch",
        out: IO[str] | None = None,
    ) -> None:
        super().__init__(
            prog=f"{prog} {name}",
            description=description,
            add_help=False,
            allow_abbrev=False,
        )
        self.name = name
        self.synopses: list[str] = list(synopses) or [""]
        self.error_handling = error_handling
        self.out = out
        self.help_action = self.add_argument("--help", action="help", help="Print usage")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_flag(self, *names: str, deprecated: bool = False, **kwargs: Any) -> argparse.Action:
        """Register an option; deprecated ones parse but are never listed."""
        if deprecated:
            kwargs["help"] = argparse.SUPPRESS
        return self.add_argument(*names, **kwargs)

    def flag_count_undeprecated(self) -> int:
        """Number of listed options, not counting the automatic ``--help``."""
        return sum(
            1
            for action in self._actions
            if action.option_strings
            and action.help is not argparse.SUPPRESS
            and action is not self.help_action
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def format_usage(self) -> str:
        options = " [OPTIONS]" if self.flag_count_undeprecated() > 0 else ""
        parts: list[str] = []
        for index, synopsis in enumerate(self.synopses):
            lead = "Usage:\t" if index == 0 else "\t"
            if synopsis:
                synopsis = " " + synopsis
            parts.append(f"\n{lead}{self.prog}{options}{synopsis}")
        parts.append(f"\n\n{self.description or ''}\n")
        return "".join(parts)

    def format_help(self) -> str:
        formatter = self.formatter_class(prog=self.prog)
        formatter.start_section("Options")
        formatter.add_arguments(self._actions)
        formatter.end_section()
        return self.format_usage() + "\n" + formatter.format_help()

    def print_usage(self, file: IO[str] | None = None) -> None:
        self._print_message(self.format_usage(), file or self.out or sys.stdout)

    def print_help(self, file: IO[str] | None = None) -> None:
        self._print_message(self.format_help(), file or self.out or sys.stdout)

    # ------------------------------------------------------------------
    # Error policy
    # ------------------------------------------------------------------

    def error(self, message: str) -> NoReturn:
        if self.error_handling is ErrorHandling.EXIT_ON_ERROR:
            super().error(message)
        self.print_usage(sys.stderr)
        self._print_message(f"{self.prog}: {message}\n", sys.stderr)
        raise FlagParseError(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if self.error_handling is ErrorHandling.EXIT_ON_ERROR:
            super().exit(status, message)
        if message:
            self._print_message(message, sys.stderr)
        raise FlagHelpRequested(status)


def subcmd(
    name: str,
    synopses: Sequence[str],
    description: str,
    exit_on_error: bool,
    *,
    prog: str = "clidispatch",
) -> FlagSet:
    """Build the flag set for the ``<prog> <name>`` command.

    Parameters
    ----------
    name:
        Command name as typed by the user (``"container ls"``).
    synopses:
        One usage line per calling form, without the program and command.
    description:
        Free text printed below the usage lines.
    exit_on_error:
        ``True`` to exit the process on a parse error or ``--help``;
        ``False`` to raise instead.
    """
    error_handling = (
        ErrorHandling.EXIT_ON_ERROR if exit_on_error else ErrorHandling.CONTINUE_ON_ERROR
    )
    return FlagSet(name, synopses, description, error_handling, prog=prog)
