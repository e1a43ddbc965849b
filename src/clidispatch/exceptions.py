"""Custom exception hierarchy for clidispatch.

Every error raised by the dispatcher or the flag-set helper inherits from
:class:`CliDispatchError`.  Exceptions raised by command actions are never
wrapped; they propagate to the caller unchanged.

Hierarchy
---------
CliDispatchError
├── InvalidCommandError
├── CommandNotFoundError
├── InitializationError
├── StatusError
├── FlagParseError
├── FlagHelpRequested
└── MissingDependencyError
"""

from __future__ import annotations


class CliDispatchError(Exception):
    """Base exception for all clidispatch errors.

    The console-script error boundary renders these as a clean message
    (plus the optional hint) instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Resolution -------------------------------------------------------------

class InvalidCommandError(CliDispatchError):
    """Raised when a token in the command path is empty."""


class CommandNotFoundError(CliDispatchError):
    """Raised when no registered handler exposes the requested command."""

    def __init__(self, token: str, *, prog: str = "clidispatch") -> None:
        super().__init__(
            f"{prog}: '{token}' is not a {prog} command.",
            hint=f"See '{prog} --help'.",
        )
        self.token = token
        self.prog = prog


class InitializationError(CliDispatchError):
    """Raised when a matched handler's ``initialize()`` hook fails.

    This is a distinct outcome from :class:`CommandNotFoundError`: the
    command exists, but its handler could not be prepared.
    """

    def __init__(self, inner: BaseException) -> None:
        super().__init__(str(inner))
        self.inner = inner


# --- Action outcomes --------------------------------------------------------

class StatusError(CliDispatchError):
    """Reports an unsuccessful exit by a command with a specific exit code."""

    def __init__(self, status: str = "", code: int = 1) -> None:
        super().__init__(f"Status: {status}, Code: {code}")
        self.status = status
        self.code = code


# --- Flag sets --------------------------------------------------------------

class FlagParseError(CliDispatchError):
    """Raised by a continue-on-error flag set when parsing fails."""


class FlagHelpRequested(CliDispatchError):
    """Raised by a continue-on-error flag set after printing its own help."""

    def __init__(self, status: int = 0) -> None:
        super().__init__("help requested")
        self.status = status


# --- Environment ------------------------------------------------------------

class MissingDependencyError(CliDispatchError):
    """Raised when an optional runtime dependency is not installed."""
