"""Value objects for the dispatcher.

All models are frozen dataclasses: built once at registration time and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from clidispatch.core.protocols import Action


@dataclass(frozen=True, slots=True)
class ActionEntry:
    """A single command exposed by a handler."""

    command: str
    """Display form of the command, e.g. ``"container ls"``."""

    action: Action
    """Bound callable invoked with the remaining arguments."""


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a successful lookup against the handler set."""

    entry: ActionEntry
    """The matched command."""

    consumed: int
    """How many leading arguments named the command (1 or 2)."""
