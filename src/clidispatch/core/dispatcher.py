"""The command dispatcher: resolve a command from ``argv`` and run it.

The dispatcher keeps an ordered, immutable tuple of handlers.  It is
always its own first handler, so the built-in ``help`` command cannot be
shadowed by a later registration.

Resolution order for ``run(*args)``:

1. ``args[0] args[1]`` as a two-word command (``container ls``);
2. ``args[0]`` as a one-word command;
3. otherwise the command is unknown, or, with no args at all, help.

This module performs no process exits unless ``exit_on_unknown`` is set;
deciding the exit status is left to the application shell.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import IO, Any, NoReturn

from clidispatch.core.actions import build_action_table
from clidispatch.core.models import ActionEntry, Resolution
from clidispatch.core.naming import canonical_name
from clidispatch.core.protocols import Initializer
from clidispatch.exceptions import (
    CommandNotFoundError,
    InitializationError,
    InvalidCommandError,
)

logger = logging.getLogger(__name__)

HELP_ARG: str = "--help"
"""Synthetic argument passed to a command to make it print its own help."""


class Dispatcher:
    """Routes an argument vector to the first handler exposing the command.

    Parameters
    ----------
    *handlers:
        Handler objects, in priority order.  ``None`` entries are skipped.
    prog:
        Program name used in diagnostics and the default usage text.
    stderr:
        Stream for the unresolved-command diagnostic.  ``None`` means
        ``sys.stderr`` at the time of writing.
    usage:
        Optional zero-argument callable replacing the default usage text.
    exit_on_unknown:
        When true, an unknown command prints the diagnostic and raises
        ``SystemExit(1)`` instead of :class:`CommandNotFoundError`.
    """

    def __init__(
        self,
        *handlers: object,
        prog: str = "clidispatch",
        stderr: IO[str] | None = None,
        usage: Callable[[], None] | None = None,
        exit_on_unknown: bool = False,
    ) -> None:
        self.prog = prog
        self.stderr = stderr
        self.usage = usage
        self.exit_on_unknown = exit_on_unknown
        self._handlers: tuple[object, ...] = (
            self,
            *(handler for handler in handlers if handler is not None),
        )
        self._tables: tuple[tuple[object, dict[str, ActionEntry]], ...] = tuple(
            (handler, build_action_table(handler)) for handler in self._handlers
        )

    @property
    def handlers(self) -> tuple[object, ...]:
        """The registered handlers, dispatcher first."""
        return self._handlers

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, *tokens: str) -> ActionEntry:
        """Return the first registered action named by *tokens*.

        Runs the owning handler's ``initialize()`` hook, if it has one,
        before returning.

        Raises
        ------
        InvalidCommandError
            When a token is empty.
        InitializationError
            When the matched handler's ``initialize()`` raises.
        CommandNotFoundError
            When no handler exposes the command.
        """
        name = canonical_name(tokens)
        for handler, table in self._tables:
            entry = table.get(name)
            if entry is None:
                continue
            if isinstance(handler, Initializer):
                try:
                    handler.initialize()
                except Exception as exc:
                    logger.debug("initialize() failed for %s: %s", name, exc)
                    raise InitializationError(exc) from exc
            logger.debug("resolved %s on %s", name, type(handler).__name__)
            return entry
        raise CommandNotFoundError(tokens[0], prog=self.prog)

    def _lookup(self, args: Sequence[str]) -> Resolution | None:
        """Try a two-word then a one-word command; ``None`` if neither exists."""
        for width in (2, 1):
            if len(args) < width:
                continue
            try:
                entry = self.resolve(*args[:width])
            except (CommandNotFoundError, InvalidCommandError):
                continue
            return Resolution(entry=entry, consumed=width)
        return None

    def command_names(self) -> list[str]:
        """Return every reachable command, sorted, shadowed ones excluded."""
        seen: dict[str, str] = {}
        for _handler, table in self._tables:
            for name, entry in table.items():
                seen.setdefault(name, entry.command)
        return sorted(seen.values())

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run(self, *args: str) -> Any:
        """Execute the command named by the leading *args*.

        Returns whatever the action returns.  Exceptions raised by the
        action propagate unchanged; an ``initialize()`` failure is
        re-raised as the original exception.

        Raises
        ------
        CommandNotFoundError
            When no command matches (unless ``exit_on_unknown``).
        """
        try:
            found = self._lookup(args)
        except InitializationError as exc:
            raise exc.inner from None

        if found is not None:
            return found.entry.action(*args[found.consumed:])
        if args:
            self._no_such_command(args[0])
        return self.cmd_help()

    def _no_such_command(self, token: str) -> NoReturn:
        error = CommandNotFoundError(token, prog=self.prog)
        logger.info("unknown command %r", token)
        if self.exit_on_unknown:
            self._diagnose(error)
            raise SystemExit(1) from error
        raise error

    def _diagnose(self, error: CommandNotFoundError) -> None:
        stream = self.stderr if self.stderr is not None else sys.stderr
        stream.write(f"{error}\n{error.hint}\n")

    # ------------------------------------------------------------------
    # Built-in help
    # ------------------------------------------------------------------

    def cmd_help(self, *args: str) -> None:
        """Show help for a command, or the program usage.

        Usage: ``<prog> help [COMMAND]``.  Only the first command is
        described when several are given.
        """
        if args and args[0] in (HELP_ARG, "-h"):
            self.print_usage()
            return None

        try:
            found = self._lookup(args)
        except InitializationError as exc:
            raise exc.inner from None

        if found is not None:
            try:
                found.entry.action(HELP_ARG)
            except Exception as exc:
                # Help succeeds once the command has printed its usage.
                logger.debug("%s %s: %r", found.entry.command, HELP_ARG, exc)
            return None

        if args:
            self._diagnose(CommandNotFoundError(args[0], prog=self.prog))
        self.print_usage()
        return None

    def print_usage(self) -> None:
        """Print the custom usage if configured, else the command listing."""
        if self.usage is not None:
            self.usage()
            return
        lines = [f"Usage: {self.prog} COMMAND [arg...]", "", "Commands:"]
        lines.extend(f"    {name}" for name in self.command_names())
        lines.extend(["", f"Run '{self.prog} help COMMAND' for more information on a command."])
        sys.stdout.write("\n".join(lines) + "\n")
