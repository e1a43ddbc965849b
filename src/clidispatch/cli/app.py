"""CLI application entry point for clidispatch.

This module is the **sole process error boundary**.  The dispatcher
core raises typed exceptions; :func:`cli` renders them via Rich and
turns them into well-defined exit codes.

Architecture notes
------------------
* Command resolution lives in :mod:`clidispatch.core.dispatcher`.
* An unknown command is a fatal usage error here, and only here.
* This module is the only place that translates between the dispatcher
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from clidispatch.cli import exit_codes
from clidispatch.cli.builtins import default_handlers
from clidispatch.cli.console import configure_logging, console
from clidispatch.core.dispatcher import Dispatcher
from clidispatch.exceptions import (
    CliDispatchError,
    CommandNotFoundError,
    FlagHelpRequested,
    FlagParseError,
    StatusError,
)
from clidispatch.version import __version__

PROG = "clidispatch"

DEBUG_ENV = "CLIDISPATCH_DEBUG"
"""Environment variable equivalent to ``--debug`` when set to ``1``/``true``."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _debug_from_env() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() in ("1", "true", "yes", "on")


def _build_parser(commands: Sequence[str]) -> argparse.ArgumentParser:
    """Construct the parser for global options.

    Everything from the first positional onward is handed to the
    dispatcher untouched.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [OPTIONS] COMMAND [arg...]",
        description="Run a registered command.",
        epilog="Commands:\n" + "\n".join(f"    {name}" for name in commands),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-D",
        "--debug",
        action="store_true",
        default=_debug_from_env(),
        help=f"Enable debug logging (or set {DEBUG_ENV}=1).",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command and its arguments.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    handlers: Sequence[object] | None = None,
) -> int:
    """Run the clidispatch CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    handlers:
        Handlers to register after the dispatcher's own.  Defaults to
        :func:`~clidispatch.cli.builtins.default_handlers`.

    Returns
    -------
    int
        OS process exit code for a command that completed.  Failures are
        raised and mapped by :func:`cli`.
    """
    registered = default_handlers(PROG) if handlers is None else tuple(handlers)
    dispatcher = Dispatcher(*registered, prog=PROG)
    parser = _build_parser(dispatcher.command_names())
    dispatcher.usage = parser.print_help
    args = parser.parse_args(argv)

    configure_logging(args.debug)
    dispatcher.run(*args.command)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CommandNotFoundError as exc:
        console.print(f"[bold red]{console.escape(exc)}[/bold red]")
        console.print(console.escape(exc.hint))
        sys.exit(exit_codes.GENERAL_ERROR)
    except StatusError as exc:
        if exc.status:
            console.print(console.escape(exc.status))
        sys.exit(exc.code)
    except FlagHelpRequested as exc:
        sys.exit(exc.status)
    except FlagParseError:
        # The flag set already printed its usage and the error.
        sys.exit(exit_codes.GENERAL_ERROR)
    except CliDispatchError as exc:
        console.print(f"[bold red]Error:[/bold red] {console.escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {console.escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {console.escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
