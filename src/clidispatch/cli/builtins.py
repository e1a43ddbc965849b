"""Handlers shipped with the ``clidispatch`` console script."""

from __future__ import annotations

import platform
import sys

from clidispatch.core.flagset import subcmd
from clidispatch.version import __version__


class VersionHandler:
    """Exposes ``version``."""

    def __init__(self, prog: str = "clidispatch") -> None:
        self.prog = prog

    def cmd_version(self, *args: str) -> None:
        """Print version information."""
        flags = subcmd(
            "version",
            [],
            f"Show the {self.prog} version information",
            False,
            prog=self.prog,
        )
        flags.add_flag("-s", "--short", action="store_true", help="Print only the version number")
        options = flags.parse_args(list(args))

        if options.short:
            sys.stdout.write(f"{__version__}\n")
            return
        sys.stdout.write(
            f"{self.prog} version {__version__}\n"
            f"Python {platform.python_version()} ({platform.system()}/{platform.machine()})\n"
        )


def default_handlers(prog: str = "clidispatch") -> tuple[object, ...]:
    """Handlers registered by the console script, in priority order."""
    return (VersionHandler(prog),)
