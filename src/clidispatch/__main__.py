"""Allow ``python -m clidispatch`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m clidispatch`` behaves identically to the console script.
"""

from __future__ import annotations

from clidispatch.cli.app import cli

if __name__ == "__main__":
    cli()
