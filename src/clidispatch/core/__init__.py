"""Core layer: command resolution, dispatch, and flag-set usage rendering.

Rules
-----
* No Rich, no ``sys.exit`` (except through the opt-in knobs).
* Diagnostics go only to the dispatcher's configured stream.
* No imports from ``cli``.
"""

from clidispatch.core.actions import build_action_table, command
from clidispatch.core.dispatcher import HELP_ARG, Dispatcher
from clidispatch.core.flagset import ErrorHandling, FlagSet, subcmd
from clidispatch.core.models import ActionEntry, Resolution
from clidispatch.core.naming import canonical_name
from clidispatch.core.protocols import Action, CommandProvider, Initializer

__all__: list[str] = [
    "HELP_ARG",
    "Action",
    "ActionEntry",
    "CommandProvider",
    "Dispatcher",
    "ErrorHandling",
    "FlagSet",
    "Initializer",
    "Resolution",
    "build_action_table",
    "canonical_name",
    "command",
    "subcmd",
]
