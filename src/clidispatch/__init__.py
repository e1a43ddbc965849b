"""clidispatch: route ``argv`` to handler methods by command name.

Handlers are plain objects; ``container ls`` runs ``cmd_container_ls``
on the first registered handler that has it.
"""

from clidispatch.core import Dispatcher, Initializer, command, subcmd
from clidispatch.exceptions import (
    CliDispatchError,
    CommandNotFoundError,
    InitializationError,
    StatusError,
)
from clidispatch.version import __version__

__all__: list[str] = [
    "CliDispatchError",
    "CommandNotFoundError",
    "Dispatcher",
    "InitializationError",
    "Initializer",
    "StatusError",
    "__version__",
    "command",
    "subcmd",
]
