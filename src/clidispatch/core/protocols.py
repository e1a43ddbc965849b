"""Protocols (interfaces) consumed by the dispatcher.

Handlers never inherit from anything defined here.  The dispatcher uses
these protocols as structural capability checks: an object that has an
``initialize()`` method *is* an :class:`Initializer`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

Action = Callable[..., Any]
"""A command action: called with the remaining ``str`` arguments."""


@runtime_checkable
class Initializer(Protocol):
    """Optional handler capability run before each of its commands.

    ``initialize()`` is invoked once per matched dispatch, before the
    action itself.  Raising any exception aborts the dispatch; the
    dispatcher reports it as
    :class:`~clidispatch.exceptions.InitializationError`.
    """

    def initialize(self) -> None:
        ...  # pragma: no cover


@runtime_checkable
class CommandProvider(Protocol):
    """Optional handler capability describing its commands explicitly.

    ``commands()`` returns a mapping of command strings (``"volume
    create"``) to callables.  It is read once, when the dispatcher is
    constructed.
    """

    def commands(self) -> Mapping[str, Action]:
        ...  # pragma: no cover
