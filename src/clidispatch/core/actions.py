"""Action discovery: turn an opaque handler into a string-keyed action table.

The table is built once per handler when the dispatcher is constructed,
so resolution at dispatch time is a plain dictionary lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from clidispatch.core.models import ActionEntry
from clidispatch.core.naming import canonical_name, tokens_from_method, tokens_from_string
from clidispatch.core.protocols import Action, CommandProvider

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_TOKENS_ATTR = "__command_tokens__"


def command(*tokens: str) -> Callable[[F], F]:
    """Expose a handler method as the command spelled by *tokens*.

    Use this when the command name is not expressible as a ``cmd_``
    method name, e.g. ``@command("image", "build-cache")``.
    """
    if not 1 <= len(tokens) <= 2:
        raise ValueError("a command is made of one or two tokens")
    canonical_name(tokens)

    def wrapper(func: F) -> F:
        setattr(func, _TOKENS_ATTR, tuple(tokens))
        return func

    return wrapper


def _add(
    table: dict[str, ActionEntry],
    tokens: Sequence[str],
    action: Action,
    handler: object,
) -> None:
    if not 1 <= len(tokens) <= 2:
        raise ValueError(
            f"{type(handler).__name__}: '{' '.join(tokens)}' is not a one- or two-word command."
        )
    name = canonical_name(tokens)
    if name in table:
        raise ValueError(
            f"Command '{' '.join(tokens)}' is exposed twice by {type(handler).__name__}."
        )
    table[name] = ActionEntry(command=" ".join(t.lower() for t in tokens), action=action)


def build_action_table(handler: object) -> dict[str, ActionEntry]:
    """Return the canonical-name → action mapping for *handler*.

    Sources, in order: ``@command``-decorated methods and ``cmd_``
    methods (one entry per attribute, the decorator wins), then the
    optional ``commands()`` mapping.
    ``cmd_`` methods with more than two words are skipped.

    Raises
    ------
    ValueError
        When two sources expose the same canonical name, or an explicit
        declaration is not a one- or two-word command.
    """
    table: dict[str, ActionEntry] = {}
    handler_type = type(handler)

    for attr_name in dir(handler_type):
        raw = getattr(handler_type, attr_name, None)
        if not callable(raw):
            continue
        tokens = getattr(raw, _TOKENS_ATTR, None)
        if tokens is None:
            tokens = tokens_from_method(attr_name)
            if tokens is None:
                continue
            if len(tokens) > 2:
                # Never reachable from a one- or two-word command line.
                logger.debug("skipping %s.%s", handler_type.__name__, attr_name)
                continue
        _add(table, tokens, getattr(handler, attr_name), handler)

    if isinstance(handler, CommandProvider):
        for command_string, action in handler.commands().items():
            _add(table, tokens_from_string(command_string), action, handler)

    logger.debug("%s exposes %s", handler_type.__name__, sorted(table))
    return table
