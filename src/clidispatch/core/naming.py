"""Pure helpers that map command tokens to canonical action names.

A command such as ``container ls`` is identified by its canonical name
``CmdContainerLs``: the marker word followed by every token capitalized
(first character upper, remainder lower).  All functions here are pure.
"""

from __future__ import annotations

from collections.abc import Sequence

from clidispatch.exceptions import InvalidCommandError

MARKER: str = "Cmd"
"""Prefix shared by every canonical action name."""

METHOD_PREFIX: str = "cmd_"
"""Prefix of handler methods that are exposed as commands by name."""


def capitalize_token(token: str) -> str:
    """Return *token* with its first character upper-cased, the rest lower.

    Raises
    ------
    InvalidCommandError
        When *token* is empty.
    """
    if not token:
        raise InvalidCommandError("empty command")
    return token[:1].upper() + token[1:].lower()


def canonical_name(tokens: Sequence[str]) -> str:
    """Return the canonical action name for a token sequence.

    >>> canonical_name(["container", "ls"])
    'CmdContainerLs'
    """
    return MARKER + "".join(capitalize_token(token) for token in tokens)


def tokens_from_method(attr_name: str) -> list[str] | None:
    """Split a ``cmd_`` method name into its command tokens.

    Returns ``None`` when *attr_name* does not follow the convention.
    """
    if not attr_name.startswith(METHOD_PREFIX):
        return None
    tokens = attr_name[len(METHOD_PREFIX):].split("_")
    if not all(tokens):
        return None
    return tokens


def tokens_from_string(command: str) -> list[str]:
    """Split a ``"volume create"`` style command string into tokens."""
    return command.split()
