"""Recognising bot commands in chat messages and routing them to handlers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class CommandRegistry:
    """Maps command keys, including aliases, to their handlers.

    Keys are matched case-insensitively. Registering a key again replaces
    the handler it pointed to.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Any] = {}

    def register(self, keys: Iterable[str], handler: Any) -> None:
        """Make ``handler`` answer to every key in ``keys``."""
        for key in keys:
            self._handlers[key.upper()] = handler

    def lookup(self, key: str) -> Any | None:
        """Return the handler for ``key``, or None if no command has that key."""
        return self._handlers.get(key.upper())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


def split_command(content: str, prefix: str) -> tuple[str, list[str]] | None:
    """Split a message into ``(command key, params)`` if it is a command.

    A message is a command when it starts with ``prefix`` (ignoring case) and
    has a word after it. The key is upper-cased; params are the remaining
    words split on single spaces. Returns None for anything else.
    """
    if not content.upper().startswith(prefix.upper()):
        return None
    parts = content.split(" ")
    if len(parts) <= 1:
        return None
    return parts[1].upper(), parts[2:]


def make_alpha_only(text: str) -> str:
    """Drop every character that is neither a letter nor a space."""
    return "".join(char for char in text if char.isalpha() or char == " ")


def agrees_to_rules(content: str, agreement: str) -> bool:
    """Whether a message starts with the server's rule agreement phrase.

    Punctuation and digits in the message are ignored, as is case.
    """
    return make_alpha_only(content).upper().startswith(agreement.upper())