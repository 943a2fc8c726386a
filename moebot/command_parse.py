"""Parsing of dash-style arguments in command parameters."""

from __future__ import annotations

from collections.abc import Iterable


def parse_command(params: Iterable[str], arguments: Iterable[str]) -> dict[str, str]:
    """Group the words of ``params`` under the argument names that precede them.

    Argument names are matched case-insensitively and stored as written in
    ``params``. Words before the first argument are stored under ``""``.
    An argument with no words after it maps to an empty string.
    """
    known = {argument.lower() for argument in arguments}
    result: dict[str, str] = {}
    current = ""
    content = ""
    for word in params:
        if word.lower() in known:
            if current or content:
                result[current] = content
            current = word
            content = ""
        elif content:
            content += " " + word
        else:
            content = word
    if current or content:
        result[current] = content
    return result