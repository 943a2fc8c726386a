"""Textual rank ladder shown in user profiles."""

from __future__ import annotations

from collections.abc import Sequence

_RANK_NAMES = ("Newcomer", "Apprentice", "Rookie", "Regular", "Veteran")
_SEPARATOR = " --> "


def _bold(text: str) -> str:
    return f"**{text}**"


def _strike(text: str) -> str:
    return f"~~{text}~~"


def convert_rank_to_string(rank: int, server_max: int | None) -> str:
    """Describe ``rank`` relative to the server's veteran rank ``server_max``.

    Without a server maximum the rank number itself is returned.
    """
    if server_max is None:
        return str(rank)
    if server_max == 0:
        raise ValueError("server maximum rank must not be zero")
    percent = rank / server_max * 100.0
    if percent < 10:
        suffix, index = int(percent / 2.0), 0
    elif percent < 30:
        suffix, index = int((percent - 10) / 4.0), 1
    elif percent < 60:
        suffix, index = int((percent - 30) / 6.0), 2
    elif percent < 100:
        suffix, index = int((percent - 60) / 8.0), 3
    else:
        suffix, index = int((percent - 100) / 100), 4
    names = list(_RANK_NAMES)
    label = f"{names[index]} {suffix}" if suffix != 0 else names[index]
    names[index] = _bold(label)
    return emphasize_ranks(names, index, _SEPARATOR)


def emphasize_ranks(ranks: Sequence[str], index_to_apply: int, separator: str) -> str:
    """Join ``ranks`` with ``separator``, striking out those before ``index_to_apply``."""
    return separator.join(
        _strike(name) if position < index_to_apply else name
        for position, name in enumerate(ranks)
    )