"""Splitting of spoiler command text into a title and a body."""

from __future__ import annotations

import re
from collections.abc import Sequence

_TITLE_PATTERN = re.compile(r"^(\[.+?\])")


def spoiler_contents(params: Sequence[str] | None) -> tuple[str, str]:
    """Return ``(title, text)`` for the spoiler words in ``params``.

    A leading ``[title]`` becomes the title without its brackets; the rest,
    including any leading space, is the spoiler text.
    """
    if params is None:
        return "", ""
    joined = " ".join(params)
    match = _TITLE_PATTERN.search(joined)
    title = match.group(0) if match else ""
    title = title.replace("]", "", 1).replace("[", "", 1)
    text = _TITLE_PATTERN.sub("", joined)
    return title, text