"""Choice of subreddit for the random image command."""

from __future__ import annotations

import random
from collections.abc import Sequence

WHITELISTED_SUBREDDITS: dict[str, str] = {
    "random": "awwnime",
    "meme": "animemes",
    "irl": "anime_irl",
}
DEFAULT_SUBREDDIT = "awwnime"


class UnknownSubredditError(ValueError):
    """Raised for an unrecognised subreddit type; carries the fallback subreddit."""

    def __init__(self, requested: str, default: str = DEFAULT_SUBREDDIT) -> None:
        super().__init__(
            f"couldn't get subreddit from params, sending {default} as default"
        )
        self.requested = requested
        self.default = default


def random_whitelisted_subreddit(rng: random.Random | None = None) -> str:
    """Pick one of the whitelisted subreddits at random."""
    choices = list(WHITELISTED_SUBREDDITS.values())
    if not choices:
        return DEFAULT_SUBREDDIT
    return (rng or random).choice(choices)


def subreddit_for_params(params: Sequence[str], rng: random.Random | None = None) -> str:
    """Return the subreddit named by the command's type parameter.

    With no parameters a random whitelisted subreddit is chosen. An unknown
    type raises UnknownSubredditError whose ``default`` should be used instead.
    """
    if not params:
        return random_whitelisted_subreddit(rng)
    try:
        return WHITELISTED_SUBREDDITS[params[0]]
    except KeyError:
        raise UnknownSubredditError(params[0]) from None