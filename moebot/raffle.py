"""Raffle entries, link submissions, ticket bonuses and winner selection."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import timedelta

NO_SUBMISSION = "NONE"
START_TICKETS = 5
SUBMISSION_BONUS_TICKETS = 2
MIN_VOTES = 3
TOP_SUBMISSION_COUNT = 3
TICKET_COOLDOWN = timedelta(hours=24)

_APPROVED_SITES = re.compile(r"youtube.com|imgur.com|pastebin.com")
_SUBMISSION_KINDS = ("ART", "RELIC")


class SubmissionError(ValueError):
    """Raised when a raffle submission is rejected; the message is user-facing."""


@dataclass
class RaffleEntry:
    """One user's place in a guild's raffle."""

    guild_uid: str
    user_uid: str
    ticket_count: int = START_TICKETS
    art: str = NO_SUBMISSION
    relic: str = NO_SUBMISSION
    last_ticket_update: int = 0

    @property
    def submissions(self) -> tuple[str, str]:
        """The ``(art, relic)`` submissions of this entry."""
        return self.art, self.relic


def is_approved_link(url: str) -> bool:
    """Whether ``url`` points to one of the sites accepted for submissions."""
    return _APPROVED_SITES.search(url) is not None


def apply_submission(entry: RaffleEntry, kind: str, url: str) -> int:
    """Record ``url`` as the entry's art or relic submission.

    Bonus tickets are granted only for the first submission of each kind; the
    number of tickets added is returned. Raises SubmissionError for a link to
    an unapproved site or an unknown submission kind.
    """
    if not is_approved_link(url):
        raise SubmissionError(
            "Sorry, you must provide a link to an approved site! "
            "See submissions rules for more information"
        )
    normalized = kind.upper()
    if normalized not in _SUBMISSION_KINDS:
        raise SubmissionError(
            "Sorry, I don't recognize that submission type. Valid types are: art, relic."
        )
    if normalized == "ART":
        previous = entry.art
        entry.art = url
    else:
        previous = entry.relic
        entry.relic = url
    added = SUBMISSION_BONUS_TICKETS if previous == NO_SUBMISSION else 0
    entry.ticket_count += added
    return added


def pick_winner(entries: Iterable[RaffleEntry], rng: random.Random | None = None) -> str:
    """Draw a winning user id, each ticket being one chance to win.

    Raises ValueError when no tickets are held.
    """
    tickets = [
        entry.user_uid for entry in entries for _ in range(max(entry.ticket_count, 0))
    ]
    if not tickets:
        raise ValueError("no raffle tickets to draw from")
    return tickets[(rng or random).randrange(len(tickets))]


def top_submissions(
    votes: Mapping[str, int], count: int = TOP_SUBMISSION_COUNT
) -> list[tuple[str, int]]:
    """Return ``count`` ``(user, votes)`` places, highest votes first.

    Each chosen user's votes are reset before the next place is picked, so
    with fewer users than places the remaining places repeat a user with no
    votes. With no users at all every place is ``("", 0)``.
    """
    remaining = dict(votes)
    places: list[tuple[str, int]] = []
    for _ in range(count):
        if not remaining:
            places.append(("", 0))
            continue
        best = max(remaining, key=remaining.__getitem__)
        places.append((best, remaining[best]))
        remaining[best] = 0
    return places


def bonus_ticket_users(
    react_counts: Mapping[str, int],
    entries: Sequence[RaffleEntry],
    min_votes: int = MIN_VOTES,
) -> list[RaffleEntry]:
    """Return the entries of users who voted at least ``min_votes`` times.

    Only users with a raffle entry qualify, and each gets one entry at most.
    """
    qualified: list[RaffleEntry] = []
    for user, count in react_counts.items():
        if count < min_votes:
            continue
        match = next((entry for entry in entries if entry.user_uid == user), None)
        if match is not None:
            qualified.append(match)
    return qualified