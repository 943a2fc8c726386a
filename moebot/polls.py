"""Polls: parsing the poll command, building options and the poll messages."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

MIN_OPTIONS = 2
MAX_OPTIONS = 25

_OPTION_NAMES = tuple(
    f"regional_indicator_{letter}" for letter in "abcdefghijklmnopqrstuvwxyz"
)
_OPTION_IDS = tuple(chr(0x1F1E6 + offset) for offset in range(26))


class PollError(ValueError):
    """Raised when a poll command cannot be carried out; the message is user-facing."""


@dataclass
class PollOption:
    """One choice of a poll, voted for with a reaction."""

    description: str
    reaction_id: str
    reaction_name: str
    votes: int = 0
    id: int = 0


@dataclass
class Poll:
    """A poll posted in a channel."""

    title: str = ""
    user_uid: str = ""
    channel_id: int = 0
    open: bool = True
    options: list[PollOption] = field(default_factory=list)
    message_uid: str = ""
    id: int = 0


def user_mention(user_id: str) -> str:
    """Return the chat mention for a user id."""
    return f"<@{user_id}>"


def _until_flag(params: Sequence[str]) -> str:
    words = []
    for word in params:
        if word.startswith("-"):
            break
        words.append(word)
    return " ".join(words)


def parse_options(params: Sequence[str]) -> list[str]:
    """Split the words up to the next flag into comma-separated options."""
    return _until_flag(params).split(",")


def parse_title(params: Sequence[str]) -> str:
    """Join the words up to the next flag into a title."""
    return _until_flag(params)


def parse_open_poll(params: Sequence[str]) -> tuple[str, list[str]]:
    """Return ``(title, options)`` from the parameters of a new poll.

    Raises PollError when there are too few or too many options.
    """
    title = ""
    options: list[str] = []
    for position, word in enumerate(params):
        rest = params[position + 1 :]
        if word == "-options":
            options = parse_options(rest)
        if word == "-title":
            title = parse_title(rest)
    if len(options) < MIN_OPTIONS:
        raise PollError("Sorry, you must specify at least two options to create a poll.")
    if len(options) > MAX_OPTIONS:
        raise PollError("Sorry, there can only be a maximum of 25 options per poll.")
    return title, options


def create_poll_options(descriptions: Sequence[str]) -> list[PollOption]:
    """Pair each description with a letter reaction, in order."""
    if len(descriptions) > len(_OPTION_IDS):
        raise PollError("Sorry, there can only be a maximum of 25 options per poll.")
    return [
        PollOption(
            description=text.strip(" "),
            reaction_id=reaction_id,
            reaction_name=reaction_name,
        )
        for text, reaction_id, reaction_name in zip(
            descriptions, _OPTION_IDS, _OPTION_NAMES
        )
    ]


def poll_winners(poll: Poll) -> list[PollOption]:
    """Return the options that share the highest vote count."""
    top = max((option.votes for option in poll.options), default=0)
    top = max(top, 0)
    return [option for option in poll.options if option.votes == top]


def _option_lines(options: Sequence[PollOption]) -> str:
    return "".join(
        f":{option.reaction_name}:  {option.description}\n" for option in options
    )


def open_poll_message(poll: Poll, author_id: str) -> str:
    """Build the message announcing a new poll."""
    message = user_mention(author_id) + " created "
    if poll.title:
        message += f"the poll **{poll.title}**!\n"
    else:
        message += "a poll!\n"
    message += _option_lines(poll.options)
    return message + f"Poll ID: {poll.id}"


def close_poll_message(poll: Poll, user_id: str) -> str:
    """Build the message reporting a closed poll and its winners."""
    if poll.open:
        if user_id == poll.user_uid:
            message = user_mention(user_id) + " closed their poll"
        else:
            message = f"{user_mention(user_id)} closed {user_mention(poll.user_uid)}'s poll"
        message += f" **{poll.title}**!\n" if poll.title else "!\n"
    elif poll.title:
        message = f"Poll **{poll.title}** is already closed!\n"
    else:
        message = "This poll is already closed!"
    winners = poll_winners(poll)
    if not winners or winners[0].votes == 0:
        return message + "There are no winners!"
    message += "Tied for first place:\n" if len(winners) > 1 else "Poll winner:\n"
    message += _option_lines(winners)
    return message + f"With {winners[0].votes} votes!"