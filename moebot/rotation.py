"""Channel rotation: picking the next visible channel and describing rotations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

MAX_CHANNEL_LIST_LENGTH = 1000


@dataclass
class ChannelRotation:
    """A scheduled rotation through a server's channels."""

    channel_uid_list: list[str] = field(default_factory=list)
    current_channel_uid: str = ""
    id: int = 0
    server_id: int = 0


def next_channel_uid(rotation: ChannelRotation) -> str:
    """Return the channel to show after the current one, or ``""`` for none.

    A single-channel rotation toggles between showing that channel and
    showing nothing.
    """
    channels = rotation.channel_uid_list
    if not channels:
        return ""
    if len(channels) == 1:
        return channels[0] if rotation.current_channel_uid == "" else ""
    try:
        next_index = channels.index(rotation.current_channel_uid) + 1
    except ValueError:
        next_index = 0
    if next_index >= len(channels):
        next_index = 0
    return channels[next_index]


def rotation_description(channel_uids: Sequence[str]) -> str:
    """Describe a rotation for the operation listing."""
    if len(channel_uids) == 1:
        return "Rotating channel " + channel_uids[0]
    return "Rotating channels" + "".join(f" <#{uid}>" for uid in channel_uids)


def parse_rotation_channels(text: str) -> list[str]:
    """Turn a space-separated list of channel mentions into channel ids.

    Raises ValueError when no channels are given or the list is too long.
    """
    if text == "":
        raise ValueError("-channels parameter empty")
    channels = [word.strip("<#>") for word in text.split(" ")]
    if len(" ".join(channels)) > MAX_CHANNEL_LIST_LENGTH:
        raise ValueError("Too many channels passed as an argument")
    return channels