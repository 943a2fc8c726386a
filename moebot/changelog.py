"""Release notes and the changelog command's reply."""

from __future__ import annotations

from collections.abc import Sequence

VERSION = "0.6.1"

_PREFIX = "\n`->` "


def _entries(*lines: str) -> str:
    return "".join(_PREFIX + line for line in lines)


CHANGELOG: dict[str, str] = {
    "0.6.1": _entries(
        "Added dual-roles as a new group type (Credit: Shadran)",
        "Made help support more commands",
        "Fixed various bugs",
    ),
    "0.5.2": _entries(
        "Added automatic rotating channels (Credit: Shadran)",
        "Refactor timer command (Credit: Imbajoe)",
        "Fixed various bugs",
    ),
    "0.4.7": _entries(
        "Added `sub` command (Credit: Imbajoe)",
        "Added `timer` command (Credit: Imbajoe)",
        "Added `fetch` command for master only",
        "Switched to newer version of discordgo",
        "Fixed various bugs",
    ),
    "0.4.2": _entries(
        "Improved profile command",
        "Fix bug with permission checking",
        "Fix bug with help command displaying too much",
        "Change pinmove to use different infrastructure, and include delete option",
        "(0.4.2) Fix permit bug not assigning a permission value",
    ),
    "0.4.0": _entries(
        "Removed all hardcoded values!",
        "Merged rank, team, and NSFW into a single command: role",
        "Added roleSet and groupSet commands for mods",
        "Added server configuration for welcome messages, and rule agreement as well as server config clearing",
        "Made help contextual to your permission level (Credit: Shadran)",
        "First big step towards public bot status!",
    ),
    "0.3.2": _entries(
        "More code cleanup",
        "Removed spoiler command (thanks discord)",
        "Added verifiable roles (Credit: Shadran)",
    ),
    "0.3.1": _entries(
        "Code cleanup/refactor",
        "Updated veteran rank handling",
    ),
    "0.3": _entries(
        "Added veteran role stuff",
        "Added pinmove command (credit: Shadran)",
        "Added server configuration for mods",
        "Added the profile command",
        "Fixed some bugs",
    ),
    "0.2.4": _entries(
        "Added spoiler command (credit: Shadran)",
        "Added poll command (credit: Shadran)",
    ),
    "0.2.3": _entries(
        "Added ping command",
        "Added permit command",
        "Added custom command",
    ),
    "0.2.2": _entries(
        "Added echo command for master only",
        "added `raffle winner` and `raffle count` to get the raffle winner and vote counts",
        "removed ticket generation",
    ),
    "0.2.1": _entries(
        "Updated raffle art/relic submissions to post all submissions on command instead of over time.",
    ),
    "0.2": _entries(
        "Included this command!",
        "Updated `Rank` command to prevent removal of lowest role.",
        "Added random drops for tickets",
        "Fixed the cooldown so users wouldn't be spammed due to high luck stat",
        "Added `Raffle` related commands... For rafflin'",
        "For future reference, previous versions included help, team, rank, and NSFW commands as well as a welcome message to the server.",
    ),
}


def _log_for(version: str) -> str:
    return f"Moebot update log `(ver {version})`: \n{CHANGELOG.get(version, '')}"


def changelog_message(current_version: str, params: Sequence[str]) -> str:
    """Build the changelog reply for the requested version, or the current one."""
    if not params:
        return _log_for(current_version)
    requested = params[0]
    if requested in CHANGELOG:
        return _log_for(requested)
    return "Unknown version number. Latest log:\n" + _log_for(current_version)