"""Text of the help command: command listings and per-command details."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandInfo:
    """What the help command needs to know about one command.

    ``help`` builds the command's help text for a prefix; ``allowed`` tells
    whether the requesting user has permission to use the command.
    """

    keys: tuple[str, ...]
    help: Callable[[str], str]
    allowed: bool = True

    def visible(self, prefix: str) -> bool:
        """Whether the command appears in help for the requesting user."""
        return self.allowed and self.help(prefix) != ""


def title_case(text: str) -> str:
    """Upper-case the first letter and lower-case the rest."""
    return text[:1].upper() + text[1:].lower()


def list_all_commands_message(commands: Sequence[CommandInfo], prefix: str) -> str:
    """List every command key visible to the user."""
    parts = [
        "For details on each command, use the detailed help command or check out the wiki!\n",
        "**Moebot has the following commands**:\n",
    ]
    for command_index, command in enumerate(commands):
        if not command.visible(prefix):
            continue
        for key_index, key in enumerate(command.keys):
            if command_index > 0 or key_index > 0:
                parts.append(", ")
            parts.append(f"`{title_case(key)}`")
    parts.append(f"\nYou can also use `{prefix} help <command name>` for more details.")
    return "".join(parts)


def command_details_message(
    commands: Sequence[CommandInfo], requested_key: str, prefix: str
) -> str:
    """Show help for one command, or the full listing if it is not found."""
    wanted = requested_key.upper()
    for command in commands:
        if not command.visible(prefix):
            continue
        if wanted in command.keys:
            return (
                f"**Details for command**: `{title_case(wanted)}`:\n"
                + command.help(prefix)
            )
    return list_all_commands_message(commands, prefix)