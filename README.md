# moebot

The core logic of a community chat bot. It does not depend on any chat
service. It parses command text and builds the bot's reply messages. It also
handles the rules for polls, raffles, channel rotation and rank display. The
package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Modules

- `moebot.command_parse`
  - `parse_command(params, arguments)` groups the words of a command under the flags that come before them, such as `-name` and `-type`.
  - Flags are matched case-insensitively.
  - Words that come before the first flag are stored under the key `""`.

- `moebot.dispatch`
  - `CommandRegistry` maps command keys and aliases to handlers, ignoring case. It has the methods `register(keys, handler)` and `lookup(key)`, and it supports `in`, iteration and `len`.
  - `split_command(content, prefix)` returns `(KEY, params)` for a message that starts with the prefix and has a word after it. For any other message it returns `None`.
  - `make_alpha_only(text)` keeps only letters and spaces.
  - `agrees_to_rules(content, agreement)` checks, ignoring case, whether a message starts with the server's rule agreement phrase.

- `moebot.help`
  - `CommandInfo` holds a command's keys, a function that builds its help text, and whether the user may use it.
  - `title_case` upper-cases the first letter of a string and lower-cases the rest.
  - `list_all_commands_message` and `command_details_message` build the help replies. A command is left out when the user may not use it or its help text is empty.

- `moebot.changelog`
  - `changelog_message(current_version, params)` returns the update log for the requested version.
  - With no parameters, or with an unknown version, it returns the log for the current version. `VERSION` and `CHANGELOG` hold the data.

- `moebot.rank`
  - `convert_rank_to_string(rank, server_max)` shows a rank on the ladder Newcomer → Apprentice → Rookie → Regular → Veteran, as a percentage of the server's veteran rank.
  - When `server_max` is `None` it returns the rank number itself.
  - `emphasize_ranks` strikes out the ranks that come before the current one.

- `moebot.polls`
  - `Poll` and `PollOption` model a poll.
  - `PollError` is raised with a message that can be shown to the user.
  - `parse_open_poll`, `parse_options` and `parse_title` read the `-options` and `-title` parameters. A poll needs between 2 and 25 options.
  - `create_poll_options` gives each option a regional-indicator letter reaction.
  - `poll_winners` finds the options tied for the most votes.
  - `open_poll_message` and `close_poll_message` format the announcements, with mentions made by `user_mention`.

- `moebot.raffle`
  - `RaffleEntry` holds a user's tickets and their art and relic submissions.
  - `is_approved_link` accepts only youtube.com, imgur.com and pastebin.com links.
  - `apply_submission` records a submission. It returns the bonus tickets granted, which are given only for the first submission of each kind. It raises `SubmissionError` for a link that is not approved or an unknown kind.
  - `pick_winner` draws a user at random, weighted by ticket count.
  - `top_submissions` ranks users by votes.
  - `bonus_ticket_users` selects entrants who voted at least `MIN_VOTES` times.

- `moebot.rotation`
  - `ChannelRotation` describes a rotation through channels.
  - `next_channel_uid` picks the channel to show next. A rotation with a single channel switches between showing that channel and showing none.
  - `rotation_description` describes a rotation in text.
  - `parse_rotation_channels` turns channel mentions into ids. It raises `ValueError` when the list is empty or too long.

- `moebot.spoiler`
  - `spoiler_contents(params)` splits spoiler text into a leading `[title]` and the rest of the text.

- `moebot.role_code`
  - `role_code(role_uid, user_uid)` returns a six-character code taken from a SHA-256 hash.
  - `confirmation_message` fills this code into a role's printf-style confirmation template.

- `moebot.subreddit`
  - `subreddit_for_params` maps `random`, `meme` and `irl` to their subreddits. With no parameters it picks one at random.
  - An unknown type raises `UnknownSubredditError`. The error's `default` attribute names the subreddit to use instead.
  - `random_whitelisted_subreddit` picks one of the whitelisted subreddits.

## Example

```python
from moebot.command_parse import parse_command
from moebot.rank import convert_rank_to_string

args = parse_command(["-name", "colours", "-type", "any"], ["-name", "-type"])
# {"-name": "colours", "-type": "any"}

convert_rank_to_string(14, 100)
# "~~Newcomer~~ --> **Apprentice 1** --> Rookie --> Regular --> Veteran"
```

## What this package does not do

This package is a library of pure functions and data classes. It does not include:

- a command to start a bot;
- a connection to any chat service;
- event handling or a timer that runs scheduled operations;
- any database or other storage for servers, roles, polls or raffle entries.

Your own code must fetch and save that data, send the messages these functions build, and call them when chat events arrive.