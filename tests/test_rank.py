import pytest

from moebot.rank import convert_rank_to_string, emphasize_ranks


@pytest.mark.parametrize(
    ("rank", "server_max", "expected"),
    [
        (0, 100, "**Newcomer** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (1, 100, "**Newcomer** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (2, 100, "**Newcomer 1** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (3, 100, "**Newcomer 1** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (4, 100, "**Newcomer 2** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (5, 100, "**Newcomer 2** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (6, 100, "**Newcomer 3** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (7, 100, "**Newcomer 3** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (8, 100, "**Newcomer 4** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (9, 100, "**Newcomer 4** --> Apprentice --> Rookie --> Regular --> Veteran"),
        (10, 100, "~~Newcomer~~ --> **Apprentice** --> Rookie --> Regular --> Veteran"),
        (11, 100, "~~Newcomer~~ --> **Apprentice** --> Rookie --> Regular --> Veteran"),
        (7, 63, "~~Newcomer~~ --> **Apprentice** --> Rookie --> Regular --> Veteran"),
        (27, 243, "~~Newcomer~~ --> **Apprentice** --> Rookie --> Regular --> Veteran"),
        (12, 100, "~~Newcomer~~ --> **Apprentice** --> Rookie --> Regular --> Veteran"),
        (13, 100, "~~Newcomer~~ --> **Apprentice** --> Rookie --> Regular --> Veteran"),
        (14, 100, "~~Newcomer~~ --> **Apprentice 1** --> Rookie --> Regular --> Veteran"),
        (30, 100, "~~Newcomer~~ --> ~~Apprentice~~ --> **Rookie** --> Regular --> Veteran"),
        (60, 100, "~~Newcomer~~ --> ~~Apprentice~~ --> ~~Rookie~~ --> **Regular** --> Veteran"),
        (100, 100, "~~Newcomer~~ --> ~~Apprentice~~ --> ~~Rookie~~ --> ~~Regular~~ --> **Veteran**"),
        (200, 100, "~~Newcomer~~ --> ~~Apprentice~~ --> ~~Rookie~~ --> ~~Regular~~ --> **Veteran 1**"),
        (300, 100, "~~Newcomer~~ --> ~~Apprentice~~ --> ~~Rookie~~ --> ~~Regular~~ --> **Veteran 2**"),
        (1500, 100, "~~Newcomer~~ --> ~~Apprentice~~ --> ~~Rookie~~ --> ~~Regular~~ --> **Veteran 14**"),
    ],
)
def test_convert_rank_to_string(rank, server_max, expected):
    assert convert_rank_to_string(rank, server_max) == expected


def test_no_server_max_returns_rank_number():
    assert convert_rank_to_string(42, None) == "42"


def test_zero_server_max_is_rejected():
    with pytest.raises(ValueError):
        convert_rank_to_string(5, 0)


def test_emphasize_ranks_strikes_earlier_entries():
    assert emphasize_ranks(["a", "b", "c"], 1, " | ") == "~~a~~ | b | c"


def test_emphasize_ranks_index_zero_strikes_nothing():
    assert emphasize_ranks(["a", "b"], 0, ",") == "a,b"