import pytest

from moebot.rotation import (
    ChannelRotation,
    next_channel_uid,
    parse_rotation_channels,
    rotation_description,
)


def test_empty_rotation_has_no_next():
    assert next_channel_uid(ChannelRotation()) == ""


def test_single_channel_toggles():
    shown = next_channel_uid(ChannelRotation(channel_uid_list=["a"], current_channel_uid=""))
    assert shown == "a"
    hidden = next_channel_uid(ChannelRotation(channel_uid_list=["a"], current_channel_uid="a"))
    assert hidden == ""


def test_advances_through_list():
    rotation = ChannelRotation(channel_uid_list=["a", "b", "c"], current_channel_uid="a")
    assert next_channel_uid(rotation) == "b"
    rotation.current_channel_uid = "b"
    assert next_channel_uid(rotation) == "c"


def test_wraps_around_at_end():
    rotation = ChannelRotation(channel_uid_list=["a", "b", "c"], current_channel_uid="c")
    assert next_channel_uid(rotation) == "a"


def test_unknown_current_starts_at_first():
    rotation = ChannelRotation(channel_uid_list=["a", "b"], current_channel_uid="zzz")
    assert next_channel_uid(rotation) == "a"


def test_full_cycle_visits_every_channel():
    channels = ["1", "2", "3", "4"]
    rotation = ChannelRotation(channel_uid_list=channels, current_channel_uid="1")
    seen = []
    for _ in channels:
        rotation.current_channel_uid = next_channel_uid(rotation)
        seen.append(rotation.current_channel_uid)
    assert sorted(seen) == sorted(channels)
    assert rotation.current_channel_uid == "1"


def test_description_single():
    assert rotation_description(["42"]) == "Rotating channel 42"


def test_description_many():
    assert rotation_description(["1", "2"]) == "Rotating channels <#1> <#2>"


def test_parse_strips_mention_markup():
    assert parse_rotation_channels("<#123> <#456> 789") == ["123", "456", "789"]


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        parse_rotation_channels("")


def test_parse_too_long_raises():
    text = " ".join(["1234567890"] * 100)
    with pytest.raises(ValueError):
        parse_rotation_channels(text)


def test_parse_at_limit_is_accepted():
    channels = parse_rotation_channels("x" * 1000)
    assert channels == ["x" * 1000]