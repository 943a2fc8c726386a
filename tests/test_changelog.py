import pytest

from moebot.changelog import CHANGELOG, VERSION, changelog_message


def test_no_params_shows_current_version():
    message = changelog_message(VERSION, [])
    assert message == "Moebot update log `(ver " + VERSION + ")`: \n" + CHANGELOG[VERSION]


@pytest.mark.parametrize("version", sorted(CHANGELOG))
def test_known_version_is_shown(version):
    message = changelog_message(VERSION, [version])
    assert message.startswith("Moebot update log `(ver " + version + ")`: \n")
    assert message.endswith(CHANGELOG[version])


def test_unknown_version_falls_back_to_latest():
    message = changelog_message(VERSION, ["9.9.9"])
    assert message == "Unknown version number. Latest log:\n" + changelog_message(VERSION, [])


def test_extra_params_are_ignored():
    assert changelog_message(VERSION, ["0.2", "extra"]) == changelog_message(VERSION, ["0.2"])


def test_entries_use_arrow_prefix():
    assert all(text.startswith("\n`->` ") for text in CHANGELOG.values())
    assert "Fixed various bugs" in CHANGELOG["0.6.1"]