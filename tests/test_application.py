import pytest

from remapkit.application import (
    MatcherKind,
    parse_application_matcher,
    parse_only_or_not,
    slash_unescape,
    string_or_list,
)
from remapkit.keys import ConfigError


def test_literal_application_name_matcher():
    matcher = parse_application_matcher("Minecraft")
    assert matcher.matches("Minecraft")
    assert not matcher.matches("Minecraft Launcher")


def test_regex_application_name_matcher():
    matcher = parse_application_matcher(r"/^Minecraft\*? \d+\.\d+(\.\d+)?$/")
    assert matcher.matches("Minecraft 1.19.2")
    assert matcher.matches("Minecraft* 1.19")
    assert matcher.matches("Minecraft* 1.19.2")


def test_regex_unescape_application_name_matcher():
    matcher = parse_application_matcher(r"/^\/$/")
    assert matcher.matches("/")


def test_unescape_slash_correct_regex():
    assert slash_unescape(r"/^Mine\d\/craft\\/") == r"^Mine\d/craft\\"


def test_unescape_slash_missing_closing_slash():
    with pytest.raises(ConfigError) as info:
        slash_unescape(r"/^Minecraft\/")
    assert str(info.value) == "Missing closing / in application name regex"


def test_unescape_slash_excessive_string_after_closing():
    with pytest.raises(ConfigError) as info:
        slash_unescape(r"/^Minecraft/i")
    assert str(info.value) == "Unexpected trailing string after closing / in application name regex"


def test_name_matcher_uses_last_component():
    matcher = parse_application_matcher("Navigator")
    assert matcher.kind is MatcherKind.NAME
    assert matcher.matches("firefox.Navigator")
    assert not matcher.matches("firefox.Other")


def test_dotted_is_literal():
    assert parse_application_matcher("code.Code").kind is MatcherKind.LITERAL


def test_string_or_list():
    assert string_or_list("Kitty") == ["Kitty"]
    assert string_or_list(["a", "b"]) == ["a", "b"]
    assert string_or_list(None) is None
    with pytest.raises(ConfigError):
        string_or_list(3)


def test_only_or_not():
    result = parse_only_or_not({"not": ["Gnome-terminal"]})
    assert result.only is None
    assert result.not_[0].matches("Gnome-terminal")


def test_only_or_not_unknown_field():
    with pytest.raises(ConfigError):
        parse_only_or_not({"also": "x"})