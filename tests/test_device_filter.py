import pytest

from remapkit.device_filter import DeviceFilter, parse_device_filter
from remapkit.keys import ConfigError


def test_single_string_becomes_tuple():
    assert parse_device_filter({"only": "event3"}) == DeviceFilter(only=("event3",))


def test_list_kept():
    result = parse_device_filter({"not": ["a", "b"]})
    assert result.not_ == ("a", "b")
    assert result.only is None


def test_empty_mapping():
    assert parse_device_filter({}) == DeviceFilter()


def test_unknown_field():
    with pytest.raises(ConfigError):
        parse_device_filter({"only": "x", "extra": 1})


def test_not_a_mapping():
    with pytest.raises(ConfigError):
        parse_device_filter(["x"])