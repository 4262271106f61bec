import pytest

from remapkit.event import (
    DeviceKeyEvent,
    DeviceRelativeEvent,
    EventType,
    InputEvent,
    KeyEvent,
    KeyValue,
    OtherEvent,
    RelativeEvent,
    event_from_input,
)
from remapkit.keys import parse_key


def test_key_event_round_trip():
    code = parse_key("a").code
    event = KeyEvent.from_raw(code, 1)
    assert event.value is KeyValue.PRESS
    assert event.code == code
    assert int(event.value) == 1


def test_invalid_key_value():
    with pytest.raises(ValueError):
        KeyEvent.from_raw(30, 7)


def test_classify_key():
    result = event_from_input("dev", InputEvent(EventType.KEY, 30, 0))
    assert result == DeviceKeyEvent("dev", KeyEvent.from_raw(30, 0))


def test_classify_relative():
    result = event_from_input("dev", InputEvent(EventType.RELATIVE, 8, -1))
    assert result == DeviceRelativeEvent("dev", RelativeEvent(8, -1))


def test_classify_other():
    raw = InputEvent(EventType.MISC, 4, 5)
    assert event_from_input("dev", raw) == OtherEvent(raw)