from pathlib import Path

import pytest

from remapkit.device import MOUSE_BUTTONS, InputDeviceInfo, matches_any, output_key_codes
from remapkit.keys import Key, key_name


@pytest.fixture
def info():
    return InputDeviceInfo(
        name="Example USB Keyboard",
        path=Path("/dev/input/event3"),
        product=0x1234,
        vendor=0x0ABC,
    )


def test_matches_full_path(info):
    assert info.matches("/dev/input/event3")


def test_matches_exact_name(info):
    assert info.matches("Example USB Keyboard")


def test_matches_event_shorthand(info):
    assert info.matches("event3")
    assert not info.matches("event4")


def test_matches_partial_name(info):
    assert info.matches("USB Key")
    assert not info.matches("Mouse")


@pytest.mark.parametrize(
    "filter, expected",
    [
        ("ids:0xabc:0x1234", True),
        ("ids:abc:1234", True),
        ("ids:0xabc:0", True),
        ("ids:0:0x1234", True),
        ("ids:0:0", False),
        ("ids:0xabc:0x9999", False),
        ("ids:0x9999:0", False),
        ("ids:zz:0x1234", True),
        ("ids:0xabc", False),
    ],
)
def test_matches_ids(info, filter, expected):
    assert info.matches(filter) is expected


def test_matches_any(info):
    assert matches_any(info, ["nothing", "event3"], own_name="remapper")
    assert not matches_any(info, ["nothing", "event9"], own_name="remapper")
    assert not matches_any(info, [], own_name="remapper")


def test_matches_any_never_matches_own_device(info):
    assert not matches_any(info, ["event3", "Example"], own_name="Example USB Keyboard")


def test_output_key_codes_contents():
    codes = output_key_codes()
    assert Key.from_name("KEY_A").code in codes
    assert Key.from_name("KEY_SPACE").code in codes
    assert Key.from_name("BTN_LEFT").code in codes
    assert Key.from_name("BTN_TASK").code in codes
    assert Key.from_name("BTN_TRIGGER").code not in codes
    assert Key.from_name("BTN_TRIGGER_HAPPY40").code not in codes


def test_output_key_codes_invariant():
    codes = output_key_codes()
    assert codes == sorted(set(codes))
    for code in codes:
        name = key_name(code)
        assert name.startswith("KEY_") or name in MOUSE_BUTTONS