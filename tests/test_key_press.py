import pytest

from remapkit.key_press import KeyPress, Modifier, parse_key_press, parse_modifier
from remapkit.keys import ConfigError, parse_key


def test_control_x():
    assert parse_key_press("c-x") == KeyPress(parse_key("x"), (Modifier.CONTROL,))


def test_plain_key_has_no_modifiers():
    assert parse_key_press("Enter").modifiers == ()


def test_modifier_order_kept():
    press = parse_key_press("Shift-C-w")
    assert press.modifiers == (Modifier.SHIFT, Modifier.CONTROL)
    assert press.key == parse_key("w")


def test_exact_key_modifier():
    press = parse_key_press("Alt_L-Enter")
    assert press.modifiers == (parse_key("alt_l"),)


@pytest.mark.parametrize(
    "name,expected",
    [("ctrl", Modifier.CONTROL), ("M", Modifier.ALT), ("win", Modifier.WINDOWS), ("SUPER", Modifier.WINDOWS)],
)
def test_parse_modifier(name, expected):
    assert parse_modifier(name) is expected


def test_bad_modifier():
    with pytest.raises(ConfigError):
        parse_key_press("Hyper-a")


def test_hashable_as_dict_key():
    table = {parse_key_press("C-a"): 1}
    assert table[parse_key_press("c-A")] == 1