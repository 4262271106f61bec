from datetime import timedelta

import pytest
import yaml

from remapkit.key_press import KeyPress, Modifier
from remapkit.keymap_action import (
    EscapeNextKey,
    KeyPressAction,
    KeyReleaseAction,
    KeyRepeatAction,
    Launch,
    Remap,
    SetMark,
    SetMode,
    Sleep,
    WithMark,
    parse_actions,
    parse_keymap_action,
)
from remapkit.keys import ConfigError, Key


def k(name):
    return Key.from_name(name)


def load(text):
    return parse_keymap_action(yaml.safe_load(text))


def test_keypress_action():
    assert load("c-x") == KeyPress(k("KEY_X"), (Modifier.CONTROL,))


@pytest.mark.parametrize(
    "text, expected",
    [("{launch: []}", ()), ('{launch: ["bla"]}', ("bla",))],
)
def test_launch_action(text, expected):
    assert load(text) == Launch(expected)


def test_null_action():
    assert parse_actions(yaml.safe_load("null")) == []


def test_press_repeat_release():
    assert load("{press: a}") == KeyPressAction(k("KEY_A"))
    assert load("{repeat: a}") == KeyRepeatAction(k("KEY_A"))
    assert load("{release: Shift_L}") == KeyReleaseAction(k("KEY_LEFTSHIFT"))


def test_press_with_extra_key_is_rejected():
    with pytest.raises(ConfigError):
        load("{press: a, release: a}")


def test_mode_and_mark_actions():
    assert load("{set_mode: normal}") == SetMode("normal")
    assert load("{set_mark: true}") == SetMark(True)
    assert load("{set_mark: false}") == SetMark(False)
    assert load("{with_mark: C-left}") == WithMark(KeyPress(k("KEY_LEFT"), (Modifier.CONTROL,)))
    assert load("{escape_next_key: true}") == EscapeNextKey(True)


def test_sleep():
    assert load("{sleep: 250}") == Sleep(250)
    with pytest.raises(ConfigError):
        load("{sleep: true}")
    with pytest.raises(ConfigError):
        load("{sleep: -1}")


def test_nested_remap():
    text = """
remap:
  s: C-w
  C-s:
    remap:
      x: C-z
timeout_key: Down
timeout_millis: 1000
"""
    expected = Remap(
        remap={
            KeyPress(k("KEY_S")): [KeyPress(k("KEY_W"), (Modifier.CONTROL,))],
            KeyPress(k("KEY_S"), (Modifier.CONTROL,)): [
                Remap(remap={KeyPress(k("KEY_X")): [KeyPress(k("KEY_Z"), (Modifier.CONTROL,))]})
            ],
        },
        timeout=timedelta(milliseconds=1000),
        timeout_key=k("KEY_DOWN"),
    )
    assert load(text) == expected


def test_remap_with_bad_timeout_key():
    with pytest.raises(ConfigError):
        load("{remap: {s: C-w}, timeout_key: NoSuchKey}")


def test_action_list():
    actions = parse_actions(yaml.safe_load("[Shift-C-w, C-x]"))
    assert actions == [
        KeyPress(k("KEY_W"), (Modifier.SHIFT, Modifier.CONTROL)),
        KeyPress(k("KEY_X"), (Modifier.CONTROL,)),
    ]


def test_mixed_action_list():
    actions = parse_actions(yaml.safe_load("[esc, {set_mark: false}]"))
    assert actions == [KeyPress(k("KEY_ESC")), SetMark(False)]


def test_empty_list_means_no_action():
    assert parse_actions([]) == []


def test_unknown_key_is_rejected():
    with pytest.raises(ConfigError):
        parse_keymap_action("C-nosuchkey")