import pytest
import yaml

from remapkit.application import parse_application_matcher
from remapkit.key_press import KeyPress, Modifier
from remapkit.keymap import build_keymap_table, build_override_table, parse_keymap
from remapkit.keymap_action import SetMode
from remapkit.keys import ConfigError, Key


def k(name):
    return Key.from_name(name)


def load(text):
    return parse_keymap(yaml.safe_load(text))


def test_parse_basic_keymap():
    keymap = load("{name: Global, remap: {Alt-Enter: Ctrl-Enter}}")
    assert keymap.name == "Global"
    assert keymap.remap == {
        KeyPress(k("KEY_ENTER"), (Modifier.ALT,)): [KeyPress(k("KEY_ENTER"), (Modifier.CONTROL,))]
    }
    assert keymap.exact_match is False
    assert keymap.application is None


def test_parse_application_and_mode():
    keymap = load("{mode: insert, remap: {Esc: {set_mode: normal}}, application: {not: Gnome-terminal}}")
    assert keymap.mode == ("insert",)
    assert keymap.remap[KeyPress(k("KEY_ESC"))] == [SetMode("normal")]
    assert keymap.application.not_ == (parse_application_matcher("Gnome-terminal"),)


def test_null_action_gives_empty_list():
    keymap = load("{remap: {f12: null}}")
    assert keymap.remap == {KeyPress(k("KEY_F12")): []}


def test_parse_errors():
    with pytest.raises(ConfigError):
        load("{remap: {a: b}, extra: 1}")
    with pytest.raises(ConfigError):
        load("{name: NoRemap}")
    with pytest.raises(ConfigError):
        load("{remap: {a: b}, exact_match: sometimes}")


def test_build_keymap_table_groups_by_key_in_order():
    first = load("{remap: {C-x: C-w}, application: {only: Firefox}}")
    second = load("{remap: {x: y}, window: {only: Editor}, exact_match: true}")
    table = build_keymap_table([first, second])
    assert list(table) == [k("KEY_X")]
    entries = table[k("KEY_X")]
    assert [entry.modifiers for entry in entries] == [(Modifier.CONTROL,), ()]
    assert entries[0].application == first.application
    assert entries[0].title is None
    assert entries[1].title == second.window
    assert entries[1].exact_match is True
    assert entries[1].actions == (KeyPress(k("KEY_Y")),)


def test_build_keymap_table_counts_every_entry():
    keymaps = [load("{remap: {a: b, c: d}}"), load("{remap: {a: e}}")]
    table = build_keymap_table(keymaps)
    assert sum(len(entries) for entries in table.values()) == 3
    assert set(table) == {k("KEY_A"), k("KEY_C")}


def test_build_override_table():
    remap = load("{remap: {s: C-w, C-s: C-z}}").remap
    table = build_override_table(remap, True)
    entries = table[k("KEY_S")]
    assert len(entries) == 2
    assert all(entry.exact_match for entry in entries)
    assert {entry.modifiers: entry.actions for entry in entries} == {
        (): tuple(remap[KeyPress(k("KEY_S"))]),
        (Modifier.CONTROL,): tuple(remap[KeyPress(k("KEY_S"), (Modifier.CONTROL,))]),
    }