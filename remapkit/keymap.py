"""Keymaps and the lookup tables built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .application import OnlyOrNot, parse_only_or_not, string_or_list
from .device_filter import DeviceFilter, parse_device_filter
from .key_press import KeyPress, Modifier, parse_key_press
from .keymap_action import KeymapAction, _scalar_text, parse_actions
from .keys import ConfigError, Key

__all__ = [
    "Keymap",
    "KeymapEntry",
    "OverrideEntry",
    "parse_keymap",
    "build_keymap_table",
    "build_override_table",
]

_FIELDS = {"name", "remap", "application", "window", "device", "mode", "exact_match"}


@dataclass(frozen=True)
class Keymap:
    remap: dict[KeyPress, list[KeymapAction]]
    name: str = ""
    application: OnlyOrNot | None = None
    window: OnlyOrNot | None = None
    device: DeviceFilter | None = None
    mode: tuple[str, ...] | None = None
    exact_match: bool = False


@dataclass(frozen=True)
class KeymapEntry:
    """One candidate mapping for a triggering key."""

    actions: tuple[KeymapAction, ...]
    modifiers: tuple[Modifier | Key, ...]
    application: OnlyOrNot | None
    title: OnlyOrNot | None
    device: DeviceFilter | None
    mode: tuple[str, ...] | None
    exact_match: bool


@dataclass(frozen=True)
class OverrideEntry:
    """One candidate mapping inside a nested remap."""

    actions: tuple[KeymapAction, ...]
    modifiers: tuple[Modifier | Key, ...]
    exact_match: bool


def parse_keymap(value: Any) -> Keymap:
    if not isinstance(value, dict):
        raise ConfigError(f"expected a mapping for a keymap, got {value!r}")
    unknown = set(value) - _FIELDS
    if unknown:
        raise ConfigError(f"unknown field(s) in keymap: {', '.join(sorted(map(str, unknown)))}")
    if "remap" not in value:
        raise ConfigError('missing field "remap"')
    table = value["remap"]
    if not isinstance(table, dict):
        raise ConfigError(f"expected a mapping for remap, got {table!r}")
    remap = {parse_key_press(_scalar_text(k, "remap key")): parse_actions(v) for k, v in table.items()}

    name = value.get("name", "")
    if not isinstance(name, str):
        raise ConfigError(f"expected a string for name, got {name!r}")
    exact_match = value.get("exact_match", False)
    if not isinstance(exact_match, bool):
        raise ConfigError(f"expected a boolean for exact_match, got {exact_match!r}")
    mode = string_or_list(value.get("mode"))

    def optional(field: str, parser):
        raw = value.get(field)
        return None if raw is None else parser(raw)

    return Keymap(
        remap=remap,
        name=name,
        application=optional("application", parse_only_or_not),
        window=optional("window", parse_only_or_not),
        device=optional("device", parse_device_filter),
        mode=None if mode is None else tuple(mode),
        exact_match=exact_match,
    )


def build_keymap_table(keymaps: list[Keymap]) -> dict[Key, list[KeymapEntry]]:
    """Group every keymap's entries by their triggering key, in config order."""
    table: dict[Key, list[KeymapEntry]] = {}
    for keymap in keymaps:
        for key_press, actions in keymap.remap.items():
            table.setdefault(key_press.key, []).append(
                KeymapEntry(
                    actions=tuple(actions),
                    modifiers=key_press.modifiers,
                    application=keymap.application,
                    title=keymap.window,
                    device=keymap.device,
                    mode=keymap.mode,
                    exact_match=keymap.exact_match,
                )
            )
    return table


def build_override_table(
    remap: dict[KeyPress, list[KeymapAction]], exact_match: bool
) -> dict[Key, list[OverrideEntry]]:
    """Group a nested remap's entries by their triggering key."""
    table: dict[Key, list[OverrideEntry]] = {}
    for key_press, actions in remap.items():
        table.setdefault(key_press.key, []).append(
            OverrideEntry(tuple(actions), key_press.modifiers, exact_match)
        )
    return table