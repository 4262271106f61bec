"""Modmaps: single-key remappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .application import OnlyOrNot, parse_only_or_not, string_or_list
from .device_filter import DeviceFilter, parse_device_filter
from .keymap_action import _scalar_text
from .keys import ConfigError, Key, parse_key
from .modmap_action import ModmapAction, parse_modmap_action

__all__ = ["Modmap", "parse_modmap"]

_FIELDS = {"name", "remap", "application", "window", "device", "mode"}


@dataclass(frozen=True)
class Modmap:
    remap: dict[Key, ModmapAction]
    name: str = ""
    application: OnlyOrNot | None = None
    window: OnlyOrNot | None = None
    device: DeviceFilter | None = None
    mode: tuple[str, ...] | None = None


def parse_modmap(value: Any) -> Modmap:
    if not isinstance(value, dict):
        raise ConfigError(f"expected a mapping for a modmap, got {value!r}")
    unknown = set(value) - _FIELDS
    if unknown:
        raise ConfigError(f"unknown field(s) in modmap: {', '.join(sorted(map(str, unknown)))}")
    if "remap" not in value:
        raise ConfigError('missing field "remap"')
    table = value["remap"]
    if not isinstance(table, dict):
        raise ConfigError(f"expected a mapping for remap, got {table!r}")
    remap = {parse_key(_scalar_text(k, "remap key")): parse_modmap_action(v) for k, v in table.items()}

    name = value.get("name", "")
    if not isinstance(name, str):
        raise ConfigError(f"expected a string for name, got {name!r}")
    mode = string_or_list(value.get("mode"))

    def optional(field: str, parser):
        raw = value.get(field)
        return None if raw is None else parser(raw)

    return Modmap(
        remap=remap,
        name=name,
        application=optional("application", parse_only_or_not),
        window=optional("window", parse_only_or_not),
        device=optional("device", parse_device_filter),
        mode=None if mode is None else tuple(mode),
    )