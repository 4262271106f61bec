"""Device selection in modmap and keymap entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .application import string_or_list
from .keys import ConfigError

__all__ = ["DeviceFilter", "parse_device_filter"]


@dataclass(frozen=True)
class DeviceFilter:
    only: tuple[str, ...] | None = None
    not_: tuple[str, ...] | None = None


def _strings(value: Any) -> tuple[str, ...] | None:
    strings = string_or_list(value)
    return None if strings is None else tuple(strings)


def parse_device_filter(value: Any) -> DeviceFilter:
    if not isinstance(value, dict):
        raise ConfigError(f"expected a mapping with 'only' or 'not', got {value!r}")
    unknown = set(value) - {"only", "not"}
    if unknown:
        raise ConfigError(f"unknown field(s): {', '.join(sorted(map(str, unknown)))}")
    return DeviceFilter(_strings(value.get("only")), _strings(value.get("not")))