"""Actions that a modmap entry maps a single key to."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .keymap_action import KeymapAction, _scalar_text, parse_actions
from .keys import ConfigError, Key, parse_key

__all__ = [
    "MultiPurposeKey",
    "PressReleaseKey",
    "ModmapAction",
    "DEFAULT_ALONE_TIMEOUT",
    "parse_modmap_action",
    "parse_keys",
]

DEFAULT_ALONE_TIMEOUT = timedelta(milliseconds=1000)


@dataclass(frozen=True)
class MultiPurposeKey:
    """A key acting as ``held`` keys when held and as ``alone`` keys when tapped."""

    held: tuple[Key, ...]
    alone: tuple[Key, ...]
    alone_timeout: timedelta = DEFAULT_ALONE_TIMEOUT


@dataclass(frozen=True)
class PressReleaseKey:
    """Actions run on press, repeat and release of a key."""

    skip_key_event: bool = False
    press: tuple[KeymapAction, ...] = ()
    repeat: tuple[KeymapAction, ...] = ()
    release: tuple[KeymapAction, ...] = ()


ModmapAction = Key | MultiPurposeKey | PressReleaseKey


def parse_keys(value: Any) -> tuple[Key, ...]:
    """Parse a key name or a list of key names."""
    if isinstance(value, list):
        return tuple(parse_key(_scalar_text(item, "key")) for item in value)
    return (parse_key(_scalar_text(value, "key")),)


def _multi_purpose(value: dict[str, Any]) -> MultiPurposeKey:
    for field in ("held", "alone"):
        if field not in value:
            raise ConfigError(f'missing field "{field}"')
    millis = value.get("alone_timeout_millis")
    if millis is None:
        timeout = DEFAULT_ALONE_TIMEOUT
    elif isinstance(millis, int) and not isinstance(millis, bool) and millis >= 0:
        timeout = timedelta(milliseconds=millis)
    else:
        raise ConfigError(f"expected a non-negative integer for alone_timeout_millis, got {millis!r}")
    return MultiPurposeKey(parse_keys(value["held"]), parse_keys(value["alone"]), timeout)


def _press_release(value: dict[str, Any]) -> PressReleaseKey:
    skip = value.get("skip_key_event", False)
    if not isinstance(skip, bool):
        raise ConfigError(f"expected a boolean for skip_key_event, got {skip!r}")
    press, repeat, release = (
        tuple(parse_actions(value[name])) if name in value else ()
        for name in ("press", "repeat", "release")
    )
    return PressReleaseKey(skip, press, repeat, release)


def parse_modmap_action(value: Any) -> ModmapAction:
    """Parse a key name, a multi-purpose key or a press/release key."""
    if isinstance(value, dict):
        try:
            return _multi_purpose(value)
        except ConfigError:
            pass
        try:
            return _press_release(value)
        except ConfigError:
            raise ConfigError(f"data did not match any variant of ModmapAction: {value!r}") from None
    if isinstance(value, str) or (isinstance(value, int) and not isinstance(value, bool)):
        return parse_key(str(value))
    raise ConfigError(f"data did not match any variant of ModmapAction: {value!r}")