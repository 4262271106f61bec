"""Actions that a keymap entry maps a key press to."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .key_press import KeyPress, parse_key_press
from .keys import ConfigError, Key, parse_key

__all__ = [
    "KeyPressAction",
    "KeyRepeatAction",
    "KeyReleaseAction",
    "Remap",
    "Launch",
    "SetMode",
    "SetMark",
    "WithMark",
    "EscapeNextKey",
    "Sleep",
    "SetExtraModifiers",
    "KeymapAction",
    "parse_keymap_action",
    "parse_actions",
]


@dataclass(frozen=True)
class KeyPressAction:
    """Press a key without releasing it."""

    key: Key


@dataclass(frozen=True)
class KeyRepeatAction:
    """Send a repeat event for a key."""

    key: Key


@dataclass(frozen=True)
class KeyReleaseAction:
    """Release a key."""

    key: Key


@dataclass(frozen=True)
class Remap:
    """A nested keymap that overrides the next key press."""

    remap: dict[KeyPress, list[KeymapAction]]
    timeout: timedelta | None = None
    timeout_key: Key | None = None


@dataclass(frozen=True)
class Launch:
    """Run a command."""

    argv: tuple[str, ...]


@dataclass(frozen=True)
class SetMode:
    mode: str


@dataclass(frozen=True)
class SetMark:
    value: bool


@dataclass(frozen=True)
class WithMark:
    key_press: KeyPress


@dataclass(frozen=True)
class EscapeNextKey:
    value: bool


@dataclass(frozen=True)
class Sleep:
    """Pause for a number of milliseconds."""

    millis: int


@dataclass(frozen=True)
class SetExtraModifiers:
    """Internal action: the modifiers to keep pressed while emitting."""

    keys: tuple[Key, ...]


KeymapAction = (
    KeyPress
    | KeyPressAction
    | KeyRepeatAction
    | KeyReleaseAction
    | Remap
    | Launch
    | SetMode
    | SetMark
    | WithMark
    | EscapeNextKey
    | Sleep
    | SetExtraModifiers
)


def _scalar_text(value: Any, what: str) -> str:
    """Accept a string, or a plain integer scalar read as its text."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ConfigError(f"expected a string for {what}, got {value!r}")


def _unsigned(value: Any, what: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    raise ConfigError(f"expected a non-negative integer for {what}, got {value!r}")


def _boolean(value: Any, what: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"expected a boolean for {what}, got {value!r}")


def _single(value: Any, name: str) -> Any:
    if isinstance(value, dict) and set(value) == {name}:
        return value[name]
    raise ConfigError(f'not a map with a single "{name}" key')


def _key_press_and_release(value: Any) -> KeyPress:
    if not isinstance(value, str):
        raise ConfigError(f"expected a key press string, got {value!r}")
    return parse_key_press(value)


def _press(value: Any) -> KeyPressAction:
    return KeyPressAction(parse_key(_scalar_text(_single(value, "press"), "press")))


def _repeat(value: Any) -> KeyRepeatAction:
    return KeyRepeatAction(parse_key(_scalar_text(_single(value, "repeat"), "repeat")))


def _release(value: Any) -> KeyReleaseAction:
    return KeyReleaseAction(parse_key(_scalar_text(_single(value, "release"), "release")))


def _remap(value: Any) -> Remap:
    if not isinstance(value, dict) or "remap" not in value:
        raise ConfigError('missing field "remap"')
    table = value["remap"]
    if not isinstance(table, dict):
        raise ConfigError(f"expected a mapping for remap, got {table!r}")
    remap = {parse_key_press(_scalar_text(k, "remap key")): parse_actions(v) for k, v in table.items()}
    millis = value.get("timeout_millis")
    timeout = None if millis is None else timedelta(milliseconds=_unsigned(millis, "timeout_millis"))
    key_text = value.get("timeout_key")
    timeout_key = None if key_text is None else parse_key(_scalar_text(key_text, "timeout_key"))
    return Remap(remap, timeout, timeout_key)


def _launch(value: Any) -> Launch:
    argv = _single(value, "launch")
    if not isinstance(argv, list) or not all(isinstance(arg, str) for arg in argv):
        raise ConfigError(f"expected a list of strings for launch, got {argv!r}")
    return Launch(tuple(argv))


def _set_mode(value: Any) -> SetMode:
    mode = _single(value, "set_mode")
    if not isinstance(mode, str):
        raise ConfigError(f"expected a string for set_mode, got {mode!r}")
    return SetMode(mode)


def _set_mark(value: Any) -> SetMark:
    return SetMark(_boolean(_single(value, "set_mark"), "set_mark"))


def _with_mark(value: Any) -> WithMark:
    text = _single(value, "with_mark")
    if not isinstance(text, str):
        raise ConfigError(f"expected a key press string for with_mark, got {text!r}")
    return WithMark(parse_key_press(text))


def _escape_next_key(value: Any) -> EscapeNextKey:
    return EscapeNextKey(_boolean(_single(value, "escape_next_key"), "escape_next_key"))


def _sleep(value: Any) -> Sleep:
    return Sleep(_unsigned(_single(value, "sleep"), "sleep"))


_PARSERS: tuple[Callable[[Any], KeymapAction], ...] = (
    _key_press_and_release,
    _press,
    _repeat,
    _release,
    _remap,
    _launch,
    _set_mode,
    _set_mark,
    _with_mark,
    _escape_next_key,
    _sleep,
)


def parse_keymap_action(value: Any) -> KeymapAction:
    """Parse one action; the first form that fits wins."""
    for parser in _PARSERS:
        try:
            return parser(value)
        except ConfigError:
            continue
    raise ConfigError(f"data did not match any variant of KeymapAction: {value!r}")


def parse_actions(value: Any) -> list[KeymapAction]:
    """Parse null, a single action or a list of actions into a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return [parse_keymap_action(item) for item in value]
    return [parse_keymap_action(value)]