"""Key presses with modifiers, as written in keymap entries (``C-x``)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .keys import Key, parse_key

__all__ = ["Modifier", "KeyPress", "parse_key_press", "parse_modifier"]


class Modifier(Enum):
    """A modifier that matches its left key, right key, or both."""

    SHIFT = "shift"
    CONTROL = "control"
    ALT = "alt"
    WINDOWS = "windows"


@dataclass(frozen=True)
class KeyPress:
    """A key together with the modifiers held with it.

    A modifier is either a :class:`Modifier` or a :class:`Key` matched exactly.
    """

    key: Key
    modifiers: tuple[Modifier | Key, ...] = ()


_MODIFIER_NAMES = {
    "SHIFT": Modifier.SHIFT,
    "C": Modifier.CONTROL,
    "CTRL": Modifier.CONTROL,
    "CONTROL": Modifier.CONTROL,
    "M": Modifier.ALT,
    "ALT": Modifier.ALT,
    "SUPER": Modifier.WINDOWS,
    "WIN": Modifier.WINDOWS,
    "WINDOWS": Modifier.WINDOWS,
}


def parse_modifier(text: str) -> Modifier | Key:
    """Parse a modifier name, falling back to an exact key."""
    upper = text.upper()
    modifier = _MODIFIER_NAMES.get(upper)
    return modifier if modifier is not None else parse_key(upper)


def parse_key_press(text: str) -> KeyPress:
    """Parse ``MOD-MOD-KEY`` notation."""
    *modifier_names, key_name = text.split("-")
    modifiers = tuple(parse_modifier(name) for name in modifier_names)
    return KeyPress(parse_key(key_name), modifiers)