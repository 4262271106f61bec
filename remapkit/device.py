"""Input device selection and the key set of the output device."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .keys import Key, key_name

__all__ = [
    "MOUSE_BUTTONS",
    "SEPARATOR",
    "InputDeviceInfo",
    "matches_any",
    "output_key_codes",
]

MOUSE_BUTTONS = frozenset(
    {
        "BTN_MISC",
        "BTN_0",
        "BTN_1",
        "BTN_2",
        "BTN_3",
        "BTN_4",
        "BTN_5",
        "BTN_6",
        "BTN_7",
        "BTN_8",
        "BTN_9",
        "BTN_MOUSE",
        "BTN_LEFT",
        "BTN_RIGHT",
        "BTN_MIDDLE",
        "BTN_SIDE",
        "BTN_EXTRA",
        "BTN_FORWARD",
        "BTN_BACK",
        "BTN_TASK",
    }
)

SEPARATOR = "-" * 78

_HEX = re.compile(r"\+?[0-9A-Fa-f]+")


def _parse_id(text: str) -> int:
    """Parse a hexadecimal 16-bit id, with any ``0x`` prefixes; 0 when invalid."""
    while text.startswith("0x"):
        text = text[2:]
    if not _HEX.fullmatch(text):
        return 0
    value = int(text, 16)
    return value if value <= 0xFFFF else 0


@dataclass(frozen=True)
class InputDeviceInfo:
    """What a device filter is matched against."""

    name: str
    path: Path
    product: int
    vendor: int

    def matches(self, filter: str) -> bool:
        """Whether ``filter`` selects this device.

        A filter matches the full path, the exact name, ``eventN`` for the
        device file name, ``ids:VENDOR:PRODUCT`` in hexadecimal (0 meaning any),
        or any part of the name.
        """
        path = Path(self.path)
        if str(path) == filter or self.name == filter:
            return True
        if filter.startswith("event") and path.name == filter:
            return True
        if filter.startswith("ids:"):
            parts = filter.split(":")
            if len(parts) == 3:
                vendor, product = _parse_id(parts[1]), _parse_id(parts[2])
                if vendor == 0 and product == 0:
                    pass
                elif product == 0:
                    if vendor == self.vendor:
                        return True
                elif vendor == 0:
                    if product == self.product:
                        return True
                elif vendor == self.vendor and product == self.product:
                    return True
        return filter in self.name


def matches_any(info: InputDeviceInfo, filters: Iterable[str], own_name: str) -> bool:
    """Whether any filter selects the device; our own output device never matches."""
    if info.name == own_name:
        return False
    return any(info.matches(f) for f in filters)


def output_key_codes() -> list[int]:
    """Key codes the output device declares: every ``KEY_*`` and mouse button."""
    end = Key.from_name("BTN_TRIGGER_HAPPY40").code
    codes = []
    for code in range(Key.from_name("KEY_RESERVED").code, end):
        name = key_name(code)
        if name.startswith("KEY_") or name in MOUSE_BUTTONS:
            codes.append(code)
    return codes