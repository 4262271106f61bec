"""Input events as seen by the event handler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .keys import Key

__all__ = [
    "EventType",
    "InputEvent",
    "KeyValue",
    "KeyEvent",
    "RelativeEvent",
    "DeviceKeyEvent",
    "DeviceRelativeEvent",
    "OtherEvent",
    "OverrideTimeout",
    "event_from_input",
]


class EventType(IntEnum):
    SYNCHRONIZATION = 0
    KEY = 1
    RELATIVE = 2
    ABSOLUTE = 3
    MISC = 4
    SWITCH = 5
    LED = 0x11
    SOUND = 0x12
    REPEAT = 0x14
    FORCEFEEDBACK = 0x15
    POWER = 0x16
    FORCEFEEDBACKSTATUS = 0x17


@dataclass(frozen=True)
class InputEvent:
    """A raw event: type, code and value."""

    type: int
    code: int
    value: int


class KeyValue(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    value: KeyValue

    @classmethod
    def from_raw(cls, code: int, value: int) -> KeyEvent:
        """Build from a scancode and a raw value; values other than 0, 1, 2 are rejected."""
        return cls(Key(code), KeyValue(value))

    @property
    def code(self) -> int:
        return self.key.code


@dataclass(frozen=True)
class RelativeEvent:
    code: int
    value: int


@dataclass(frozen=True)
class DeviceKeyEvent:
    device: Any
    event: KeyEvent


@dataclass(frozen=True)
class DeviceRelativeEvent:
    device: Any
    event: RelativeEvent


@dataclass(frozen=True)
class OtherEvent:
    event: InputEvent


@dataclass(frozen=True)
class OverrideTimeout:
    """The timer of a nested override ran out."""


def event_from_input(device: Any, event: InputEvent) -> DeviceKeyEvent | DeviceRelativeEvent | OtherEvent:
    """Classify a raw event coming from ``device``."""
    if event.type == EventType.KEY:
        return DeviceKeyEvent(device, KeyEvent.from_raw(event.code, event.value))
    if event.type == EventType.RELATIVE:
        return DeviceRelativeEvent(device, RelativeEvent(event.code, event.value))
    return OtherEvent(event)