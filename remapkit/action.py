"""Actions produced by the event handler for the dispatcher."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .event import InputEvent, KeyEvent, RelativeEvent

__all__ = [
    "KeyEvent",
    "RelativeEvent",
    "InputEvent",
    "MouseMovementBatch",
    "Command",
    "Delay",
    "Action",
    "random_delay",
]


@dataclass(frozen=True)
class MouseMovementBatch:
    """Mouse movements to emit together, without synchronization in between."""

    events: tuple[RelativeEvent, ...]


@dataclass(frozen=True)
class Command:
    """A command line to run detached."""

    argv: tuple[str, ...]


@dataclass(frozen=True)
class Delay:
    """A pause, in seconds."""

    seconds: float


Action = KeyEvent | RelativeEvent | MouseMovementBatch | InputEvent | Command | Delay


def random_delay() -> Delay:
    """A delay of 60 to 79 milliseconds."""
    return Delay(random.randrange(60, 80) / 1000)