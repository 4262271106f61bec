"""Carrying out actions: emitting events and running commands."""

from __future__ import annotations

import logging
import subprocess
import threading
import time
from collections.abc import Sequence
from typing import Protocol

from .action import Action, Command, Delay, MouseMovementBatch
from .event import EventType, InputEvent, KeyEvent, RelativeEvent
from .keys import key_name

__all__ = ["OutputDevice", "ActionDispatcher"]

log = logging.getLogger(__name__)


class OutputDevice(Protocol):
    """A virtual device that events are written to."""

    def emit(self, events: Sequence[InputEvent]) -> None: ...


class ActionDispatcher:
    """Executes the actions produced by the event handler."""

    def __init__(self, device: OutputDevice) -> None:
        self.device = device

    def on_action(self, action: Action) -> None:
        match action:
            case KeyEvent():
                self._send_event(InputEvent(EventType.KEY, action.code, int(action.value)))
            case RelativeEvent():
                self._send_event(InputEvent(EventType.RELATIVE, action.code, action.value))
            case MouseMovementBatch():
                # Emitted together so that no synchronization separates the axes.
                self.device.emit(
                    [InputEvent(EventType.RELATIVE, event.code, event.value) for event in action.events]
                )
            case InputEvent():
                self._send_event(action)
            case Command():
                self._run_command(list(action.argv))
            case Delay():
                time.sleep(action.seconds)
            case _:
                raise TypeError(f"unsupported action: {action!r}")

    def _send_event(self, event: InputEvent) -> None:
        if event.type == EventType.KEY:
            log.debug("%s: %s", event.value, key_name(event.code))
        self.device.emit([event])

    def _run_command(self, argv: list[str]) -> None:
        log.debug("Running command: %r", argv)
        if not argv:
            log.error("Error running command: empty command")
            return
        try:
            process = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            log.error("Error running command: %r", exc)
            return
        log.debug("Process started: %r, pid %d", argv, process.pid)
        # Reap the child in the background so it never lingers as a zombie.
        threading.Thread(target=process.wait, daemon=True).start()