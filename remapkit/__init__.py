"""Key remapping configuration, input event model, action dispatching and device filters."""

__version__ = "0.10.12"

__all__ = [
    "action",
    "application",
    "client",
    "config",
    "device",
    "device_filter",
    "dispatcher",
    "event",
    "key_press",
    "keymap",
    "keymap_action",
    "keys",
    "modmap",
    "modmap_action",
]