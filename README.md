# remapkit

remapkit reads key remapping configurations written in YAML or TOML and turns
them into plain Python data that an input remapper can act on. It also holds a
small model of input events, the actions a remapper emits, a dispatcher that
carries those actions out, and helpers for choosing input devices.

## Configuration files

A configuration is read as YAML, unless the file name ends in `.toml`, in which
case it is read as TOML.

```yaml
modmap:
  - name: Global
    remap:
      CapsLock: Ctrl_L
  - remap:
      Space:
        held: Shift_L
        alone: Space
        alone_timeout_millis: 500

keymap:
  - name: Emacs-like
    application:
      not: [Gnome-terminal, /^Minecraft/]
    remap:
      C-b: Left
      C-f: Right
      C-x:
        remap:
          s: C-s
        timeout_millis: 1000
      C-space: { set_mark: true }
      KEY_GRAVE:
        launch: ["/bin/sh", "-c", "date > /tmp/hotkey_test"]
```

The top-level keys are `modmap`, `keymap`, `default_mode` (default
`"default"`), `virtual_modifiers`, `keypress_delay_ms` (default 0),
`enable_wheel` (default true) and `shared`. Any other top-level key is
rejected; data meant only for YAML anchors and aliases belongs under `shared`,
whose contents are ignored.

### Keys

Key names are case-insensitive. Any scancode name works (`KEY_A`, `BTN_LEFT`),
the `KEY_` prefix may be left out (`a`, `Enter`, `CapsLock`), and these aliases
are understood: `Shift_L`/`Shift_R`, `Control_L`/`Control_R`, `Ctrl_L`/`Ctrl_R`,
`C_L`/`C_R`, `Alt_L`/`Alt_R`, `M_L`/`M_R`, `Super_L`/`Super_R`, `Win_L`/`Win_R`,
`ANY`, and names such as `XUpScroll`, `XRightCursor` or `XHiRes_DownScroll` for
relative (mouse) events treated as keys.

A key chord in a keymap is written `MOD-MOD-KEY`. The modifiers `Shift`,
`C`/`Ctrl`/`Control`, `M`/`Alt` and `Super`/`Win`/`Windows` match either the
left or the right key; any other key name used as a modifier matches exactly
that key.

### Modmap entries

Each entry of `remap` maps a key to one of:

- another key;
- a multi-purpose key with `held`, `alone` (each a key or a list of keys) and
  `alone_timeout_millis` (default 1000);
- a press/release key with `press`, `repeat` and `release` actions and
  `skip_key_event` (default false).

### Keymap actions

A key chord maps to `null`, one action or a list of actions. An action is a key
chord, or a single-key mapping: `press`, `repeat`, `release`, `launch`,
`set_mode`, `set_mark`, `with_mark`, `escape_next_key`, `sleep` (milliseconds),
or a nested `remap` with optional `timeout_millis` and `timeout_key`.

Modmaps and keymaps may be limited with `application`, `window` and `device`
(each with `only` or `not`, a string or a list) and with `mode`. Keymaps also
take `exact_match`.

### Application and window matchers

A matcher containing a dot is compared with the whole `class.name`; one without
a dot is compared with the part after the last dot; one written `/.../` is a
regular expression searched in the name, where `\/` stands for a slash.

## Using it from Python

```python
from remapkit.config import config_from_yaml, config_from_toml, load_configs
from remapkit.keys import parse_key
from remapkit.key_press import parse_key_press
from remapkit.application import parse_application_matcher

parse_key("ctrl_l")            # Key(KEY_LEFTCTRL)
parse_key_press("Shift-C-w")   # KeyPress(key=Key(KEY_W), modifiers=(Modifier.SHIFT, Modifier.CONTROL))

matcher = parse_application_matcher(r"/^Minecraft\*? \d+\.\d+(\.\d+)?$/")
matcher.matches("Minecraft 1.19.2")   # True

config = config_from_yaml("""
keymap:
  - remap:
      C-w: [Shift-C-w, C-x]
""")
config.keymap_table   # keymap entries grouped by their triggering key

config = load_configs(["base.yml", "extra.toml"])
```

When several files are loaded, the first one supplies the settings; the
`modmap`, `keymap` and `virtual_modifiers` of the later files are appended, and
`keymap_table` is built from all keymaps. `modify_time` holds the modification
time of the last file.

Invalid configurations raise `remapkit.keys.ConfigError` (a `ValueError`) with a
message naming the problem, for example `unknown key 'foo'` or
`Missing closing / in application name regex`.

### Modules

- `remapkit.keys` – `Key`, `parse_key`, `key_name`, `ConfigError`.
- `remapkit.key_press` – `KeyPress`, `Modifier`, `parse_key_press`, `parse_modifier`.
- `remapkit.application` – `ApplicationMatcher`, `OnlyOrNot`, `parse_only_or_not`.
- `remapkit.device_filter` – `DeviceFilter`, `parse_device_filter`.
- `remapkit.keymap_action`, `remapkit.modmap_action` – the action types and their parsers.
- `remapkit.keymap`, `remapkit.modmap` – `Keymap`, `Modmap`, `build_keymap_table`,
  `build_override_table`.
- `remapkit.config` – `Config`, `parse_config`, `config_from_yaml`,
  `config_from_toml`, `load_configs`.
- `remapkit.event` – `InputEvent`, `KeyEvent`, `RelativeEvent` and
  `event_from_input`, which sorts a raw event from a device into a key event, a
  relative event or another event.
- `remapkit.action` – `MouseMovementBatch`, `Command`, `Delay` and
  `random_delay` (60 to 79 ms).
- `remapkit.dispatcher` – `ActionDispatcher(device).on_action(action)` writes
  events to any object with an `emit(events)` method (a mouse movement batch in
  one call), sleeps for a `Delay`, and starts a `Command` in its own session
  with standard input and output discarded.
- `remapkit.device` – `InputDeviceInfo.matches` for device filters (full path,
  exact name, `eventN`, `ids:VENDOR:PRODUCT` in hexadecimal, or part of the
  name), `matches_any`, and `output_key_codes`, the key codes an output device
  declares.
- `remapkit.client` – the `Client` interface, `WMClient` and `build_client`.

## What it does not do

remapkit has no command to run and does not remap keys by itself. It does not
open, grab or watch devices under `/dev/input`, does not create a virtual
output device, and has no event handler that applies modmaps and keymaps to
incoming events. The only window-manager client is `NullClient`, which reports
itself unsupported, so `build_client()` never knows the focused application or
window.