"""The whole remapping configuration, read from YAML or TOML files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .keymap import Keymap, KeymapEntry, build_keymap_table, parse_keymap
from .keymap_action import _scalar_text
from .keys import ConfigError, Key, parse_key
from .modmap import Modmap, parse_modmap

__all__ = [
    "Config",
    "parse_config",
    "config_from_yaml",
    "config_from_toml",
    "load_configs",
]

DEFAULT_MODE = "default"

# "shared" holds data for YAML anchors and aliases only; it is accepted and ignored.
_FIELDS = {
    "modmap",
    "keymap",
    "default_mode",
    "virtual_modifiers",
    "keypress_delay_ms",
    "shared",
    "enable_wheel",
}


@dataclass
class Config:
    modmap: list[Modmap] = field(default_factory=list)
    keymap: list[Keymap] = field(default_factory=list)
    default_mode: str = DEFAULT_MODE
    virtual_modifiers: list[Key] = field(default_factory=list)
    keypress_delay_ms: int = 0
    enable_wheel: bool = True
    # Modification time of the last loaded file, for watching the config.
    modify_time: float | None = None
    # Keymap entries grouped by their triggering key.
    keymap_table: dict[Key, list[KeymapEntry]] = field(default_factory=dict)


def _list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"expected a list for {what}, got {value!r}")
    return value


def _virtual_modifiers(value: Any) -> list[Key]:
    return [parse_key(_scalar_text(item, "virtual_modifiers")) for item in _list(value, "virtual_modifiers")]


def parse_config(data: Any) -> Config:
    """Build a configuration from already decoded data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping at the top of the config, got {data!r}")
    unknown = set(data) - _FIELDS
    if unknown:
        raise ConfigError(f"unknown field(s) in config: {', '.join(sorted(map(str, unknown)))}")

    default_mode = data.get("default_mode", DEFAULT_MODE)
    if not isinstance(default_mode, str):
        raise ConfigError(f"expected a string for default_mode, got {default_mode!r}")
    delay = data.get("keypress_delay_ms", 0)
    if not isinstance(delay, int) or isinstance(delay, bool) or delay < 0:
        raise ConfigError(f"expected a non-negative integer for keypress_delay_ms, got {delay!r}")
    enable_wheel = data.get("enable_wheel", True)
    if not isinstance(enable_wheel, bool):
        raise ConfigError(f"expected a boolean for enable_wheel, got {enable_wheel!r}")

    keymaps = [parse_keymap(item) for item in _list(data.get("keymap"), "keymap")]
    return Config(
        modmap=[parse_modmap(item) for item in _list(data.get("modmap"), "modmap")],
        keymap=keymaps,
        default_mode=default_mode,
        virtual_modifiers=_virtual_modifiers(data.get("virtual_modifiers")),
        keypress_delay_ms=delay,
        enable_wheel=enable_wheel,
        keymap_table=build_keymap_table(keymaps),
    )


def config_from_yaml(text: str) -> Config:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc
    return parse_config(data)


def config_from_toml(text: str) -> Config:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}") from exc
    return parse_config(data)


def _load_one(path: Path) -> Config:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".toml":
        return config_from_toml(text)
    return config_from_yaml(text)


def load_configs(filenames: list[str | Path]) -> Config:
    """Load and merge config files.

    Settings come from the first file; modmaps, keymaps and virtual modifiers of
    later files are appended.
    """
    paths = [Path(name) for name in filenames]
    if not paths:
        raise ConfigError("no config file given")
    config = _load_one(paths[0])
    for path in paths[1:]:
        extra = _load_one(path)
        config.modmap.extend(extra.modmap)
        config.keymap.extend(extra.keymap)
        config.virtual_modifiers.extend(extra.virtual_modifiers)

    try:
        config.modify_time = paths[-1].stat().st_mtime
    except OSError:
        config.modify_time = None
    config.keymap_table = build_keymap_table(config.keymap)
    return config