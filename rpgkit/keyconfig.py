"""Key bindings loaded from a YAML configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import yaml

from .keys import Key, string_to_key

_FIELDS = {
    "exit": "exit",
    "move_up": "moveUp",
    "move_down": "moveDown",
    "move_left": "moveLeft",
    "move_right": "moveRight",
    "inventory": "inventory",
    "use": "use",
    "hit_yourself": "hitYourself",
    "torch": "torch",
}


def _key_from_value(name: str, value: Any) -> Key:
    if value is None or isinstance(value, (list, dict)):
        raise ValueError(f"key binding {name!r} must be a single key name")
    if isinstance(value, bool):
        value = "true" if value else "false"
    return string_to_key(str(value))


@dataclass(frozen=True)
class KeyMappingConfig:
    """The game's key bindings; unbound actions are Key.UNKNOWN."""

    exit: Key = Key.UNKNOWN
    move_up: Key = Key.UNKNOWN
    move_down: Key = Key.UNKNOWN
    move_left: Key = Key.UNKNOWN
    move_right: Key = Key.UNKNOWN
    inventory: Key = Key.UNKNOWN
    use: Key = Key.UNKNOWN
    hit_yourself: Key = Key.UNKNOWN
    torch: Key = Key.UNKNOWN

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> KeyMappingConfig:
        """Build the bindings from a mapping of action names to key names."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError("key mapping configuration must be a mapping")
        return cls(
            **{
                field: _key_from_value(name, data[name])
                for field, name in _FIELDS.items()
                if name in data
            }
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> KeyMappingConfig:
        """Load the bindings from a YAML file."""
        with open(path, encoding="utf-8") as stream:
            data = yaml.safe_load(stream)
        return cls.from_mapping(data)