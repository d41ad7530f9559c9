"""Configuration file handling."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

CONFIG_FILE = "config.json"
APP_FOLDER = "pk_tray"
COMMENT = "Warning: If you change this file, you need to restart the program!"


def _json_key(attribute: str) -> str:
    """Return the key an attribute is stored under in the config file."""
    if attribute == "comment":
        return "__comment"
    head, *rest = attribute.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass
class Config:
    """Connection settings for the API."""

    comment: str = COMMENT
    hostname: str = "api.pluralkit.me"
    base_path: str = "/v2"
    auth_token: str = field(default_factory=str)

    @classmethod
    def from_json(cls, data: Any) -> Config:
        """Build a config from a JSON object; missing keys keep their defaults."""
        if not isinstance(data, Mapping):
            raise ValueError("configuration must be a JSON object")
        values = {}
        for attribute in (f.name for f in fields(cls)):
            key = _json_key(attribute)
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str):
                raise ValueError(f"configuration key {key!r} must be a string")
            values[attribute] = value
        return cls(**values)

    def to_json(self) -> dict[str, str]:
        """Return the config as a JSON-ready dictionary."""
        return {_json_key(f.name): getattr(self, f.name) for f in fields(self)}


def data_path() -> Path | None:
    """Return the folder the application keeps its data in, if one is known."""
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata) / APP_FOLDER
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_FOLDER
    try:
        return Path.home() / ".config" / APP_FOLDER
    except RuntimeError:
        return None


def load_config(folder: Path | str | None) -> Config:
    """Read the config from ``folder``, writing the defaults there if absent."""
    config = Config()
    if folder is None:
        return config
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)
    config_file = folder / CONFIG_FILE
    if config_file.exists():
        with config_file.open(encoding="utf-8") as stream:
            return Config.from_json(json.load(stream))
    with config_file.open("w", encoding="utf-8") as stream:
        json.dump(config.to_json(), stream, indent=4, sort_keys=True)
    return config