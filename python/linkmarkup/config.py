# SPDX-License-Identifier: AGPL-3.0-only
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping
try:
    import tomllib
except ImportError:
    import tomli as tomllib

CONFIG_FILENAME = "linkmarkup.toml"
CONFIG_TABLE = "helpers"


@dataclass(frozen=True)
class HelperConfig:
    button_class: str = "button-to"
    boolean_attributes: tuple[str, ...] = ("disabled",)
    default_only_path: bool = True
    images_dir: str = "/images"
    default_image_extension: str = ".png"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HelperConfig":
        """Build a config from a parsed ``[helpers]`` table; unknown keys are ignored."""
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            values[f.name] = _coerce_field(f.name, data[f.name])
        return cls(**values)

    @classmethod
    def load(cls, path: Path | None = None) -> "HelperConfig":
        """Load configuration from linkmarkup.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}.")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e

        table = data.get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ValueError(f"[{CONFIG_TABLE}] in {path} must be a table")
        return cls.from_mapping(table)


def _coerce_field(name: str, value: Any) -> Any:
    if name == "boolean_attributes":
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"{name} must be a list of attribute names, got {value!r}")
        return tuple(value)
    if name == "default_only_path":
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be a boolean, got {value!r}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


DEFAULT_CONFIG = HelperConfig()
