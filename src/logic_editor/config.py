"""Projection settings: YAML config + env var overrides.

Priority: env var > YAML file > default.
Env vars use LOGIC_EDITOR_{FIELD} convention (e.g. LOGIC_EDITOR_STRICT_DUPLICATES=on).
YAML file default: ~/.logic_editor/config.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no"}
_DEFAULT_PATH = Path("~/.logic_editor/config.yaml").expanduser()


@dataclass
class EditorConfig:
    # Target used when the CLI gets no --format
    output_format: str = "json"
    # Reject duplicate component names instead of overwriting
    strict_duplicates: bool = False
    # Translation file applied when the CLI gets no --locale
    locale_path: str | None = None
    json_indent: int = 2

    @classmethod
    def load(cls, path: Path | None = None) -> EditorConfig:
        """Load settings from YAML file, then override with env vars."""
        file_path = path or _DEFAULT_PATH
        file_values: dict[str, Any] = {}

        if file_path.exists():
            raw = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(raw, dict):
                file_values = raw

        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            name = f.name
            env_key = f"LOGIC_EDITOR_{name.upper()}"

            if env_key in os.environ:
                value = _coerce(name, os.environ[env_key], f.default)
            elif name in file_values:
                value = _coerce(name, file_values[name], f.default)
            else:
                continue
            kwargs[name] = value

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Convert a raw file/env value to the type of the field's default."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        text = str(value).lower()
        if text in _TRUTHY:
            return True
        if text in _FALSY:
            return False
        raise ValueError(f"Setting {name}={value!r} is not a boolean")
    if isinstance(default, int):
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise ValueError(f"Setting {name}={value!r} is not a valid integer") from err
    if value is None or value == "":
        return None if default is None else default
    return str(value)


# Singleton
_config: EditorConfig | None = None


def get_config(path: Path | None = None) -> EditorConfig:
    """Get the singleton EditorConfig instance."""
    global _config
    if _config is None:
        _config = EditorConfig.load(path)
    return _config


def reset_config() -> None:
    """Reset for testing."""
    global _config
    _config = None
