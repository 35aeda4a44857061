"""Localization lookups for projections.

Any object with ``get_localized_string(key) -> str | None`` can be handed to
the projectors. This module ships the common ones:

- MappingLocalization: an in-memory dict
- CatalogLocalization: a flat YAML or JSON file of key -> string
- ChainedLocalization: first provider with an answer wins
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

import yaml

if TYPE_CHECKING:
    from logic_editor.projectors.base import Localization


def localize(localization: Localization | None, text: str | None) -> str | None:
    """Translate text, keeping it unchanged when no translation resolves."""
    if localization is None or not text:
        return text
    return localization.get_localized_string(text) or text


class MappingLocalization:
    """Looks keys up in a mapping. Empty strings count as missing."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings: dict[str, str] = dict(strings or {})

    def get_localized_string(self, key: str) -> str | None:
        return self._strings.get(key) or None

    def __len__(self) -> int:
        return len(self._strings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._strings)} strings)"


class CatalogLocalization(MappingLocalization):
    """Strings loaded from a translation file.

    The file holds one flat mapping. Keys are source strings or menu path
    prefixes (``"Math/"``, ``"Math/Basic/"``); values are translations.
    """

    def __init__(self, strings: Mapping[str, str] | None = None, *, locale: str | None = None) -> None:
        super().__init__(strings)
        self.locale = locale

    @classmethod
    def from_file(cls, path: Path, locale: str | None = None) -> CatalogLocalization:
        """Load a ``.yaml``/``.yml`` or ``.json`` translation file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a flat string mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Localization file not found: {path}")

        text = path.read_text(encoding="utf-8")
        try:
            raw: Any = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as err:
            raise ValueError(f"Could not parse localization file {path}: {err}") from err

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(f"Localization file {path} must contain a mapping")

        strings: dict[str, str] = {}
        for key, value in raw.items():
            if isinstance(value, (dict, list)):
                raise ValueError(
                    f"Localization file {path}: value for {key!r} must be a string"
                )
            if value is None:
                continue
            strings[str(key)] = str(value)

        return cls(strings, locale=locale or path.stem)


class ChainedLocalization:
    """Asks each provider in turn; the first non-empty answer wins."""

    def __init__(self, *providers: Localization) -> None:
        self.providers = list(providers)

    def get_localized_string(self, key: str) -> str | None:
        for provider in self.providers:
            value = provider.get_localized_string(key)
            if value:
                return value
        return None
