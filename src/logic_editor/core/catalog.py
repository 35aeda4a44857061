"""Catalog loader -- read a YAML or JSON component catalog into model objects.

Catalog structure:
  - ``types``: list of {name, label?, combines?}. ``combines`` lists names
    of other catalog types.
  - ``components``: list of {name, identifier?, label?, menu_label?,
    menu_path?, controls?, inputs?, outputs?}. A component is editable
    when any of label/menu_label/menu_path is present.
  - sockets: {name, type, multiple?, label?}.

Names are not validated here; the projectors do that.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from logic_editor.core.models import (
    ComponentDefinition,
    LabeledSocketDefinition,
    LabeledTypeDefinition,
    SocketDefinition,
    TypeDefinition,
    component_class,
)


class CatalogError(ValueError):
    """The catalog document is malformed."""


@dataclass
class Catalog:
    types: list[TypeDefinition] = field(default_factory=list)
    components: list[ComponentDefinition] = field(default_factory=list)


def load_catalog(path: Path) -> Catalog:
    """Load a catalog file (``.json``, otherwise YAML).

    Raises:
        FileNotFoundError: If the file is missing.
        CatalogError: If the document does not describe a catalog.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as err:
        raise CatalogError(f"Could not parse catalog {path}: {err}") from err

    return parse_catalog(raw or {})


def parse_catalog(raw: dict[str, Any]) -> Catalog:
    """Build model objects from an already-decoded catalog document."""
    if not isinstance(raw, dict):
        raise CatalogError("Catalog must be a mapping with 'types' and/or 'components'")

    types = _parse_types(_as_list(raw, "types"))
    components = [_parse_component(c) for c in _as_list(raw, "components")]
    return Catalog(types=types, components=components)


def _as_list(raw: dict[str, Any], key: str) -> list[Any]:
    value = raw.get(key) or []
    if not isinstance(value, list):
        raise CatalogError(f"Catalog '{key}' must be a list")
    return value


def _require(entry: Any, key: str, what: str) -> Any:
    if not isinstance(entry, dict) or key not in entry:
        raise CatalogError(f"{what} entry is missing '{key}': {entry!r}")
    return entry[key]


def _parse_types(entries: list[Any]) -> list[TypeDefinition]:
    by_name: dict[str, TypeDefinition] = {}
    types: list[TypeDefinition] = []

    for entry in entries:
        name = str(_require(entry, "name", "Type"))
        if "label" in entry:
            value_type: TypeDefinition = LabeledTypeDefinition(name=name, label=str(entry["label"]))
        else:
            value_type = TypeDefinition(name=name)
        by_name[name] = value_type
        types.append(value_type)

    # Second pass: combinations may point forward
    for entry, value_type in zip(entries, types):
        combines = entry.get("combines") or []
        if not isinstance(combines, list):
            raise CatalogError(f"Type {value_type.name!r}: 'combines' must be a list")
        for other in combines:
            if other not in by_name:
                raise CatalogError(
                    f"Type {value_type.name!r} combines with unknown type {other!r}"
                )
            value_type.combines.append(by_name[other])

    return types


def _parse_socket(entry: Any) -> SocketDefinition:
    name = str(_require(entry, "name", "Socket"))
    socket_type = str(_require(entry, "type", "Socket"))
    multiple = bool(entry.get("multiple", False))
    if "label" in entry:
        return LabeledSocketDefinition(
            name=name, socket_type=socket_type, allows_multiple=multiple, label=str(entry["label"])
        )
    return SocketDefinition(name=name, socket_type=socket_type, allows_multiple=multiple)


def _parse_component(entry: Any) -> ComponentDefinition:
    name = str(_require(entry, "name", "Component"))
    editable = any(k in entry for k in ("label", "menu_label", "menu_path"))
    identified = entry.get("identifier") is not None
    has_controls = "controls" in entry

    kwargs: dict[str, Any] = {
        "name": name,
        "inputs": [_parse_socket(s) for s in entry.get("inputs") or []],
        "outputs": [_parse_socket(s) for s in entry.get("outputs") or []],
    }
    if editable:
        label = str(entry.get("label", name))
        kwargs["label"] = label
        kwargs["menu_label"] = str(entry.get("menu_label", label))
        kwargs["menu_path"] = entry.get("menu_path")
    if identified:
        kwargs["identifier"] = str(entry["identifier"])
    if has_controls:
        kwargs["controls"] = [str(c) for c in entry.get("controls") or []]

    cls = component_class(editable=editable, identified=identified, controls=has_controls)
    return cls(**kwargs)
