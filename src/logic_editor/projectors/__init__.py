"""Projectors -- turn live component models into plain editor structures.

Core operations:
- project_types: value types -> {type name: descriptor}
- project_components: components -> {component name: descriptor}

Both accept an optional final transform (see ``targets``) and an optional
localization lookup.
"""

from logic_editor.projectors.base import (
    Component,
    ControlsComponent,
    Editable,
    EditableComponent,
    IdentifiedComponent,
    Localization,
    Socket,
    ValueType,
)
from logic_editor.projectors.components import project_components, reject_duplicates
from logic_editor.projectors.errors import SerializationError, SerializationException
from logic_editor.projectors.registry import register_builtin_targets
from logic_editor.projectors.types import project_types

register_builtin_targets()

__all__ = [
    "Component",
    "ControlsComponent",
    "Editable",
    "EditableComponent",
    "IdentifiedComponent",
    "Localization",
    "SerializationError",
    "SerializationException",
    "Socket",
    "ValueType",
    "project_components",
    "project_types",
    "reject_duplicates",
]
