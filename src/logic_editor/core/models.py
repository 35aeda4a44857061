"""Plain model objects implementing the projector capabilities.

Each optional capability is its own mixin, so an object only exposes the
attributes it really has and the projector's isinstance checks stay exact:

    TypeDefinition            ValueType
    LabeledTypeDefinition     ValueType + Editable
    SocketDefinition          Socket
    LabeledSocketDefinition   Socket + Editable
    ComponentDefinition       Component
      + MenuMixin             EditableComponent
      + IdentifierMixin       IdentifiedComponent
      + ControlsMixin         ControlsComponent

component_class() builds the combination a catalog entry needs.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field


@dataclass(kw_only=True)
class TypeDefinition:
    """A value type, optionally combinable with others."""

    name: str
    combines: list[TypeDefinition] = field(default_factory=list)

    def get_combined_types(self) -> list[TypeDefinition]:
        return list(self.combines)


@dataclass(kw_only=True)
class LabeledTypeDefinition(TypeDefinition):
    label: str


@dataclass(kw_only=True)
class SocketDefinition:
    name: str
    socket_type: str
    allows_multiple: bool = False


@dataclass(kw_only=True)
class LabeledSocketDefinition(SocketDefinition):
    label: str


@dataclass(kw_only=True)
class ComponentDefinition:
    """A component with its sockets."""

    name: str
    inputs: list[SocketDefinition] = field(default_factory=list)
    outputs: list[SocketDefinition] = field(default_factory=list)

    def get_input_sockets(self) -> list[SocketDefinition]:
        return list(self.inputs)

    def get_output_sockets(self) -> list[SocketDefinition]:
        return list(self.outputs)


@dataclass(kw_only=True)
class MenuMixin:
    label: str
    menu_label: str
    menu_path: str | None = None


@dataclass(kw_only=True)
class IdentifierMixin:
    identifier: str


@dataclass(kw_only=True)
class ControlsMixin:
    controls: list[str] = field(default_factory=list)

    def get_control_type_names(self) -> list[str]:
        return list(self.controls)


@functools.lru_cache(maxsize=None)
def component_class(
    editable: bool = False,
    identified: bool = False,
    controls: bool = False,
) -> type[ComponentDefinition]:
    """Return the ComponentDefinition subclass with the requested capabilities."""
    bases: list[type] = []
    parts: list[str] = []
    if editable:
        bases.append(MenuMixin)
        parts.append("Editable")
    if identified:
        bases.append(IdentifierMixin)
        parts.append("Identified")
    if controls:
        bases.append(ControlsMixin)
        parts.append("Controls")
    if not bases:
        return ComponentDefinition

    cls = type(f"{''.join(parts)}ComponentDefinition", (*bases, ComponentDefinition), {})
    return dataclass(kw_only=True)(cls)
