"""Capability protocols consumed by the projectors.

A model object takes part in a projection only through the capabilities it
exposes. Each capability is a small runtime-checkable protocol:

ValueType: a named value kind that may combine with other kinds
Component: a node with output and input sockets
Socket: a typed connection point on a component
Editable: exposes its own human-facing label
EditableComponent: label plus menu label and menu path
IdentifiedComponent: carries a stable external identifier
ControlsComponent: declares the UI controls it needs
Localization: resolves a key to a translated string
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

# Final transform applied to an assembled projection.
Serializer = Callable[[dict[str, Any]], T]


@runtime_checkable
class ValueType(Protocol):
    """A named value kind carried by sockets."""

    name: str

    def get_combined_types(self) -> Iterable[ValueType] | None:
        """Types this one can be combined with, in display order."""
        ...


@runtime_checkable
class Socket(Protocol):
    """A directional connection point on a component."""

    name: str
    socket_type: str
    allows_multiple: bool


@runtime_checkable
class Component(Protocol):
    """A graph node definition."""

    name: str

    def get_output_sockets(self) -> Iterable[Any]:
        ...

    def get_input_sockets(self) -> Iterable[Any]:
        ...


@runtime_checkable
class Editable(Protocol):
    """Anything that supplies its own label instead of its name."""

    label: str


@runtime_checkable
class EditableComponent(Protocol):
    """A component placed in the editor's menu."""

    label: str
    menu_label: str
    menu_path: str | None


@runtime_checkable
class IdentifiedComponent(Protocol):
    """A component variant distinguished by a stable identifier."""

    identifier: str | None


@runtime_checkable
class ControlsComponent(Protocol):
    """A component that declares UI controls."""

    def get_control_type_names(self) -> Iterable[str]:
        ...


@runtime_checkable
class Localization(Protocol):
    """Translates human-facing strings by key."""

    def get_localized_string(self, key: str) -> str | None:
        """Return the translation for key, or None when there is none."""
        ...
