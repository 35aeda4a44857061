"""Component projector: components -> {component name: descriptor}.

Several objects may project to the same name. Entries for one name are
merged field by field:

- ``name``, ``label``, ``mlabel``, ``menu``, ``controls``: last write wins
- ``identifiers``: merged, one entry per identifier (last write wins per identifier)
- ``inputs`` / ``outputs``: merged, one entry per socket name (last write wins per socket)

An un-identified component reusing a name, or an identified one reusing a
name and identifier, is a duplicate. Duplicates are logged and reported to
the optional ``on_duplicate`` hook before they overwrite the earlier entry.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from logic_editor.localization import localize
from logic_editor.observability.logging import get_logger
from logic_editor.projectors.base import (
    Component,
    ControlsComponent,
    Editable,
    EditableComponent,
    IdentifiedComponent,
    Localization,
    Serializer,
    Socket,
)
from logic_editor.projectors.errors import SerializationError
from logic_editor.projectors.keys import (
    COMPONENT_CONTROLS_KEY,
    COMPONENT_IDENTIFIERS_KEY,
    COMPONENT_LABEL_KEY,
    COMPONENT_MENU_KEY,
    COMPONENT_MENU_LABEL_KEY,
    COMPONENT_NAME_KEY,
    COMPONENT_NAME_SEPARATOR,
    INPUTS_KEY,
    MENU_PATH_SEPARATOR,
    OUTPUTS_KEY,
    SOCKET_LABEL_KEY,
    SOCKET_MULTIPLE_KEY,
    SOCKET_TYPE_KEY,
)

# (name, previous descriptor, component) -> None. May raise to reject.
DuplicateHook = Callable[[str, dict[str, Any], Any], None]


def reject_duplicates(name: str, previous: dict[str, Any], component: Any) -> None:
    """Duplicate hook for strict mode: refuse any duplicate component."""
    raise SerializationError(f"Duplicate component name {name}", component=component)


def project_components(
    components: Iterable[Any],
    serializer: Serializer | None = None,
    localization: Localization | None = None,
    on_duplicate: DuplicateHook | None = None,
) -> Any:
    """Project components into plain descriptors for the editor.

    Args:
        components: Objects to project. Anything that is not a Component
            is skipped.
        serializer: Optional final transform applied to the assembled mapping.
        localization: Optional lookup for component labels, menu labels
            and menu path segments. Socket labels are never translated.
        on_duplicate: Optional hook called for duplicate components.

    Returns:
        ``{name: descriptor}`` in input order, or the serializer's result.

    Raises:
        SerializationError: A component name contains ``:`` (or the
            duplicate hook rejected one). ``component`` is the component
            being projected; the whole batch is abandoned.
    """
    projected: dict[str, dict[str, Any]] = {}

    for component in components:
        if not isinstance(component, Component):
            continue
        try:
            _project_component(component, projected, localization, on_duplicate)
        except SerializationError as exc:
            exc.component = component
            raise

    get_logger(__name__).debug("components.projected", count=len(projected))

    if serializer is not None:
        return serializer(projected)
    return projected


def _project_component(
    component: Any,
    projected: dict[str, dict[str, Any]],
    localization: Localization | None,
    on_duplicate: DuplicateHook | None,
) -> None:
    name = component.name
    if COMPONENT_NAME_SEPARATOR in name:
        raise SerializationError(
            f"Invalid component name {name} including colon ({COMPONENT_NAME_SEPARATOR})"
        )

    identifier = component.identifier if isinstance(component, IdentifiedComponent) else None

    label = name
    menu_label = name
    menu: list[str] | None = None

    if isinstance(component, EditableComponent):
        label = component.label
        menu_label = component.menu_label
        if component.menu_path:
            menu = _menu_segments(component.menu_path, localization)

    label = localize(localization, label)
    menu_label = localize(localization, menu_label)

    previous = projected.get(name)
    if previous is not None and _is_duplicate(previous, identifier):
        get_logger(__name__).warning(
            "components.duplicate", name=name, identifier=identifier
        )
        if on_duplicate is not None:
            on_duplicate(name, dict(previous), component)

    entry = projected.setdefault(name, {})
    entry[COMPONENT_NAME_KEY] = name

    if identifier:
        entry.setdefault(COMPONENT_IDENTIFIERS_KEY, {})[identifier] = {
            COMPONENT_LABEL_KEY: label,
            COMPONENT_MENU_KEY: menu,
            COMPONENT_MENU_LABEL_KEY: menu_label,
        }
    else:
        entry[COMPONENT_LABEL_KEY] = label
        entry[COMPONENT_MENU_LABEL_KEY] = menu_label
        entry[COMPONENT_MENU_KEY] = menu

    if isinstance(component, ControlsComponent):
        entry[COMPONENT_CONTROLS_KEY] = list(component.get_control_type_names())

    _project_sockets(entry, OUTPUTS_KEY, component.get_output_sockets())
    _project_sockets(entry, INPUTS_KEY, component.get_input_sockets())


def _is_duplicate(previous: dict[str, Any], identifier: str | None) -> bool:
    if not identifier:
        return True
    return identifier in previous.get(COMPONENT_IDENTIFIERS_KEY, {})


def _menu_segments(menu_path: str, localization: Localization | None) -> list[str]:
    """Split a menu path, translating each segment by its cumulative prefix.

    ``"Math/Basic"`` looks up ``"Math/"`` then ``"Math/Basic/"``.
    """
    segments: list[str] = []
    prefix = ""
    for segment in menu_path.split(MENU_PATH_SEPARATOR):
        if localization is not None:
            prefix += segment + MENU_PATH_SEPARATOR
            segment = localization.get_localized_string(prefix) or segment
        segments.append(segment)
    return segments


def _project_sockets(entry: dict[str, Any], direction: str, sockets: Iterable[Any]) -> None:
    for socket in sockets or ():
        if not isinstance(socket, Socket):
            continue
        name = socket.name
        entry.setdefault(direction, {})[name] = {
            SOCKET_TYPE_KEY: socket.socket_type,
            SOCKET_MULTIPLE_KEY: bool(socket.allows_multiple),
            SOCKET_LABEL_KEY: socket.label if isinstance(socket, Editable) else name,
        }
