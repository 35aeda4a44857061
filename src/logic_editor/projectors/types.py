"""Type projector: value types -> {type name: descriptor}."""

from __future__ import annotations

import re
from typing import Any, Iterable

from logic_editor.localization import localize
from logic_editor.observability.logging import get_logger
from logic_editor.projectors.base import Editable, Localization, Serializer, ValueType
from logic_editor.projectors.errors import SerializationError
from logic_editor.projectors.keys import (
    TYPE_COMBINATIONS_KEY,
    TYPE_LABEL_KEY,
    TYPE_NAME_KEY,
)

TYPE_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def project_types(
    types: Iterable[Any],
    serializer: Serializer | None = None,
    localization: Localization | None = None,
) -> Any:
    """Project value types into plain descriptors for the editor.

    Args:
        types: Objects to project. Anything that is not a ValueType is skipped.
        serializer: Optional final transform. When given, it receives the
            assembled mapping and its return value is returned instead.
        localization: Optional lookup used to translate type labels.

    Returns:
        ``{name: {"name", "label", "combines"?}}`` in input order, or the
        serializer's result.

    Raises:
        SerializationError: A type name is not an identifier. The whole
            batch is abandoned; ``component`` is the offending type.
    """
    projected: dict[str, dict[str, Any]] = {}

    for value_type in types:
        if not isinstance(value_type, ValueType):
            continue

        name = value_type.name
        if not isinstance(name, str) or not TYPE_NAME_PATTERN.fullmatch(name):
            raise SerializationError(
                f"Type name {name} must match pattern {TYPE_NAME_PATTERN.pattern}",
                component=value_type,
            )

        label = value_type.label if isinstance(value_type, Editable) else name
        descriptor: dict[str, Any] = {
            TYPE_NAME_KEY: name,
            TYPE_LABEL_KEY: localize(localization, label),
        }

        combined = list(value_type.get_combined_types() or ())
        if combined:
            descriptor[TYPE_COMBINATIONS_KEY] = [c.name for c in combined]

        if name in projected:
            get_logger(__name__).warning("types.duplicate", name=name)
        # Whole descriptor is replaced: last write wins.
        projected[name] = descriptor

    get_logger(__name__).debug("types.projected", count=len(projected))

    if serializer is not None:
        return serializer(projected)
    return projected
