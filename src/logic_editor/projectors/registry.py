"""Target registry -- look up final transforms by name."""

from __future__ import annotations

from typing import Any, Callable

_targets: dict[str, type] = {}


def reset() -> None:
    """Clear the registry. Use in test fixtures for isolation."""
    _targets.clear()


def register_target(name: str, cls: type) -> None:
    _targets[name] = cls


def get_target(name: str, **kwargs: Any) -> Callable[[dict[str, Any]], Any]:
    if name not in _targets:
        raise KeyError(f"Unknown projection target: {name!r}. Available: {list(_targets)}")
    return _targets[name](**kwargs)


def available_targets() -> list[str]:
    return list(_targets)


def register_builtin_targets() -> None:
    """(Re-)register the shipped targets under their default names."""
    from logic_editor.projectors.targets import (
        EditorDocumentTarget,
        JSONTarget,
        YAMLTarget,
    )

    register_target("json", JSONTarget)
    register_target("yaml", YAMLTarget)
    register_target("document", EditorDocumentTarget)
