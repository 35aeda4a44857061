"""Projection targets -- final transforms for projector output."""

from logic_editor.projectors.targets.document import EditorDocumentTarget
from logic_editor.projectors.targets.flat_json import JSONTarget
from logic_editor.projectors.targets.flat_yaml import YAMLTarget

__all__ = [
    "EditorDocumentTarget",
    "JSONTarget",
    "YAMLTarget",
]
