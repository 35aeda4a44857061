"""logic-editor: plain projections of component models for the logic editor."""

from logic_editor.projectors import (
    SerializationError,
    SerializationException,
    project_components,
    project_types,
)

__version__ = "0.1.0"

__all__ = [
    "SerializationError",
    "SerializationException",
    "__version__",
    "project_components",
    "project_types",
]
