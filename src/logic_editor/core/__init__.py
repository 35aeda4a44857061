"""Model objects and the catalog loader."""

from logic_editor.core.catalog import Catalog, CatalogError, load_catalog, parse_catalog
from logic_editor.core.models import (
    ComponentDefinition,
    LabeledSocketDefinition,
    LabeledTypeDefinition,
    SocketDefinition,
    TypeDefinition,
    component_class,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "ComponentDefinition",
    "LabeledSocketDefinition",
    "LabeledTypeDefinition",
    "SocketDefinition",
    "TypeDefinition",
    "component_class",
    "load_catalog",
    "parse_catalog",
]
