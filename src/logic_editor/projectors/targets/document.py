"""EditorDocumentTarget -- wrap a projection in the editor's document envelope.

Output shape:
    kind: "types" | "components" | ...
    version: <int>
    count: <number of entries>
    items: <the projection>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EditorDocumentTarget:
    """Final transform producing a self-describing editor document."""

    kind: str = "components"
    version: int = 1

    def __call__(self, projection: dict[str, Any]) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "version": self.version,
            "count": len(projection),
            "items": projection,
        }
