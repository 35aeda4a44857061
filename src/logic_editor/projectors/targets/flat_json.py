"""JSONTarget -- encode a projection as a JSON string."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class JSONTarget:
    """Final transform producing a JSON document.

    Pass an instance as ``serializer=`` to either projector.
    """

    indent: int | None = 2
    sort_keys: bool = False

    def __call__(self, projection: dict[str, Any]) -> str:
        return json.dumps(
            projection,
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=False,
        )
