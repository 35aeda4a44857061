"""YAMLTarget -- encode a projection as a YAML string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml


@dataclass
class YAMLTarget:
    """Final transform producing a YAML document.

    Key order of the projection is kept.
    """

    default_flow_style: bool = False

    def __call__(self, projection: dict[str, Any]) -> str:
        return yaml.dump(
            projection,
            default_flow_style=self.default_flow_style,
            sort_keys=False,
            allow_unicode=True,
        )
