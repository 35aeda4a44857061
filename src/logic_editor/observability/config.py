"""Logging configuration, env-var driven.

All settings have safe defaults. Zero config required.

    Formatter: LOGIC_EDITOR_LOG_FORMATTER=structlog (default) | stdlib
    Renderer:  LOGIC_EDITOR_LOG_FORMAT=json (default) | console
    Level:     LOGIC_EDITOR_LOG_LEVEL=WARNING (default)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class ObservabilityConfig:
    """Logging configuration, env-var driven."""

    log_formatter: str = field(
        default_factory=lambda: os.environ.get("LOGIC_EDITOR_LOG_FORMATTER", "structlog")
    )  # "structlog" | "stdlib"

    log_level: str = field(
        default_factory=lambda: os.environ.get("LOGIC_EDITOR_LOG_LEVEL", "WARNING")
    )

    log_format: str = field(
        default_factory=lambda: os.environ.get("LOGIC_EDITOR_LOG_FORMAT", "json")
    )  # "json" | "console"
