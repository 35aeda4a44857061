"""Logging for logic-editor.

    setup_logging(config)      Wire the configured formatter to the root logger
    get_logger(name)           Get a structured logger
"""

from logic_editor.observability.config import ObservabilityConfig
from logic_editor.observability.logging import (
    get_logger,
    reset_logging,
    setup_logging,
)

__all__ = [
    "ObservabilityConfig",
    "get_logger",
    "reset_logging",
    "setup_logging",
]
