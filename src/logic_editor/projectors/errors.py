"""Projection errors."""

from __future__ import annotations

from typing import Any


class SerializationError(Exception):
    """Raised when a model object cannot be projected.

    The offending object is kept on ``component`` so callers can point at
    it. Projectors re-tag the error with the component being handled when
    it propagates out of that component.
    """

    def __init__(self, message: str, component: Any = None) -> None:
        super().__init__(message)
        self.component = component

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


# Name used by editor integrations.
SerializationException = SerializationError
