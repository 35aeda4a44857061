"""CLI error handling."""

from __future__ import annotations

from typing import Any, NoReturn

import typer

from logic_editor.config import EditorConfig, get_config
from logic_editor.projectors.errors import SerializationError


def describe(obj: Any) -> str:
    """Short description of a model object for error messages."""
    name = getattr(obj, "name", None)
    kind = type(obj).__name__
    return f"{kind} {name!r}" if name is not None else kind


def handle_error(msg: str) -> NoReturn:
    """Print an error message and exit."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def load_config() -> EditorConfig:
    """Get the settings, exiting with a message when one is malformed."""
    try:
        return get_config()
    except ValueError as e:
        handle_error(str(e))


def handle_serialization_error(exc: SerializationError) -> NoReturn:
    if exc.component is not None:
        handle_error(f"{exc} (in {describe(exc.component)})")
    handle_error(str(exc))
