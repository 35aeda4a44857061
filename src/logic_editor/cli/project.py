"""CLI commands for projecting a component catalog for the editor."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import typer

from logic_editor.cli._errors import handle_error, handle_serialization_error, load_config
from logic_editor.config import EditorConfig
from logic_editor.core.catalog import Catalog, CatalogError, load_catalog
from logic_editor.projectors import registry
from logic_editor.projectors.errors import SerializationError

app = typer.Typer(help="Project a component catalog into editor structures.")


def _load(catalog_path: Path) -> Catalog:
    try:
        return load_catalog(catalog_path)
    except (FileNotFoundError, CatalogError) as e:
        handle_error(str(e))


def _load_localization(locale: Path | None, config: EditorConfig) -> Any:
    """Translation file from --locale, else from config, else none."""
    from logic_editor.localization import CatalogLocalization

    path = locale or (Path(config.locale_path) if config.locale_path else None)
    if path is None:
        return None
    try:
        return CatalogLocalization.from_file(path)
    except (FileNotFoundError, ValueError) as e:
        handle_error(str(e))


def _build_target(fmt: str | None, kind: str, config: EditorConfig) -> Callable[[dict], Any]:
    name = fmt or config.output_format
    kwargs: dict[str, Any] = {}
    if name == "json":
        kwargs["indent"] = config.json_indent
    elif name == "document":
        kwargs["kind"] = kind
    try:
        return registry.get_target(name, **kwargs)
    except KeyError as e:
        handle_error(str(e.args[0]))


def _encode(result: Any, config: EditorConfig) -> str:
    """Targets that return structures are written as JSON."""
    if isinstance(result, str):
        return result
    return registry.get_target("json", indent=config.json_indent)(result)


def _write_output(result: str, output: Path | None, label: str) -> None:
    """Write string result to file or stdout."""
    if output:
        output.write_text(result, encoding="utf-8")
        typer.echo(f"Wrote {label} to {output}")
    else:
        typer.echo(result)


@app.command()
def types(
    catalog: Path = typer.Argument(..., help="Catalog file (YAML or JSON)"),
    fmt: str = typer.Option(None, "--format", "-f", help="Target: json, yaml, document"),
    locale: Path = typer.Option(None, "--locale", "-l", help="Translation file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Project the catalog's value types."""
    from logic_editor.projectors.types import project_types

    config = load_config()
    loaded = _load(catalog)
    localization = _load_localization(locale, config)
    target = _build_target(fmt, "types", config)

    try:
        result = project_types(loaded.types, serializer=target, localization=localization)
    except SerializationError as e:
        handle_serialization_error(e)
    _write_output(_encode(result, config), output, "types")


@app.command()
def components(
    catalog: Path = typer.Argument(..., help="Catalog file (YAML or JSON)"),
    fmt: str = typer.Option(None, "--format", "-f", help="Target: json, yaml, document"),
    locale: Path = typer.Option(None, "--locale", "-l", help="Translation file"),
    strict: bool | None = typer.Option(
        None, "--strict/--no-strict", help="Fail on duplicate component names"
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Project the catalog's components."""
    from logic_editor.projectors.components import project_components, reject_duplicates

    config = load_config()
    loaded = _load(catalog)
    localization = _load_localization(locale, config)
    target = _build_target(fmt, "components", config)
    strict_mode = config.strict_duplicates if strict is None else strict

    try:
        result = project_components(
            loaded.components,
            serializer=target,
            localization=localization,
            on_duplicate=reject_duplicates if strict_mode else None,
        )
    except SerializationError as e:
        handle_serialization_error(e)
    _write_output(_encode(result, config), output, "components")


@app.command(name="all")
def all_cmd(
    catalog: Path = typer.Argument(..., help="Catalog file (YAML or JSON)"),
    fmt: str = typer.Option(None, "--format", "-f", help="Target: json, yaml, document"),
    locale: Path = typer.Option(None, "--locale", "-l", help="Translation file"),
    strict: bool | None = typer.Option(
        None, "--strict/--no-strict", help="Fail on duplicate component names"
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Project types and components into one document."""
    from logic_editor.projectors.components import project_components, reject_duplicates
    from logic_editor.projectors.types import project_types

    config = load_config()
    loaded = _load(catalog)
    localization = _load_localization(locale, config)
    target = _build_target(fmt, "catalog", config)
    strict_mode = config.strict_duplicates if strict is None else strict

    try:
        combined = {
            "types": project_types(loaded.types, localization=localization),
            "components": project_components(
                loaded.components,
                localization=localization,
                on_duplicate=reject_duplicates if strict_mode else None,
            ),
        }
    except SerializationError as e:
        handle_serialization_error(e)
    _write_output(_encode(target(combined), config), output, "catalog")
