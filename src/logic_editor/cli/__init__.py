"""logic-editor CLI -- typer-based command interface.

Commands:
    logic-editor project types/components/all <catalog>   Project for the editor
    logic-editor config show                              Print effective settings
"""

from __future__ import annotations

import typer

from logic_editor.cli import project

app = typer.Typer(
    name="logic-editor",
    help="Project component catalogs into plain structures for the logic editor.",
    no_args_is_help=True,
)

app.add_typer(project.app, name="project")

config_app = typer.Typer(help="Inspect configuration.")
app.add_typer(config_app, name="config")


@app.callback()
def _setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at debug level"),
) -> None:
    from logic_editor.observability import ObservabilityConfig, setup_logging

    config = ObservabilityConfig()
    if verbose:
        config.log_level = "DEBUG"
    setup_logging(config)


@config_app.command("show")
def config_show() -> None:
    """Print the effective settings as YAML."""
    import yaml

    from logic_editor.cli._errors import load_config

    typer.echo(yaml.dump(load_config().to_dict(), default_flow_style=False, sort_keys=False))


def main() -> None:
    """Entry point for the logic-editor CLI."""
    app()
