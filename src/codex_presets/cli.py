"""CLI interface for codex-presets."""

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from codex_presets import __version__
from codex_presets.config import MODELS_FILE_ENV, describe_presets_source
from codex_presets.loader import load_presets
from codex_presets.presets import builtin_model_presets_owned, find_preset

app = typer.Typer(
    name="codex-presets",
    help="Inspect the model presets offered by Codex front ends.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"codex-presets {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log where presets are loaded from"),
    ] = False,
) -> None:
    """Codex presets: built-in and user-defined model configurations."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)


@app.command("list")
def list_presets(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print presets as a JSON array"),
    ] = False,
    builtin: Annotated[
        bool,
        typer.Option("--builtin", "-b", help="Ignore the user presets file"),
    ] = False,
) -> None:
    """List available model presets."""
    presets = builtin_model_presets_owned() if builtin else load_presets()

    if as_json:
        typer.echo(json.dumps([p.model_dump(mode="json") for p in presets], indent=2))
        return

    table = Table(title="Model Presets")
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("Model")
    table.add_column("Effort")
    table.add_column("Description", style="dim")

    for preset in presets:
        table.add_row(
            preset.id,
            preset.label,
            preset.model,
            preset.effort_label,
            preset.description,
        )

    console.print(table)


@app.command()
def show(
    preset_id: Annotated[str, typer.Argument(help="Preset id")],
) -> None:
    """Show details of a model preset."""
    preset = find_preset(load_presets(), preset_id)
    if preset is None:
        console.print(f"[red]Preset not found: {preset_id}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Preset: {preset.id}[/bold]\n")
    console.print(f"Label: {preset.label}")
    console.print(f"Model: [cyan]{preset.model}[/cyan]")
    console.print(f"Effort: {preset.effort_label}")
    if preset.description:
        console.print(f"\nDescription:\n[dim]{preset.description}[/dim]")


@app.command()
def path() -> None:
    """Show where user presets are read from."""
    presets_path, source = describe_presets_source()
    if presets_path is None:
        console.print("[dim]No user presets location available; using built-ins.[/dim]")
        return

    origin = MODELS_FILE_ENV if source == "env" else "home directory"
    console.print(f"Presets file: {presets_path}")
    console.print(f"Source: {origin}")
    if presets_path.is_file():
        console.print("[green]✓[/green] File exists")
    else:
        console.print("[dim]File not found; using built-ins.[/dim]")
