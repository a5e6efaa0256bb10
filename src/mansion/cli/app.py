"""
Mansion CLI: explore a mansion map, inspect it, and validate layout files.

- Interactive exploration reads choices from the console
- --moves replays a fixed sequence of choices instead
- Maps are the built-in mansion or YAML layouts under kb/maps
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from mansion.cli.formatters import ConsoleNarrator, build_layout_tree, build_result_table
from mansion.cli.load_helpers import load_layout_or_exit
from mansion.cli.paths import kb_maps_path
from mansion.core.errors import RoomAllocationError
from mansion.io.loaders import LoaderError, load_layouts
from mansion.io.readers import ConsoleChoiceReader, ScriptedChoiceReader
from mansion.services import ExplorationService
from mansion.utils.logging import configure_logging

app = typer.Typer(help="Mansion CLI: explore a mansion map, inspect it, and validate layout files.")
console = Console()

MAP_HELP = "Layout file path or name under kb/maps (built-in mansion when omitted)"


@app.command()
def explore(
    map_name: Optional[str] = typer.Argument(None, metavar="MAP", help=MAP_HELP),
    moves: Optional[str] = typer.Option(
        None, "--moves", "-m", help="Space separated choices to replay instead of prompting"
    ),
    summary: bool = typer.Option(False, "--summary", help="Print an exploration summary table at the end"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    """Walk through the mansion until a room without paths or until you leave."""
    configure_logging(log_level)
    layout = load_layout_or_exit(map_name, console=console, verbose_errors=verbose)

    if moves is not None:
        reader = ScriptedChoiceReader(moves.split())
    else:
        reader = ConsoleChoiceReader(console)

    service = ExplorationService(reader, ConsoleNarrator(console))
    try:
        result = service.run(layout)
    except RoomAllocationError as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(code=1)

    if summary:
        console.print(build_result_table(result, service.last_mansion))


@app.command()
def show(
    map_name: Optional[str] = typer.Argument(None, metavar="MAP", help=MAP_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Show the rooms of a map as a tree."""
    layout = load_layout_or_exit(map_name, console=console, verbose_errors=verbose)
    console.print(build_layout_tree(layout))


@app.command()
def validate(
    map_name: Optional[str] = typer.Argument(None, metavar="MAP", help=MAP_HELP),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate a map layout."""
    layout = load_layout_or_exit(map_name, console=console, verbose_errors=verbose)

    console.print(f"[green]OK[/green] Loaded {len(layout.rooms)} room(s)")
    console.print(f"[green]OK[/green] {len(layout.leaf_indices())} room(s) without paths")
    console.print("[green]All validations passed[/green]")


@app.command("maps")
def list_maps(
    path: Optional[str] = typer.Option(None, help="Path to kb/maps folder"),
) -> None:
    """List the layouts available under kb/maps."""
    try:
        layouts = load_layouts(kb_maps_path(path))
    except LoaderError as err:
        console.print(f"[red]Failed to load map:[/red] {err}")
        raise typer.Exit(code=1)

    if not layouts:
        console.print("[dim]No maps found[/dim]")
        return
    for name, layout in layouts.items():
        console.print(f"  - {name}: {layout.name} ({len(layout.rooms)} room(s))")


__all__ = ["app"]
