from __future__ import annotations

"""Shared helpers for loading mansion layouts with CLI-friendly errors."""

import typer
from rich.console import Console

from mansion.cli.paths import find_map_file
from mansion.core.maps import DEFAULT_LAYOUT, MansionLayout
from mansion.io.loaders import LoaderError, load_layout


def load_layout_or_exit(
    map_name: str | None,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> MansionLayout:
    """Resolve and load ``map_name``; the built-in layout when it is None."""
    if map_name is None:
        return DEFAULT_LAYOUT
    try:
        path = find_map_file(map_name)
    except FileNotFoundError as exc:
        console.print(f"[red]Path not found:[/red] {exc}")
        raise typer.Exit(code=1)
    try:
        return load_layout(path)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load map:[/red] {err.message}\n{err.cause}")
        else:
            console.print(f"[red]Failed to load map:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["load_layout_or_exit"]
