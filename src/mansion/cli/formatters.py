"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mansion.core.explorer import Choice, EventKind, ExplorationEvent, ExplorationResult
from mansion.core.maps import Mansion, MansionLayout, Side

CHOICE_LABELS: Dict[Choice, str] = {
    Choice.LEFT: "[cyan]left[/cyan] (l)",
    Choice.RIGHT: "[cyan]right[/cyan] (r)",
    Choice.EXIT: "[cyan]exit[/cyan] (s)",
}


def format_choices(choices: List[Choice]) -> str:
    return "\\[" + " | ".join(CHOICE_LABELS[c] for c in choices) + "]"


def _side_text(side: Optional[Side]) -> str:
    return side.value if side is not None else "?"


class ConsoleNarrator:
    """Output capability rendering exploration events on a rich console."""

    def __init__(self, console: Console):
        self.console = console

    def __call__(self, event: ExplorationEvent) -> None:
        line = self.render(event)
        if line is not None:
            self.console.print(line)

    @staticmethod
    def render(event: ExplorationEvent) -> Optional[str]:
        room = escape(event.room or "")
        kind = event.kind
        if kind == EventKind.STARTED:
            return f"\n[bold]--- Mansion Exploration - {escape(event.message or '')} ---[/bold]"
        if kind == EventKind.EMPTY_MAP:
            return "[yellow]The mansion map is empty.[/yellow]"
        if kind == EventKind.ROOM:
            return f"\nYou are in the [bold]{room}[/bold]."
        if kind == EventKind.LEAF_REACHED:
            return "\n[green]This room has no more paths to explore. End of the journey![/green]"
        if kind == EventKind.CHOICES:
            return f"Choose your next path: {format_choices(event.choices)}"
        if kind == EventKind.MOVED:
            return f"-> Heading {_side_text(event.side)}."
        if kind == EventKind.PATH_MISSING:
            return f"[yellow]There is no path to the {_side_text(event.side)}. Choose again.[/yellow]"
        if kind == EventKind.INVALID_OPTION:
            token = escape(event.token or "")
            return f"[red]Invalid option[/red] '{token}'. Type 'left', 'right' or 'exit'."
        if kind == EventKind.EXITED:
            return "Leaving the mansion... Exploration ended."
        if kind == EventKind.INPUT_FAILED:
            return f"[red]Error reading input.[/red] {escape(event.message or '')} Leaving..."
        return None


def build_layout_tree(layout: MansionLayout) -> Tree:
    """Render a layout as a rich tree, leaves marked."""
    tree = Tree(f"[bold]{escape(layout.name)}[/bold]")
    if layout.is_empty:
        tree.add("[dim]<empty map>[/dim]")
        return tree

    leaves = set(layout.leaf_indices())

    def _label(idx: int, side: Optional[Side]) -> str:
        prefix = f"[dim]({side.value})[/dim] " if side is not None else ""
        suffix = " [green](leaf)[/green]" if idx in leaves else ""
        return f"{prefix}{escape(layout.rooms[idx])}{suffix}"

    stack = [(layout.root, None, tree)]
    while stack:
        idx, side, branch = stack.pop()
        node = branch.add(_label(idx, side))
        # Right pushed first so left renders first
        for child_side in (Side.RIGHT, Side.LEFT):
            child = layout.child_index(idx, child_side)
            if child is not None:
                stack.append((child, child_side, node))
    return tree


def build_result_table(result: ExplorationResult, mansion: Optional[Mansion] = None) -> Table:
    """Summary of one playthrough; release counters are added when the mansion is given."""
    table = Table(title="Exploration Summary")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Outcome", result.outcome.value)
    table.add_row("Final room", escape(result.final_room or "-"))
    table.add_row("Path", escape(" -> ".join(result.path) or "-"))
    table.add_row("Choices read", str(result.steps))
    table.add_row("Invalid options", str(result.invalid_attempts))
    table.add_row("Missing paths", str(result.blocked_attempts))
    if mansion is not None:
        table.add_row("Rooms released", f"{mansion.released}/{mansion.allocated}")
    return table


__all__ = ["ConsoleNarrator", "format_choices", "build_layout_tree", "build_result_table"]
