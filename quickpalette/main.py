#!/usr/bin/env python3
"""
Main CLI entry point for quickpalette
"""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from quickpalette import __build_id__, __version__
from quickpalette.config.ui_config import get_palette_settings
from quickpalette.exceptions import QuickPaletteError
from quickpalette.ui.command_palette import build_snapshot, filter_items, group_items
from quickpalette.ui.gui import gui, load_transactions
from quickpalette.utils.output import console, print_json

app = typer.Typer(
    name="quickpalette",
    help="Command-and-search palette engine for Textual apps",
    no_args_is_help=True,
)

app.command(name="run")(gui)


@app.command()
def version():
    """Show quickpalette version"""
    typer.echo(f"quickpalette version {__version__}")
    typer.echo(f"Build ID: {__build_id__}")


@app.command()
def search(
    query: str = typer.Argument("", help="Text to filter the palette by"),
    transactions: Optional[Path] = typer.Option(
        None,
        "--transactions",
        "-t",
        help="JSON file with recent transactions to include",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show what the palette lists for a query, grouped by category."""
    try:
        records = load_transactions(transactions)
        settings = get_palette_settings()
        snapshot = build_snapshot(records, lambda route: None, settings.max_recent_items)
        view = group_items(filter_items(snapshot, query))
    except QuickPaletteError as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1) from e

    if json_output:
        print_json(
            [
                {
                    "index": entry.index,
                    "category": category.value,
                    "id": entry.item.id,
                    "label": entry.item.label,
                    "description": entry.item.description,
                }
                for category, entries in view
                for entry in entries
            ]
        )
        return

    if not len(view):
        console.print("No results found", style="dim")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Category")
    table.add_column("Label")
    table.add_column("Description", style="dim")
    table.add_column("ID", style="dim")

    for category, entries in view:
        for entry in entries:
            table.add_row(
                str(entry.index),
                category.label,
                entry.item.label,
                entry.item.description or "",
                entry.item.id,
            )

    console.print(table)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
