"""
TUI launcher for the quick-actions palette.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer

from quickpalette.config.ui_config import get_palette_settings
from quickpalette.exceptions import ConfigurationError
from quickpalette.utils.output import console

app = typer.Typer()


def load_transactions(path: Optional[Path]) -> list[Any]:
    """
    Load recent transactions from a JSON file holding a list of records.

    Raises:
        ConfigurationError: If the file can't be read or isn't a JSON list
    """
    if path is None:
        return []
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError("Could not read transactions file", path=str(path)) from e
    if not isinstance(data, list):
        raise ConfigurationError("Transactions file must hold a JSON list", path=str(path))
    return data


@app.command()
def gui(
    transactions: Optional[Path] = typer.Option(
        None,
        "--transactions",
        "-t",
        help="JSON file with recent transactions to show in the palette",
    ),
    theme: Optional[str] = typer.Option(None, "--theme", help="Textual theme name"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level log file"),
):
    """Open the quick-actions app (ctrl+k shows the palette)."""
    from dataclasses import replace

    from quickpalette.ui.quick_actions_app import QuickActionsApp
    from quickpalette.utils.logging_utils import setup_tui_logging

    setup_tui_logging(__name__, verbose=verbose)

    try:
        records = load_transactions(transactions)
    except ConfigurationError as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1) from e

    settings = get_palette_settings()
    if theme:
        settings = replace(settings, theme=theme)

    try:
        QuickActionsApp(transactions=records, settings=settings).run()
    except KeyboardInterrupt:
        pass
