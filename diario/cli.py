"""CLI entry point for diario."""

import typer

from diario.commands.admin import init_command
from diario.commands.export import export_command
from diario.commands.ledger import edit_command, set_command, show_command
from diario.log import configure_logging

app = typer.Typer(
    name="diario",
    help="Diario - daily income and expense ledger",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Diario - daily income and expense ledger."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize diario configuration and data directory."""
    init_command(force)


@app.command()
def show(
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: current)"),
) -> None:
    """Show a month with daily balances and totals."""
    show_command(month)


@app.command(name="set")
def set_entry(
    day: str,
    field: str,
    value: str,
) -> None:
    """Set ganancias or gastos for a day (e.g. diario set 05/03/2024 gastos 40)."""
    set_command(day, field, value)


@app.command()
def edit(
    month: str = typer.Option(None, "--month", help="Month to start on (YYYY-MM, default: current)"),
) -> None:
    """Browse months and edit cells interactively."""
    edit_command(month)


@app.command()
def export(
    month: str = typer.Option(None, "--month", help="Month to export (YYYY-MM, default: current)"),
    output_dir: str = typer.Option(None, "--output", "-o", help="Output directory (default: from config)"),
) -> None:
    """Export a month to a CSV file for Excel."""
    export_command(month, output_dir)


if __name__ == "__main__":
    app()
