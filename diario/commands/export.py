"""Export command for writing a month to a spreadsheet-compatible CSV file."""

import sys
from datetime import date
from pathlib import Path

from rich.console import Console

from diario.commands.ledger import load_settings, open_adapter, parse_month_option, render_totals
from diario.dates import month_label, month_of
from diario.domain.export import build_export_csv, export_filename
from diario.domain.month_view import monthly_totals

console = Console()


def write_export(content: str, output_dir: Path, filename: str) -> Path:
    """Write export text to output_dir/filename.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return path


def export_command(month: str | None = None, output_dir: str | None = None) -> None:
    """Export a month of entries to finanzas_<year>_<MM>.csv."""
    target_month = parse_month_option(month) or month_of(date.today())
    target_dir = Path(output_dir).expanduser() if output_dir else load_settings().export_dir

    store = open_adapter().load()

    try:
        path = write_export(build_export_csv(store, target_month), target_dir, export_filename(target_month))
    except OSError as e:
        console.print(f"[red]Export failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] {month_label(target_month).capitalize()} exported to: {path}")
    render_totals(monthly_totals(store, target_month))
