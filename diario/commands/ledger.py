"""Ledger commands for viewing and editing daily entries."""

import sys
import tomllib

import pandas as pd
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from diario.config import Settings, get_config_path, get_settings
from diario.dates import day_key, format_day, month_label, month_of, parse_day_key, parse_month
from diario.domain.entries import EntryStore, is_valid_amount
from diario.domain.models import DayKey, Field, Month
from diario.domain.month_view import MonthViewController, MonthlyTotals
from diario.store.persistence import PersistenceAdapter, SaveResult
from diario.store.storage import FileStorage

console = Console()

FIELD_NAMES = {
    "ganancias": Field.INCOME,
    "income": Field.INCOME,
    "i": Field.INCOME,
    "g": Field.INCOME,
    "gastos": Field.EXPENSE,
    "expense": Field.EXPENSE,
    "e": Field.EXPENSE,
}


class LedgerSession:
    """A hydrated controller wired to save after every change.

    Args:
        adapter: Persistence adapter to load from and save to.
        month: Initially displayed month. Defaults to the current month.
    """

    def __init__(self, adapter: PersistenceAdapter, month: Month | None = None) -> None:
        self.adapter = adapter
        self.last_save: SaveResult | None = None
        self.controller = MonthViewController(adapter.load(), month=month)
        self.controller.subscribe(self._save)

    def _save(self, store: EntryStore) -> None:
        self.last_save = self.adapter.save(store)
        if not self.last_save.saved:
            error = escape(self.last_save.error or "")
            console.print(f"[red]Warning: the latest edit may not be saved ({error})[/red]")


def load_settings() -> Settings:
    """Resolve settings, exiting on a malformed config file."""
    try:
        return get_settings()
    except (tomllib.TOMLDecodeError, TypeError) as e:
        console.print(f"[red]Invalid config file {get_config_path()}: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def open_adapter() -> PersistenceAdapter:
    settings = load_settings()
    return PersistenceAdapter(FileStorage(settings.data_dir), settings.storage_key)


def parse_field(name: str) -> Field | None:
    return FIELD_NAMES.get(name.strip().lower())


def parse_month_option(month: str | None) -> Month | None:
    """Validate a --month option, exiting on bad input."""
    if month is None:
        return None
    try:
        parse_month(month)
    except ValueError:
        console.print(f"[red]Invalid month '{month}'. Use YYYY-MM.[/red]")
        sys.exit(1)
    return Month(month)


def parse_day_input(text: str) -> DayKey:
    """Normalize a typed date to a DayKey.

    ISO dates are taken as-is; anything else goes through pandas with the day
    first (DD/MM/YYYY, DD-MM-YYYY, etc.).

    Raises:
        ValueError: If the text is not a recognizable date.
    """
    try:
        return day_key(parse_day_key(text))
    except ValueError:
        pass
    parsed = pd.to_datetime(text, dayfirst=True)
    if pd.isna(parsed):
        raise ValueError(f"not a date: {text!r}")
    return day_key(parsed.date())


def format_amount(value: float) -> str:
    """Format an amount with "." thousands and "," decimals (e.g., 1.500,25)."""
    value = value + 0.0  # -0.0 prints as "-0"
    if value.is_integer():
        text = f"{value:,.0f}"
    else:
        text = f"{value:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_balance(value: float) -> str:
    if value < 0:
        return f"[red]{format_amount(value)}[/red]"
    if value > 0:
        return f"[green]{format_amount(value)}[/green]"
    return format_amount(value)


def render_totals(totals: MonthlyTotals) -> None:
    console.print(
        f"[bold]Total ganancias:[/bold] [green]{format_amount(totals.income)}[/green]   "
        f"[bold]Total gastos:[/bold] [red]{format_amount(totals.expense)}[/red]   "
        f"[bold]Balance:[/bold] {format_balance(totals.balance)}"
    )


def render_month(controller: MonthViewController) -> None:
    """Print the displayed month as a table followed by its totals."""
    table = Table(title=month_label(controller.month).capitalize())
    table.add_column("#", style="dim", justify="right")
    table.add_column("Fecha", style="cyan")
    table.add_column("Ganancias", justify="right")
    table.add_column("Gastos", justify="right")
    table.add_column("Balance Diario", justify="right")

    cursor = controller.cursor
    for row in controller.rows():
        cells = {
            Field.INCOME: format_amount(row.entry.income),
            Field.EXPENSE: format_amount(row.entry.expense),
        }
        if cursor is not None and cursor.day_key == row.day_key:
            cells[cursor.field] = f"[reverse]{cells[cursor.field]}[/reverse]"

        table.add_row(
            str(row.day.day),
            format_day(row.day),
            cells[Field.INCOME],
            cells[Field.EXPENSE],
            format_balance(row.balance),
            style="bold" if controller.is_today(row.day_key) else None,
        )

    console.print(table)
    render_totals(controller.monthly_totals())


def show_command(month: str | None = None) -> None:
    """Show a month of entries with daily balances and totals."""
    session = LedgerSession(open_adapter(), parse_month_option(month))
    render_month(session.controller)


def set_command(day: str, field: str, value: str) -> None:
    """Set one figure of one day.

    Args:
        day: Date of the entry (YYYY-MM-DD, DD/MM/YYYY, or other formats).
        field: ganancias/income or gastos/expense.
        value: Amount. Non-numeric input is stored as 0.
    """
    try:
        key = parse_day_input(day)
    except ValueError as e:
        console.print(f"[red]Invalid date format: {escape(str(e))}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)

    selected = parse_field(field)
    if selected is None:
        console.print(f"[red]Unknown field '{field}'. Use ganancias or gastos.[/red]")
        sys.exit(1)

    session = LedgerSession(open_adapter(), month_of(parse_day_key(key)))
    entry = session.controller.set_entry_field(key, selected, value)

    if not is_valid_amount(value):
        console.print(f"[dim]'{escape(value)}' is not a number, stored as {format_amount(entry.get(selected))}[/dim]")

    if session.last_save is None or not session.last_save.saved:
        sys.exit(1)

    console.print(f"[green]✓[/green] {format_day(parse_day_key(key))}")
    console.print(f"  Ganancias: {format_amount(entry.income)}")
    console.print(f"  Gastos: {format_amount(entry.expense)}")
    console.print(f"  Balance: {format_balance(entry.balance)}")


def handle_edit_input(controller: MonthViewController, choice: str) -> bool:
    """Handle one line typed in the edit session.

    Returns:
        False when the user asked to quit, True otherwise.
    """
    parts = choice.strip().lower().split()
    if not parts:
        return True

    if parts == ["q"]:
        return False
    if parts == ["p"]:
        controller.go_to_previous_month()
        return True
    if parts == ["n"]:
        controller.go_to_next_month()
        return True
    if parts == ["t"]:
        controller.go_to_today()
        return True

    if len(parts) != 2 or not parts[0].isdigit():
        console.print("[red]Invalid input[/red]")
        return True

    days = controller.enumerate_days()
    day_num = int(parts[0])
    selected = parse_field(parts[1])
    if not 1 <= day_num <= len(days) or selected is None:
        console.print("[red]Invalid selection[/red]")
        return True

    key = days[day_num - 1]
    controller.begin_edit(key, selected)
    render_month(controller)

    current = controller.get(key).get(selected)
    raw = typer.prompt(
        f"{selected.label} {format_day(parse_day_key(key))} [{format_amount(current)}]",
        default="",
        show_default=False,
    )
    if not raw.strip():
        controller.blur()
        return True

    entry = controller.commit_edit(raw)
    if entry is not None and not is_valid_amount(raw):
        console.print(f"[dim]'{escape(raw)}' is not a number, stored as {format_amount(entry.get(selected))}[/dim]")
    return True


def edit_command(month: str | None = None) -> None:
    """Browse months and edit cells interactively."""
    session = LedgerSession(open_adapter(), parse_month_option(month))
    controller = session.controller

    while True:
        render_month(controller)
        choice = typer.prompt(
            "\n<day> g|e to edit, p/n previous/next month, t today, q to quit",
            type=str,
            default="q",
        )
        console.print()
        if not handle_edit_input(controller, choice):
            break
