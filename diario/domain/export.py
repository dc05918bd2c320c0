"""Pure functions for the monthly CSV export.

The export is write-only: a title line, a blank line, a header row, one row
per calendar day, a blank line and a TOTAL row. Building the text is pure;
writing it to disk belongs to the export command.
"""

import csv
import io

from diario.dates import format_day, month_label, parse_month
from diario.domain.entries import EntryStore
from diario.domain.models import Month
from diario.domain.month_view import month_rows, monthly_totals

BOM = "\ufeff"
HEADER = ["#", "Fecha", "Ganancias", "Gastos", "Balance Diario"]


def format_number(value: float) -> str:
    """Render an amount the way a spreadsheet reads it back.

    Integral values have no decimal point (150.0 -> "150"); everything else
    uses the shortest round-trip form.
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def export_filename(month: Month) -> str:
    year, month_num = parse_month(month)
    return f"finanzas_{year}_{month_num:02d}.csv"


def build_export_rows(store: EntryStore, month: Month) -> list[list[str]]:
    """Build every CSV row of the export, blank lines included as empty rows."""
    rows: list[list[str]] = [[f"Reporte Financiero - {month_label(month)}"], [], HEADER]

    for row in month_rows(store, month):
        rows.append(
            [
                str(row.day.day),
                format_day(row.day),
                format_number(row.entry.income),
                format_number(row.entry.expense),
                format_number(row.balance),
            ]
        )

    totals = monthly_totals(store, month)
    rows.append([])
    rows.append(
        [
            "TOTAL",
            "",
            format_number(totals.income),
            format_number(totals.expense),
            format_number(totals.balance),
        ]
    )
    return rows


def build_export_csv(store: EntryStore, month: Month) -> str:
    """Build the full export text, BOM included.

    Args:
        store: Entries to export.
        month: Month in YYYY-MM format.

    Returns:
        CSV text with "\\n" line endings, prefixed with a UTF-8 byte order mark.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(build_export_rows(store, month))
    return BOM + buffer.getvalue()
