"""Date utilities for diario.

Pure functions for month arithmetic, day enumeration and formatting.
Month names are Spanish and hard-coded so output does not depend on the
host locale.
"""

import calendar
from datetime import date, datetime

from diario.domain.models import DayKey, Month

MONTH_NAMES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


def parse_month(month: str) -> tuple[int, int]:
    """Split a YYYY-MM string into (year, month).

    Raises:
        ValueError: If the string is not a valid month.
    """
    dt = datetime.strptime(month, "%Y-%m")
    return dt.year, dt.month


def make_month(year: int, month: int) -> Month:
    return Month(f"{year:04d}-{month:02d}")


def month_of(day: date) -> Month:
    return make_month(day.year, day.month)


def shift_month(month: Month, delta: int) -> Month:
    """Move a month forward or backward, rolling over year boundaries.

    Args:
        month: Month in YYYY-MM format.
        delta: Number of months to move (negative goes back).

    Returns:
        The shifted month.
    """
    year, month_num = parse_month(month)
    index = year * 12 + (month_num - 1) + delta
    return make_month(index // 12, index % 12 + 1)


def days_in_month(month: Month) -> int:
    year, month_num = parse_month(month)
    return calendar.monthrange(year, month_num)[1]


def day_key(day: date) -> DayKey:
    return DayKey(day.isoformat())


def parse_day_key(key: str) -> date:
    """Parse a DayKey back into a date.

    Raises:
        ValueError: If the key is not a valid YYYY-MM-DD date.
    """
    return datetime.strptime(key, "%Y-%m-%d").date()


def month_days(month: Month) -> list[date]:
    """List every calendar day of a month, in order."""
    year, month_num = parse_month(month)
    return [date(year, month_num, day) for day in range(1, days_in_month(month) + 1)]


def month_label(month: Month) -> str:
    """Human-readable month in Spanish (e.g., "marzo de 2024")."""
    year, month_num = parse_month(month)
    return f"{MONTH_NAMES[month_num - 1]} de {year}"


def format_day(day: date) -> str:
    """Format a date as DD/MM/YYYY."""
    return day.strftime("%d/%m/%Y")
