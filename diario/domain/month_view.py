"""Month view: day derivation, aggregates, navigation and the editing cursor.

The pure functions at the top derive everything shown for a month from an
EntryStore. MonthViewController owns the transient view state (displayed
month and editing cursor) and the current store, and tells its listeners
about every new store. It never writes to storage itself.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

import structlog

from diario.dates import day_key, month_days, month_of, shift_month
from diario.domain.entries import EntryStore
from diario.domain.models import DayKey, Entry, Field, Month

logger = structlog.get_logger(__name__)

ChangeListener = Callable[[EntryStore], None]


@dataclass(frozen=True)
class MonthlyTotals:
    """Immutable aggregate of a displayed month."""

    income: float
    expense: float
    balance: float


@dataclass(frozen=True)
class DayRow:
    """Immutable view of one day of the displayed month."""

    day: date
    day_key: DayKey
    entry: Entry
    balance: float


@dataclass(frozen=True)
class EditingCursor:
    """The single cell currently in edit mode."""

    day_key: DayKey
    field: Field


def enumerate_days(month: Month) -> list[DayKey]:
    """List the DayKeys of a month, ascending by day of month."""
    return [day_key(day) for day in month_days(month)]


def daily_balance(store: EntryStore, key: DayKey) -> float:
    return store.get(key).balance


def monthly_totals(store: EntryStore, month: Month) -> MonthlyTotals:
    """Sum income and expense over every day of a month.

    Days without an entry contribute 0.

    Args:
        store: Entries to aggregate.
        month: Month in YYYY-MM format.

    Returns:
        MonthlyTotals with balance = income - expense.
    """
    income = 0.0
    expense = 0.0
    for key in enumerate_days(month):
        entry = store.get(key)
        income += entry.income
        expense += entry.expense
    return MonthlyTotals(income=income, expense=expense, balance=income - expense)


def month_rows(store: EntryStore, month: Month) -> list[DayRow]:
    rows = []
    for day in month_days(month):
        key = day_key(day)
        entry = store.get(key)
        rows.append(DayRow(day=day, day_key=key, entry=entry, balance=entry.balance))
    return rows


class MonthViewController:
    """Drives a month view over an EntryStore.

    Args:
        store: Hydrated store to start from.
        today: Clock returning the current date, used by go_to_today.
        month: Initially displayed month. Defaults to the current month.
    """

    def __init__(
        self,
        store: EntryStore | None = None,
        today: Callable[[], date] = date.today,
        month: Month | None = None,
    ) -> None:
        self._store = store if store is not None else EntryStore()
        self._today = today
        self._month = month if month is not None else month_of(today())
        self._cursor: EditingCursor | None = None
        self._listeners: list[ChangeListener] = []

    @property
    def store(self) -> EntryStore:
        return self._store

    @property
    def month(self) -> Month:
        return self._month

    @property
    def cursor(self) -> EditingCursor | None:
        return self._cursor

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a listener called with the new store after each mutation."""
        self._listeners.append(listener)

    # Derivations over the displayed month

    def enumerate_days(self) -> list[DayKey]:
        return enumerate_days(self._month)

    def get(self, key: DayKey) -> Entry:
        return self._store.get(key)

    def daily_balance(self, key: DayKey) -> float:
        return daily_balance(self._store, key)

    def monthly_totals(self) -> MonthlyTotals:
        return monthly_totals(self._store, self._month)

    def rows(self) -> list[DayRow]:
        return month_rows(self._store, self._month)

    def is_today(self, key: DayKey) -> bool:
        return key == day_key(self._today())

    # Navigation

    def go_to_previous_month(self) -> Month:
        self._month = shift_month(self._month, -1)
        return self._month

    def go_to_next_month(self) -> Month:
        self._month = shift_month(self._month, 1)
        return self._month

    def go_to_today(self) -> Month:
        self._month = month_of(self._today())
        return self._month

    # Editing

    def begin_edit(self, key: DayKey, field: Field) -> EditingCursor:
        """Put one cell in edit mode, replacing any previous cursor."""
        self._cursor = EditingCursor(day_key=key, field=field)
        return self._cursor

    def blur(self) -> None:
        self._cursor = None

    def commit_edit(self, raw_value: object) -> Entry | None:
        """Apply raw input to the cell under the cursor and leave edit mode.

        Returns:
            The updated entry, or None when no cell was being edited.
        """
        cursor = self._cursor
        if cursor is None:
            return None
        self._cursor = None
        return self.set_entry_field(cursor.day_key, cursor.field, raw_value)

    def set_entry_field(self, key: DayKey, field: Field, raw_value: object) -> Entry:
        """Replace one field of one day and notify listeners."""
        self._store = self._store.set_field(key, field, raw_value)
        entry = self._store.get(key)
        logger.debug("entry_updated", day=key, field=field.value, value=entry.get(field))
        for listener in self._listeners:
            listener(self._store)
        return entry
