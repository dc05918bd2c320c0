"""Domain type definitions for diario.

These types provide semantic clarity and help with type checking:
- DayKey: Calendar day in YYYY-MM-DD format
- Month: Month in YYYY-MM format
- Field: Which of the two figures of a day is meant (income or expense)
- Entry: The income/expense pair recorded for one day
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

# DayKey is always in YYYY-MM-DD format (e.g., "2025-01-31")
DayKey = NewType("DayKey", str)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)


class Field(Enum):
    """The two editable figures of a day, valued by their snapshot names."""

    INCOME = "ganancias"
    EXPENSE = "gastos"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Entry:
    """Immutable income/expense pair for one day."""

    income: float = 0.0
    expense: float = 0.0

    def get(self, field: Field) -> float:
        return self.income if field is Field.INCOME else self.expense

    def with_field(self, field: Field, value: float) -> "Entry":
        if field is Field.INCOME:
            return Entry(income=value, expense=self.expense)
        return Entry(income=self.income, expense=value)

    @property
    def balance(self) -> float:
        return self.income - self.expense


ZERO_ENTRY = Entry()
