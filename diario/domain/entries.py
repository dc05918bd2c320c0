"""Pure functions and the immutable store for daily ledger entries.

This module contains the functional core for entry operations:
- No I/O operations (no files, no console)
- No side effects: every mutation returns a new store
- Malformed numeric input is coerced to 0, never raised
"""

import math
import re
from collections.abc import Iterator, Mapping

from diario.domain.models import ZERO_ENTRY, DayKey, Entry, Field

# Longest leading decimal literal, e.g. "12.5abc" -> "12.5"
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_leading_number(raw: str) -> float | None:
    match = _LEADING_NUMBER.match(raw.strip())
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def coerce_amount(raw: object) -> float:
    """Parse raw user input as an amount.

    Args:
        raw: Typed text, or an already numeric value.

    Returns:
        The parsed amount, or 0.0 for empty, non-numeric or non-finite input.
    """
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            return float(raw) if math.isfinite(raw) else 0.0
        except OverflowError:
            return 0.0
    if not isinstance(raw, str):
        return 0.0
    value = _parse_leading_number(raw)
    return 0.0 if value is None else value


def is_valid_amount(raw: object) -> bool:
    """Check whether raw input parses cleanly, without coercion to 0.

    Empty input is valid (it means "clear the cell"). Trailing garbage after
    a number ("12abc") is not.
    """
    if isinstance(raw, bool):
        return False
    if isinstance(raw, (int, float)):
        try:
            return math.isfinite(raw)
        except OverflowError:
            return False
    if not isinstance(raw, str):
        return False
    text = raw.strip()
    if not text:
        return True
    match = _LEADING_NUMBER.fullmatch(text)
    return match is not None and math.isfinite(float(text))


class EntryStore:
    """Immutable mapping from DayKey to Entry.

    The store is sparse: days are only present once edited, and an absent
    day reads as the zero entry.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[DayKey, Entry] | None = None) -> None:
        self._entries: dict[DayKey, Entry] = dict(entries or {})

    def get(self, day_key: DayKey) -> Entry:
        return self._entries.get(day_key, ZERO_ENTRY)

    def set_field(self, day_key: DayKey, field: Field, raw_value: object) -> "EntryStore":
        """Return a new store with one field of one day replaced.

        Args:
            day_key: Day to update; created if absent.
            field: Which figure to replace.
            raw_value: User input, coerced with coerce_amount.

        Returns:
            New store. The other field and all other days are unchanged.
        """
        updated = dict(self._entries)
        updated[day_key] = self.get(day_key).with_field(field, coerce_amount(raw_value))
        return EntryStore(updated)

    def items(self) -> Iterator[tuple[DayKey, Entry]]:
        """Iterate stored entries in chronological order."""
        return iter(sorted(self._entries.items()))

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            key: {Field.INCOME.value: entry.income, Field.EXPENSE.value: entry.expense}
            for key, entry in self.items()
        }

    def __contains__(self, day_key: object) -> bool:
        return day_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"EntryStore({len(self._entries)} entries)"
