"""Domain models and types for diario.

This package contains the functional core:
- Pure functions and immutable values
- No I/O operations
- Easy to test
- Ledger logic separated from storage and the command line
"""

from diario.domain.entries import EntryStore
from diario.domain.models import ZERO_ENTRY, DayKey, Entry, Field, Month

__all__ = ["DayKey", "Entry", "EntryStore", "Field", "Month", "ZERO_ENTRY"]
