"""Persistence adapter: snapshot (de)serialization and the load/save lifecycle.

The snapshot is a JSON object mapping "YYYY-MM-DD" to
{"ganancias": number, "gastos": number}. Reading is lenient: anything that
is not a well-formed snapshot yields an empty store and a warning, never an
exception. Writing failures are returned to the caller as a SaveResult.
"""

import json
from dataclasses import dataclass
from typing import Any

import structlog

from diario.dates import day_key, parse_day_key
from diario.domain.entries import EntryStore, coerce_amount
from diario.domain.models import DayKey, Entry, Field
from diario.store.storage import KeyValueStorage

logger = structlog.get_logger(__name__)

DEFAULT_STORAGE_KEY = "dailyFinanceTracker"

# Field names accepted on read, per field
FIELD_ALIASES = {
    Field.INCOME: (Field.INCOME.value, "income"),
    Field.EXPENSE: (Field.EXPENSE.value, "expense"),
}


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save attempt."""

    saved: bool
    error: str | None = None
    skipped: bool = False


def serialize_store(store: EntryStore) -> str:
    return json.dumps(store.to_dict(), sort_keys=True)


def _read_field(raw_entry: dict[str, Any], field: Field) -> float:
    for name in FIELD_ALIASES[field]:
        if name in raw_entry:
            return coerce_amount(raw_entry[name])
    return 0.0


def deserialize_store(payload: str) -> EntryStore:
    """Parse a snapshot into an EntryStore.

    Args:
        payload: Raw snapshot text.

    Returns:
        The decoded store. Unparseable or non-object snapshots give an empty
        store; malformed individual entries are skipped.
    """
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as e:
        logger.warning("snapshot_unparseable", error=str(e))
        return EntryStore()

    if not isinstance(data, dict):
        logger.warning("snapshot_not_a_mapping", found=type(data).__name__)
        return EntryStore()

    entries: dict[DayKey, Entry] = {}
    for key, raw_entry in data.items():
        try:
            normalized = day_key(parse_day_key(key))
        except ValueError:
            logger.warning("snapshot_entry_skipped", day=key, reason="invalid day key")
            continue

        if normalized != key:
            if normalized in data:
                logger.warning("snapshot_entry_skipped", day=key, reason=f"duplicate of {normalized}")
                continue
            logger.warning("snapshot_key_normalized", day=key, normalized=normalized)

        if not isinstance(raw_entry, dict):
            logger.warning("snapshot_entry_skipped", day=key, reason="entry is not an object")
            continue

        entries[normalized] = Entry(
            income=_read_field(raw_entry, Field.INCOME),
            expense=_read_field(raw_entry, Field.EXPENSE),
        )

    return EntryStore(entries)


class PersistenceAdapter:
    """Loads and saves the EntryStore under one fixed storage key.

    No save is written until load() has completed, so an empty store can
    never overwrite a snapshot that has not been read yet.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._hydrated = False

    @property
    def is_hydrated(self) -> bool:
        return self._hydrated

    def load(self) -> EntryStore:
        """Read the snapshot and open the save gate.

        Returns:
            The persisted store, or an empty store when there is none or it
            cannot be read.
        """
        try:
            payload = self.storage.get(self.key)
        except UnicodeDecodeError as e:
            logger.warning("snapshot_unparseable", key=self.key, error=str(e))
            payload = None
        except OSError as e:
            logger.warning("snapshot_read_failed", key=self.key, error=str(e))
            payload = None

        if payload is None:
            logger.debug("snapshot_missing", key=self.key)
            store = EntryStore()
        else:
            store = deserialize_store(payload)
            logger.debug("snapshot_loaded", key=self.key, entries=len(store))

        self._hydrated = True
        return store

    def save(self, store: EntryStore) -> SaveResult:
        """Write the whole store under the storage key, replacing the old value.

        Returns:
            SaveResult; saved is False when the gate is closed or the write fails.
        """
        if not self._hydrated:
            logger.warning("save_before_load", key=self.key)
            return SaveResult(saved=False, error="Store has not been loaded yet", skipped=True)

        try:
            self.storage.set(self.key, serialize_store(store))
        except OSError as e:
            logger.error("snapshot_write_failed", key=self.key, error=str(e))
            return SaveResult(saved=False, error=str(e))

        logger.debug("snapshot_saved", key=self.key, entries=len(store))
        return SaveResult(saved=True)
