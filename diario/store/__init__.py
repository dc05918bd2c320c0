"""Store layer - provides persistence for the application.

This module re-exports the public storage and persistence API for easy importing.
"""

from diario.store.persistence import (
    DEFAULT_STORAGE_KEY,
    PersistenceAdapter,
    SaveResult,
    deserialize_store,
    serialize_store,
)
from diario.store.storage import FileStorage, KeyValueStorage, MemoryStorage, get_data_dir

__all__ = [
    # Storage
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "get_data_dir",
    # Persistence
    "DEFAULT_STORAGE_KEY",
    "PersistenceAdapter",
    "SaveResult",
    "deserialize_store",
    "serialize_store",
]
