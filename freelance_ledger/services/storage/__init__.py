"""
Storage Services Package

Provides the abstract record store interface and its implementations.
The JSON file store is the default backend; the in-memory store is used
for tests.
"""

from freelance_ledger.services.storage.interface import (
    NotFoundError,
    RecordStore,
    StorageError,
    StorageKey,
    key_name,
)
from freelance_ledger.services.storage.json_file import JsonFileRecordStore
from freelance_ledger.services.storage.memory import InMemoryRecordStore

__all__ = [
    # Interface
    "RecordStore",
    "StorageKey",
    "key_name",
    # Exceptions
    "NotFoundError",
    "StorageError",
    # Implementations
    "InMemoryRecordStore",
    "JsonFileRecordStore",
]
