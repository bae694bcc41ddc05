"""
Abstract Record Store Interface

DESIGN DECISION: Persistence is a plain key-value store.
Each entity collection (clients, projects, invoices, time logs,
settings) is stored as one JSON document under a fixed key. This
allows us to:
1. Swap the JSON file backend for something else later
2. Use in-memory storage for testing
3. Keep business logic decoupled from storage implementation

The interface is intentionally tiny: load, save, remove.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

from freelance_ledger.exceptions import LedgerError


class StorageKey(str, Enum):
    """Keys under which each collection is stored."""
    CLIENTS = "freelance_clients"
    PROJECTS = "freelance_projects"
    INVOICES = "freelance_invoices"
    SETTINGS = "freelance_settings"
    TIME_LOGS = "freelance_time_logs"


class RecordStore(ABC):
    """
    Abstract interface for key-value persistence.

    Values are JSON-compatible data (dicts, lists, strings, numbers).
    """

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """
        Load the document stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored data, or None if nothing usable is stored
        """
        pass

    @abstractmethod
    def save(self, key: str, data: Any) -> None:
        """
        Replace the document stored under a key.

        Args:
            key: Storage key
            data: JSON-compatible data

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Remove the document stored under a key.

        Removing a key that does not exist is not an error.

        Raises:
            StorageError: If the removal fails
        """
        pass


def key_name(key: str) -> str:
    """Return the plain string form of a key (StorageKey or str)."""
    return key.value if isinstance(key, StorageKey) else str(key)


class StorageError(LedgerError):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Record not found in storage."""
    pass
