"""
In-Memory Record Store

Used by tests and throwaway sessions. Values are JSON round-tripped on
the way in and out so callers never share mutable state with the store,
and non-serializable data fails here just as it would on disk.
"""

import json
from typing import Any, Optional

from freelance_ledger.services.storage.interface import (
    RecordStore,
    StorageError,
    key_name,
)


class InMemoryRecordStore(RecordStore):
    """Dict-backed record store."""

    def __init__(self):
        self._documents: dict[str, str] = {}

    def load(self, key: str) -> Optional[Any]:
        payload = self._documents.get(key_name(key))
        return None if payload is None else json.loads(payload)

    def save(self, key: str, data: Any) -> None:
        try:
            self._documents[key_name(key)] = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Data for {key_name(key)} is not JSON serializable: {e}") from e

    def remove(self, key: str) -> None:
        self._documents.pop(key_name(key), None)

    def keys(self) -> list[str]:
        return list(self._documents)
