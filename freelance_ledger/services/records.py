"""
Record Collections

A RecordCollection holds one entity collection (all clients, all
invoices, ...) in insertion order and writes the whole list back to the
record store after every change.

DESIGN DECISION: Changes are applied to a copy of the list and only
become visible once the store write succeeded, so a failed save leaves
the in-memory collection exactly as it was before the call.
"""

from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from freelance_ledger.log import get_logger
from freelance_ledger.services.storage import (
    NotFoundError,
    RecordStore,
    StorageError,
    key_name,
)

RecordT = TypeVar("RecordT", bound=BaseModel)

DEFAULT_IMMUTABLE_FIELDS = ("id", "created_at")

logger = get_logger(__name__)


class RecordCollection(Generic[RecordT]):
    """
    An ordered, persisted list of records of one model type.

    Records must have an ``id`` attribute.
    """

    def __init__(
        self,
        store: RecordStore,
        key: str,
        model: type[RecordT],
        immutable_fields: tuple[str, ...] = DEFAULT_IMMUTABLE_FIELDS,
    ):
        self._store = store
        self._key = key
        self._model = model
        self._immutable_fields = immutable_fields
        self._records: list[RecordT] = []
        self.reload()

    def reload(self) -> None:
        """Re-read the collection from the store."""
        data = self._store.load(self._key)
        if data is None:
            self._records = []
            return
        if not isinstance(data, list):
            logger.warning(
                "record_collection_not_a_list",
                key=key_name(self._key),
                found=type(data).__name__,
            )
            self._records = []
            return
        try:
            self._records = [self._model.model_validate(row) for row in data]
        except ValidationError as e:
            raise StorageError(
                f"Stored {key_name(self._key)} do not match {self._model.__name__}: {e}"
            ) from e

    def _commit(self, records: list[RecordT]) -> None:
        self._store.save(
            self._key,
            [record.model_dump(mode="json") for record in records],
        )
        self._records = records

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def all(self) -> list[RecordT]:
        """All records in insertion order (a copy of the list)."""
        return list(self._records)

    def get(self, record_id: str) -> Optional[RecordT]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def where(self, **criteria: Any) -> list[RecordT]:
        """Records whose attributes equal every given value."""
        return [
            record for record in self._records
            if all(getattr(record, name) == value for name, value in criteria.items())
        ]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(list(self._records))

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def add(self, record: RecordT) -> RecordT:
        """Append a record and persist the collection."""
        self._commit([*self._records, record])
        return record

    def check_fields(self, changes: dict[str, Any]) -> None:
        """
        Refuse changes naming fields the model does not have.

        Raises:
            TypeError: For the first unknown field name
        """
        for name in changes:
            if name not in self._model.model_fields:
                raise TypeError(f"{self._model.__name__} has no field '{name}'")

    def merge(self, record_id: str, changes: dict[str, Any]) -> RecordT:
        """
        Build the updated version of a record without saving it.

        Immutable fields are kept from the stored record whatever the
        changes say. The result is fully re-validated.

        Raises:
            NotFoundError: If no record has this id
            TypeError: If a change names an unknown field
            pydantic.ValidationError: If the merged data is invalid
        """
        current = self.get(record_id)
        if current is None:
            raise NotFoundError(f"{self._model.__name__} not found: {record_id}")
        self.check_fields(changes)
        data = current.model_dump()
        data.update({
            name: value for name, value in changes.items()
            if name not in self._immutable_fields
        })
        return self._model.model_validate(data)

    def replace(self, record: RecordT) -> RecordT:
        """Swap in a new version of an existing record, keeping its position."""
        if self.get(record.id) is None:
            raise NotFoundError(f"{self._model.__name__} not found: {record.id}")
        self._commit([
            record if existing.id == record.id else existing
            for existing in self._records
        ])
        return record

    def update(self, record_id: str, changes: dict[str, Any]) -> RecordT:
        """Merge changes into a record and persist the collection."""
        return self.replace(self.merge(record_id, changes))

    def remove(self, record_id: str) -> RecordT:
        """Delete a record and persist the collection."""
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(f"{self._model.__name__} not found: {record_id}")
        self._commit([existing for existing in self._records if existing.id != record_id])
        return record
