"""Services package."""

from freelance_ledger.services.clients import ClientService
from freelance_ledger.services.invoices import InvoiceService
from freelance_ledger.services.profile import ProfileService, profile_defaults
from freelance_ledger.services.projects import ProjectService
from freelance_ledger.services.records import RecordCollection
from freelance_ledger.services.storage import (
    InMemoryRecordStore,
    JsonFileRecordStore,
    NotFoundError,
    RecordStore,
    StorageError,
    StorageKey,
)
from freelance_ledger.services.time_logs import TimeLogService

__all__ = [
    # Record services
    "ClientService",
    "InvoiceService",
    "ProfileService",
    "ProjectService",
    "RecordCollection",
    "TimeLogService",
    "profile_defaults",
    # Storage
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "NotFoundError",
    "RecordStore",
    "StorageError",
    "StorageKey",
]
