"""
Ledger Assembly

Wires every service to one record store. This is the entry point the
surrounding application (forms, pages, PDF export) talks to.
"""

from pathlib import Path
from typing import Optional, Union

from freelance_ledger.log import get_logger
from freelance_ledger.models import DashboardSummary
from freelance_ledger.queries import build_dashboard_summary
from freelance_ledger.services import (
    ClientService,
    InvoiceService,
    JsonFileRecordStore,
    ProfileService,
    ProjectService,
    RecordStore,
    TimeLogService,
)

logger = get_logger(__name__)


class Ledger:
    """All record services sharing a single store."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.profile = ProfileService(store)
        self.clients = ClientService(store)
        self.projects = ProjectService(store)
        self.time_logs = TimeLogService(store)
        self.invoices = InvoiceService(store, profile=self.profile)

    def dashboard(self) -> DashboardSummary:
        return build_dashboard_summary(
            invoices=self.invoices.list_invoices(),
            projects=self.projects.list_projects(),
            clients=self.clients.list_clients(),
            time_logs=self.time_logs.list_time_logs(),
        )


def open_ledger(data_dir: Optional[Union[str, Path]] = None) -> Ledger:
    """
    Open the ledger stored in a data directory.

    Args:
        data_dir: Directory of JSON documents. Defaults to the configured data_dir.
    """
    store = JsonFileRecordStore(data_dir)
    logger.info("ledger_opened", data_dir=str(store.data_dir))
    return Ledger(store)
