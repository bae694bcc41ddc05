"""Client records."""

from typing import Any, Optional

from freelance_ledger.log import get_logger
from freelance_ledger.models import Client
from freelance_ledger.queries.filters import filter_clients
from freelance_ledger.services.records import RecordCollection
from freelance_ledger.services.storage import RecordStore, StorageKey

logger = get_logger(__name__)


class ClientService:
    """
    CRUD for clients.

    Deleting a client does not touch its projects or invoices; those
    keep the client id as a dangling reference.
    """

    def __init__(self, store: RecordStore):
        self._clients: RecordCollection[Client] = RecordCollection(
            store, StorageKey.CLIENTS, Client,
        )

    def list_clients(self) -> list[Client]:
        return self._clients.all()

    def get_client(self, client_id: str) -> Optional[Client]:
        return self._clients.get(client_id)

    def search(self, query: str) -> list[Client]:
        return filter_clients(self._clients.all(), query)

    def add_client(self, name: str, **fields: Any) -> Client:
        """
        Add a client.

        Raises:
            pydantic.ValidationError: If the name is blank
        """
        client = self._clients.add(Client(name=name, **fields))
        logger.info("client_added", client_id=client.id)
        return client

    def update_client(self, client_id: str, **changes: Any) -> Client:
        client = self._clients.update(client_id, changes)
        logger.info("client_updated", client_id=client_id, fields=sorted(changes))
        return client

    def delete_client(self, client_id: str) -> Client:
        client = self._clients.remove(client_id)
        logger.info("client_deleted", client_id=client_id)
        return client
