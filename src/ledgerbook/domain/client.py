"""Client domain service."""

import logging
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Client as ClientEntity
from ledgerbook.domain.errors import NotFoundError, client_not_found
from ledgerbook.domain.validation import validate_text

logger = logging.getLogger(__name__)


class ClientService:
    """Service for managing client contacts."""

    def __init__(self, db: Database):
        self.db = db

    def create_client(
        self,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a client. Returns client ID.

        Raises:
            ValidationError: If name is blank
        """
        name = validate_text(name, "name")
        client_id = self.db.create_client(name=name, phone=phone, email=email, notes=notes)
        logger.info("Created client %d '%s'", client_id, name)
        return client_id

    def get_client(self, client_id: int) -> Optional[ClientEntity]:
        return self.db.get_client(client_id)

    def list_clients(self) -> list[ClientEntity]:
        return self.db.list_clients()

    def delete_client(self, client_id: int) -> None:
        """Delete a client.

        Raises:
            NotFoundError: If the client doesn't exist
        """
        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))
        self.db.delete_client(client_id)
        logger.info("Deleted client %d", client_id)
