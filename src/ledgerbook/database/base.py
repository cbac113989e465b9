"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    Client,
    PaymentStatus,
    Service,
    Transaction,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for ledgerbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Service catalog operations
    @abstractmethod
    def create_service(self, name: str, price: Decimal) -> int:
        """Create a catalog service. Returns service ID."""
        pass

    @abstractmethod
    def get_service(self, service_id: int) -> Optional[Service]:
        """Get service by ID."""
        pass

    @abstractmethod
    def get_service_by_name(self, name: str) -> Optional[Service]:
        """Get service by exact name."""
        pass

    @abstractmethod
    def list_services(self) -> list[Service]:
        """List all services ordered by name."""
        pass

    @abstractmethod
    def delete_service(self, service_id: int) -> None:
        """Delete a service."""
        pass

    # Client operations
    @abstractmethod
    def create_client(
        self,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a client. Returns client ID."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients ordered by name."""
        pass

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete a client."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        date: date,
        description: str,
        amount: Decimal,
        type: TransactionType,
        payment_status: PaymentStatus,
        client: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_payment_status(self, transaction_id: int, payment_status: PaymentStatus) -> None:
        """Set the payment status of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        type: Optional[TransactionType] = None,
        payment_status: Optional[PaymentStatus] = None,
        month: Optional[int] = None,
        client: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, ordered by date then ID.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            type: Optional transaction type filter
            payment_status: Optional payment status filter
            month: Optional calendar month (1-12) in any year
            client: Optional exact client name filter
            search: Optional case-insensitive description substring
        """
        pass
