"""Transaction domain service."""

import logging
from typing import Optional
from datetime import date
from decimal import Decimal

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    PaymentStatus,
    Transaction as TransactionEntity,
    TransactionType,
)
from ledgerbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    already_paid,
    service_not_found,
    transaction_not_found,
)
from ledgerbook.domain.validation import (
    parse_payment_status,
    parse_transaction_type,
    validate_amount,
    validate_date,
    validate_text,
)

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        date: date,
        description: str,
        amount: Decimal,
        type: TransactionType | str,
        payment_status: PaymentStatus | str = PaymentStatus.PAID,
        client: Optional[str] = None,
    ) -> int:
        """Create a transaction.

        Args:
            date: Transaction date
            description: Description of the work or purchase
            amount: Non-negative amount
            type: "income" or "expense"
            payment_status: "paid" (default) or "unpaid"
            client: Optional client name

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field is invalid
        """
        txn_date = validate_date(date)
        txn_description = validate_text(description, "description")
        txn_amount = validate_amount(amount)
        txn_type = parse_transaction_type(type)
        status = parse_payment_status(payment_status)
        if client is not None:
            client = client.strip() or None

        transaction_id = self.db.create_transaction(
            date=txn_date,
            description=txn_description,
            amount=txn_amount,
            type=txn_type,
            payment_status=status,
            client=client,
        )
        logger.info(
            "Created %s transaction %d (%s, %s)", txn_type.value, transaction_id, txn_amount, status.value
        )
        return transaction_id

    def create_from_service(
        self,
        service_id: int,
        date: date,
        payment_status: PaymentStatus | str = PaymentStatus.PAID,
        client: Optional[str] = None,
    ) -> int:
        """Create an income transaction using a catalog service as template.

        The service name becomes the description and its price the amount.

        Raises:
            NotFoundError: If the service doesn't exist
            ValidationError: If any field is invalid
        """
        service = self.db.get_service(service_id)
        if service is None:
            raise NotFoundError(service_not_found(service_id))

        return self.create_transaction(
            date=date,
            description=service.name,
            amount=service.price,
            type=TransactionType.INCOME,
            payment_status=payment_status,
            client=client,
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID, raising NotFoundError when missing."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def mark_as_paid(self, transaction_id: int) -> None:
        """Move an unpaid transaction to paid.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ConflictError: If it is already paid
        """
        txn = self.require_transaction(transaction_id)
        if txn.payment_status == PaymentStatus.PAID:
            raise ConflictError(already_paid(transaction_id))

        self.db.update_payment_status(transaction_id, PaymentStatus.PAID)
        logger.info("Marked transaction %d as paid", transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %d", transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        type: Optional[TransactionType | str] = None,
        payment_status: Optional[PaymentStatus | str] = None,
        month: Optional[int] = None,
        client: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            type: Optional transaction type filter
            payment_status: Optional payment status filter
            month: Optional calendar month (1-12), any year
            client: Optional client name filter
            search: Optional case-insensitive description search term

        Returns:
            List of transaction entities in date order
        """
        if month is not None and not 1 <= month <= 12:
            raise ValidationError(f"Month must be between 1 and 12, got {month}", field="month")

        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            type=parse_transaction_type(type) if type is not None else None,
            payment_status=parse_payment_status(payment_status) if payment_status is not None else None,
            month=month,
            client=client,
            search=search.strip() if search else None,
        )
