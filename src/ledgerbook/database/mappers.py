"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the string columns and numeric
types of the schema never leak into the domain entities.
"""

from decimal import Decimal

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    Client as ORMClient,
    Service as ORMService,
    Transaction as ORMTransaction,
)


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(
        id=orm_service.id,
        name=orm_service.name,
        price=Decimal(orm_service.price),
        created_at=orm_service.created_at,
    )


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        phone=orm_client.phone,
        email=orm_client.email,
        notes=orm_client.notes,
        created_at=orm_client.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        amount=Decimal(orm_transaction.amount),
        type=domain.TransactionType(orm_transaction.type),
        payment_status=domain.PaymentStatus(orm_transaction.payment_status),
        created_at=orm_transaction.created_at,
        client=orm_transaction.client,
    )
