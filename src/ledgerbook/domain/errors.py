"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Attributes:
        field: Name of the offending field, if known
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvariantViolation(RuntimeError):
    """Internal bookkeeping consistency failure.

    Raised when a generated journal entry does not balance or the balance
    sheet identity does not hold. Not a DomainError: valid input never
    produces it.
    """


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def service_not_found(service_id: int) -> str:
    """Return message for missing catalog service."""
    return f"Service {service_id} not found"


def client_not_found(client_id: int) -> str:
    """Return message for missing client."""
    return f"Client {client_id} not found"


def account_not_found(code: str) -> str:
    """Return message for unknown chart-of-accounts code."""
    return f"Account '{code}' not found in chart of accounts"


def duplicate_service_name(name: str) -> str:
    """Return message for duplicate service name."""
    return f"Service with name '{name}' already exists"


def already_paid(transaction_id: int) -> str:
    """Return message when marking a paid transaction as paid."""
    return f"Transaction {transaction_id} is already paid"
