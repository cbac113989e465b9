"""Field validation for transactions and catalog entries.

Every check raises ValidationError naming the offending field, so callers can
report which input was rejected.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from ledgerbook.domain.entities import PaymentStatus, Transaction, TransactionType
from ledgerbook.domain.errors import ValidationError

# Amounts are stored as Numeric(15, 2)
AMOUNT_PLACES = 2
MAX_INTEGER_DIGITS = 13


def parse_transaction_type(value: Any) -> TransactionType:
    """Coerce a value to a TransactionType."""
    try:
        return TransactionType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in TransactionType)
        raise ValidationError(
            f"Invalid transaction type '{value}' (expected one of: {allowed})",
            field="type",
        ) from None


def parse_payment_status(value: Any) -> PaymentStatus:
    """Coerce a value to a PaymentStatus."""
    try:
        return PaymentStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in PaymentStatus)
        raise ValidationError(
            f"Invalid payment status '{value}' (expected one of: {allowed})",
            field="payment_status",
        ) from None


def validate_amount(value: Any, field: str = "amount") -> Decimal:
    """Check that a value is a finite, non-negative money amount.

    Args:
        value: Decimal, int or numeric string
        field: Field name reported on failure

    Returns:
        Amount as Decimal
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(f"Invalid {field} {value!r}: use Decimal or int", field=field)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid {field} {value!r}", field=field) from None
    if not amount.is_finite():
        raise ValidationError(f"Invalid {field} {value!r}", field=field)
    if amount < 0:
        raise ValidationError(f"{field.capitalize()} cannot be negative: {amount}", field=field)
    if amount.normalize().as_tuple().exponent < -AMOUNT_PLACES:
        raise ValidationError(
            f"{field.capitalize()} has more than {AMOUNT_PLACES} decimal places: {amount}", field=field
        )
    if amount >= Decimal(10) ** MAX_INTEGER_DIGITS:
        raise ValidationError(
            f"{field.capitalize()} exceeds {MAX_INTEGER_DIGITS} integer digits: {amount}", field=field
        )
    return amount


def validate_date(value: Any) -> date:
    """Check that a value is a calendar date without a time component.

    ISO formatted strings (YYYY-MM-DD) are accepted and converted.
    """
    if isinstance(value, datetime):
        raise ValidationError(f"Date must not carry a time component: {value}", field="date")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise ValidationError(f"Malformed date {value!r}", field="date")


def validate_text(value: Any, field: str) -> str:
    """Check that a required text field is present and not blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} is required", field=field)
    return value.strip()


def validate_transaction(transaction: Transaction) -> None:
    """Validate every field the journal generator relies on.

    Raises:
        ValidationError: On the first offending field
    """
    if not isinstance(transaction.date, date) or isinstance(transaction.date, datetime):
        raise ValidationError(
            f"Transaction date must be a date, got {transaction.date!r}", field="date"
        )
    validate_amount(transaction.amount)
    parse_transaction_type(transaction.type)
    parse_payment_status(transaction.payment_status)
