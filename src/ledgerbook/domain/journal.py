"""Journal generation: one balanced two-line entry per transaction."""

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from ledgerbook.domain import chart_of_accounts as coa
from ledgerbook.domain.entities import (
    JournalEntry,
    JournalLine,
    PaymentStatus,
    Transaction,
    TransactionType,
)
from ledgerbook.domain.errors import InvariantViolation
from ledgerbook.domain.validation import (
    parse_payment_status,
    parse_transaction_type,
    validate_amount,
    validate_transaction,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# (type, status) -> (first line account, second line account)
# Income credits revenue first; expense debits the expense account first.
_POSTING_RULES = {
    (TransactionType.INCOME, PaymentStatus.PAID): (coa.SERVICE_REVENUE, coa.CASH),
    (TransactionType.INCOME, PaymentStatus.UNPAID): (coa.SERVICE_REVENUE, coa.ACCOUNTS_RECEIVABLE),
    (TransactionType.EXPENSE, PaymentStatus.PAID): (coa.OPERATING_EXPENSE, coa.CASH),
    (TransactionType.EXPENSE, PaymentStatus.UNPAID): (coa.OPERATING_EXPENSE, coa.ACCOUNTS_PAYABLE),
}


def _debit(code: str, amount: Decimal) -> JournalLine:
    return JournalLine(code, coa.get_account(code).name, debit=amount, credit=ZERO)


def _credit(code: str, amount: Decimal) -> JournalLine:
    return JournalLine(code, coa.get_account(code).name, debit=ZERO, credit=amount)


def journal_entry_for(transaction: Transaction) -> JournalEntry:
    """Build the journal entry for a single transaction.

    Args:
        transaction: Transaction to post

    Returns:
        Journal entry with exactly two lines

    Raises:
        ValidationError: If the transaction has an invalid field
        InvariantViolation: If the built entry does not balance
    """
    validate_transaction(transaction)
    amount = validate_amount(transaction.amount)
    txn_type = parse_transaction_type(transaction.type)
    status = parse_payment_status(transaction.payment_status)

    first, second = _POSTING_RULES[(txn_type, status)]
    if txn_type == TransactionType.INCOME:
        lines = (_credit(first, amount), _debit(second, amount))
    else:
        lines = (_debit(first, amount), _credit(second, amount))

    entry = JournalEntry(
        transaction_id=transaction.id,
        date=transaction.date,
        description=transaction.description,
        lines=lines,
    )
    check_balanced(entry, amount)
    return entry


def check_balanced(entry: JournalEntry, amount: Decimal) -> None:
    """Check sum(debit) == sum(credit) == amount for an entry."""
    if not (entry.total_debit == entry.total_credit == amount):
        raise InvariantViolation(
            f"Journal entry for transaction {entry.transaction_id} is unbalanced: "
            f"debit {entry.total_debit}, credit {entry.total_credit}, amount {amount}"
        )


def generate_journal(transactions: Sequence[Transaction]) -> list[JournalEntry]:
    """Generate journal entries for transactions, preserving their order.

    All transactions are validated before any entry is built, so an invalid
    transaction fails the whole call without partial output.
    """
    for transaction in transactions:
        validate_transaction(transaction)

    journal = [journal_entry_for(transaction) for transaction in transactions]
    logger.debug("Generated %d journal entries", len(journal))
    return journal


def journal_totals(entries: Iterable[JournalEntry]) -> tuple[Decimal, Decimal]:
    """Return total debit and total credit across entries."""
    total_debit = ZERO
    total_credit = ZERO
    for entry in entries:
        total_debit += entry.total_debit
        total_credit += entry.total_credit
    return total_debit, total_credit
