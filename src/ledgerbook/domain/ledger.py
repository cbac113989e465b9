"""General ledger aggregation."""

import logging
from decimal import Decimal
from typing import Sequence

from ledgerbook.domain.chart_of_accounts import CHART_OF_ACCOUNTS
from ledgerbook.domain.entities import (
    JournalEntry,
    LedgerAccount,
    LedgerPosting,
    NormalBalance,
)
from ledgerbook.domain.errors import InvariantViolation, account_not_found

logger = logging.getLogger(__name__)


def generate_ledger(journal: Sequence[JournalEntry]) -> list[LedgerAccount]:
    """Fold journal entries into one ledger account per chart account.

    Accounts with no postings are included with a zero balance. Postings keep
    the order of the journal.

    Args:
        journal: Journal entries in transaction order

    Returns:
        Ledger accounts in chart order

    Raises:
        InvariantViolation: If a line references an account outside the chart
    """
    balances: dict[str, Decimal] = {code: Decimal("0") for code in CHART_OF_ACCOUNTS}
    postings: dict[str, list[LedgerPosting]] = {code: [] for code in CHART_OF_ACCOUNTS}

    for entry in journal:
        for line in entry.lines:
            account = CHART_OF_ACCOUNTS.get(line.account_code)
            if account is None:
                raise InvariantViolation(account_not_found(line.account_code))

            postings[account.code].append(
                LedgerPosting(
                    date=entry.date,
                    description=entry.description,
                    debit=line.debit,
                    credit=line.credit,
                )
            )
            if account.normal_balance == NormalBalance.DEBIT:
                balances[account.code] += line.debit - line.credit
            else:
                balances[account.code] += line.credit - line.debit

    logger.debug("Posted %d journal entries to the ledger", len(journal))
    return [
        LedgerAccount(
            code=account.code,
            name=account.name,
            category=account.category,
            normal_balance=account.normal_balance,
            balance=balances[account.code],
            entries=tuple(postings[account.code]),
        )
        for account in CHART_OF_ACCOUNTS.values()
    ]


def ledger_by_code(ledger: Sequence[LedgerAccount]) -> dict[str, LedgerAccount]:
    """Index ledger accounts by account code."""
    return {account.code: account for account in ledger}
