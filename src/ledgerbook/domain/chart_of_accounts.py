"""Fixed chart of accounts."""

from types import MappingProxyType
from typing import Mapping

from ledgerbook.domain.entities import Account, AccountCategory, NormalBalance
from ledgerbook.domain.errors import NotFoundError, account_not_found

CASH = "101"
ACCOUNTS_RECEIVABLE = "102"
ACCOUNTS_PAYABLE = "201"
OWNER_CAPITAL = "301"
RETAINED_EARNINGS = "302"
OWNER_DRAWINGS = "303"
SERVICE_REVENUE = "401"
OPERATING_EXPENSE = "501"

_ACCOUNTS = (
    Account(CASH, "Cash & Bank", AccountCategory.ASSET, NormalBalance.DEBIT),
    Account(ACCOUNTS_RECEIVABLE, "Accounts Receivable", AccountCategory.ASSET, NormalBalance.DEBIT),
    Account(ACCOUNTS_PAYABLE, "Accounts Payable", AccountCategory.LIABILITY, NormalBalance.CREDIT),
    Account(OWNER_CAPITAL, "Owner's Capital", AccountCategory.EQUITY, NormalBalance.CREDIT),
    Account(RETAINED_EARNINGS, "Retained Earnings", AccountCategory.EQUITY, NormalBalance.CREDIT),
    # Drawings are not posted to yet
    Account(OWNER_DRAWINGS, "Owner's Drawings", AccountCategory.EQUITY, NormalBalance.DEBIT),
    Account(SERVICE_REVENUE, "Service Revenue", AccountCategory.REVENUE, NormalBalance.CREDIT),
    Account(OPERATING_EXPENSE, "Operating Expense", AccountCategory.EXPENSE, NormalBalance.DEBIT),
)

CHART_OF_ACCOUNTS: Mapping[str, Account] = MappingProxyType(
    {account.code: account for account in _ACCOUNTS}
)


def get_account(code: str) -> Account:
    """Look up an account by code.

    Args:
        code: Account code (e.g., "101")

    Returns:
        Account entry

    Raises:
        NotFoundError: If the code is not in the chart
    """
    try:
        return CHART_OF_ACCOUNTS[code]
    except KeyError:
        raise NotFoundError(account_not_found(code)) from None


def list_accounts() -> list[Account]:
    """Return all accounts in chart order."""
    return list(CHART_OF_ACCOUNTS.values())
