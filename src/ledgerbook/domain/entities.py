"""Domain model entities for ledgerbook.

These are pure data classes representing business concepts, independent of
database schema. Journal entries, ledger accounts and reports are derived
from transactions on every call and are never stored.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class PaymentStatus(str, Enum):
    """Whether cash has moved for a transaction."""

    PAID = "paid"
    UNPAID = "unpaid"


class AccountCategory(str, Enum):
    """The five account categories of double-entry bookkeeping."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


class NormalBalance(str, Enum):
    """Side whose increase raises an account's balance."""

    DEBIT = "Debit"
    CREDIT = "Credit"


@dataclass(frozen=True)
class Account:
    """Chart-of-accounts entry."""

    code: str
    name: str
    category: AccountCategory
    normal_balance: NormalBalance


@dataclass(frozen=True)
class Service:
    """Catalog service with a reusable price."""

    id: int
    name: str
    price: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Client:
    """Customer contact record."""

    id: int
    name: str
    phone: Optional[str]
    email: Optional[str]
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    payment_status: PaymentStatus
    created_at: datetime
    client: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID


@dataclass(frozen=True)
class JournalLine:
    """One debit or credit posting of a journal entry."""

    account_code: str
    account_name: str
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class JournalEntry:
    """Balanced journal entry derived from one transaction."""

    transaction_id: int
    date: date
    description: str
    lines: tuple[JournalLine, ...]

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit for line in self.lines), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit for line in self.lines), Decimal("0"))


@dataclass(frozen=True)
class LedgerPosting:
    """Journal line as it appears in an account's history."""

    date: date
    description: str
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class LedgerAccount:
    """Per-account balance and posting history."""

    code: str
    name: str
    category: AccountCategory
    normal_balance: NormalBalance
    balance: Decimal
    entries: tuple[LedgerPosting, ...] = ()


@dataclass(frozen=True)
class ProfitLossRow:
    """Income and expense totals for one calendar month."""

    month: int
    label: str
    income: Decimal
    expense: Decimal

    @property
    def profit(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class ProfitLossReport:
    """Monthly profit and loss for one calendar year."""

    year: int
    rows: tuple[ProfitLossRow, ...]

    @property
    def total_income(self) -> Decimal:
        return sum((row.income for row in self.rows), Decimal("0"))

    @property
    def total_expense(self) -> Decimal:
        return sum((row.expense for row in self.rows), Decimal("0"))

    @property
    def total_profit(self) -> Decimal:
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class BalanceSheet:
    """Ledger-based balance sheet snapshot."""

    cash: Decimal
    accounts_receivable: Decimal
    accounts_payable: Decimal
    owner_capital: Decimal
    net_income: Decimal

    @property
    def total_assets(self) -> Decimal:
        return self.cash + self.accounts_receivable

    @property
    def total_liabilities(self) -> Decimal:
        return self.accounts_payable

    @property
    def total_equity(self) -> Decimal:
        return self.owner_capital + self.net_income

    @property
    def is_balanced(self) -> bool:
        return self.total_assets == self.total_liabilities + self.total_equity


@dataclass(frozen=True)
class CashFlow:
    """Cash movement from paid transactions."""

    cash_in: Decimal
    cash_out: Decimal

    @property
    def net(self) -> Decimal:
        return self.cash_in - self.cash_out


@dataclass(frozen=True)
class CapitalChange:
    """Statement of changes in owner's capital."""

    beginning_capital: Decimal
    net_income: Decimal
    drawings: Decimal

    @property
    def ending_capital(self) -> Decimal:
        return self.beginning_capital + self.net_income - self.drawings


@dataclass(frozen=True)
class SalesReport:
    """Total recognized revenue."""

    total_sales: Decimal
    sale_count: int


@dataclass(frozen=True)
class MonthlyCashTrend:
    """Paid income and expense for one month of the dashboard trend."""

    month: int
    label: str
    income: Decimal
    expense: Decimal

    @property
    def profit(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for the current state of the books."""

    paid_income: Decimal
    paid_expenses: Decimal
    outstanding_receivables: Decimal
    outstanding_payables: Decimal
    month_income: Decimal
    month_expenses: Decimal
    trend: tuple[MonthlyCashTrend, ...]

    @property
    def profit(self) -> Decimal:
        return self.paid_income - self.paid_expenses

    @property
    def month_profit(self) -> Decimal:
        return self.month_income - self.month_expenses

    @property
    def month_margin(self) -> Optional[Decimal]:
        """Current month profit as a percentage of income, None without income."""
        if self.month_income == 0:
            return None
        return self.month_profit / self.month_income * 100
