"""Report derivations over transactions and the ledger."""

import calendar
import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain import chart_of_accounts as coa
from ledgerbook.domain.entities import (
    BalanceSheet,
    CapitalChange,
    CashFlow,
    DashboardSummary,
    JournalEntry,
    LedgerAccount,
    MonthlyCashTrend,
    PaymentStatus,
    ProfitLossReport,
    ProfitLossRow,
    SalesReport,
    Transaction,
    TransactionType,
)
from ledgerbook.domain.errors import InvariantViolation
from ledgerbook.domain.journal import generate_journal
from ledgerbook.domain.ledger import generate_ledger, ledger_by_code

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Beginning capital and drawings are not tracked yet
BEGINNING_CAPITAL = ZERO
DRAWINGS = ZERO


def _sum_amounts(
    transactions: Sequence[Transaction],
    txn_type: TransactionType,
    status: Optional[PaymentStatus] = None,
) -> Decimal:
    return sum(
        (
            Decimal(txn.amount)
            for txn in transactions
            if txn.type == txn_type and (status is None or txn.payment_status == status)
        ),
        ZERO,
    )


def _account(ledger: Sequence[LedgerAccount], code: str) -> LedgerAccount:
    accounts = ledger_by_code(ledger)
    if code not in accounts:
        raise InvariantViolation(f"Ledger is missing account {code}")
    return accounts[code]


def _balance(ledger: Sequence[LedgerAccount], code: str) -> Decimal:
    return _account(ledger, code).balance


def net_income(ledger: Sequence[LedgerAccount]) -> Decimal:
    """Revenue balance minus expense balance."""
    return _balance(ledger, coa.SERVICE_REVENUE) - _balance(ledger, coa.OPERATING_EXPENSE)


def profit_and_loss(transactions: Sequence[Transaction], year: int) -> ProfitLossReport:
    """Monthly income, expense and profit for January..December of a year.

    Paid and unpaid transactions both count.
    """
    rows = []
    for month in range(1, 13):
        in_month = [txn for txn in transactions if txn.date.year == year and txn.date.month == month]
        rows.append(
            ProfitLossRow(
                month=month,
                label=calendar.month_abbr[month],
                income=_sum_amounts(in_month, TransactionType.INCOME),
                expense=_sum_amounts(in_month, TransactionType.EXPENSE),
            )
        )
    return ProfitLossReport(year=year, rows=tuple(rows))


def balance_sheet(ledger: Sequence[LedgerAccount]) -> BalanceSheet:
    """Balance sheet snapshot from ledger balances.

    Net income is shown inside equity rather than closed to retained earnings.

    Raises:
        InvariantViolation: If assets != liabilities + equity
    """
    sheet = BalanceSheet(
        cash=_balance(ledger, coa.CASH),
        accounts_receivable=_balance(ledger, coa.ACCOUNTS_RECEIVABLE),
        accounts_payable=_balance(ledger, coa.ACCOUNTS_PAYABLE),
        owner_capital=_balance(ledger, coa.OWNER_CAPITAL),
        net_income=net_income(ledger),
    )
    if not sheet.is_balanced:
        raise InvariantViolation(
            f"Balance sheet does not balance: assets {sheet.total_assets} != "
            f"liabilities {sheet.total_liabilities} + equity {sheet.total_equity}"
        )
    return sheet


def cash_flow(transactions: Sequence[Transaction]) -> CashFlow:
    """Cash in and out from paid transactions only."""
    return CashFlow(
        cash_in=_sum_amounts(transactions, TransactionType.INCOME, PaymentStatus.PAID),
        cash_out=_sum_amounts(transactions, TransactionType.EXPENSE, PaymentStatus.PAID),
    )


def capital_change(ledger: Sequence[LedgerAccount]) -> CapitalChange:
    """Beginning capital plus net income less drawings."""
    return CapitalChange(
        beginning_capital=BEGINNING_CAPITAL,
        net_income=net_income(ledger),
        drawings=DRAWINGS,
    )


def sales(ledger: Sequence[LedgerAccount]) -> SalesReport:
    """Total sales from the revenue account."""
    revenue = _account(ledger, coa.SERVICE_REVENUE)
    return SalesReport(total_sales=revenue.balance, sale_count=len(revenue.entries))


def dashboard_summary(transactions: Sequence[Transaction], today: date) -> DashboardSummary:
    """Headline cash figures, outstanding balances and this year's paid trend."""
    paid = [txn for txn in transactions if txn.payment_status == PaymentStatus.PAID]
    this_month = [
        txn for txn in paid if txn.date.year == today.year and txn.date.month == today.month
    ]

    trend = []
    for month in range(1, 13):
        in_month = [txn for txn in paid if txn.date.year == today.year and txn.date.month == month]
        trend.append(
            MonthlyCashTrend(
                month=month,
                label=calendar.month_abbr[month],
                income=_sum_amounts(in_month, TransactionType.INCOME),
                expense=_sum_amounts(in_month, TransactionType.EXPENSE),
            )
        )

    return DashboardSummary(
        paid_income=_sum_amounts(paid, TransactionType.INCOME),
        paid_expenses=_sum_amounts(paid, TransactionType.EXPENSE),
        outstanding_receivables=_sum_amounts(transactions, TransactionType.INCOME, PaymentStatus.UNPAID),
        outstanding_payables=_sum_amounts(transactions, TransactionType.EXPENSE, PaymentStatus.UNPAID),
        month_income=_sum_amounts(this_month, TransactionType.INCOME),
        month_expenses=_sum_amounts(this_month, TransactionType.EXPENSE),
        trend=tuple(trend),
    )


class ReportService:
    """Service for deriving journal, ledger and reports from stored transactions.

    Nothing is cached: each call reads the current transaction set and
    recomputes from scratch.
    """

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def _transactions(self) -> list[Transaction]:
        return self.db.list_transactions()

    def journal(self) -> list[JournalEntry]:
        """Journal entries for all transactions."""
        return generate_journal(self._transactions())

    def ledger(self) -> list[LedgerAccount]:
        """Ledger accounts for all transactions."""
        return generate_ledger(self.journal())

    def ledger_account(self, code: str) -> LedgerAccount:
        """Ledger view of one account.

        Raises:
            NotFoundError: If the code is not in the chart
        """
        coa.get_account(code)
        return _account(self.ledger(), code)

    def profit_and_loss(self, year: Optional[int] = None) -> ProfitLossReport:
        """Monthly profit and loss, defaulting to the current year."""
        if year is None:
            year = date.today().year
        return profit_and_loss(self._transactions(), year)

    def balance_sheet(self) -> BalanceSheet:
        sheet = balance_sheet(self.ledger())
        logger.debug(
            "Balance sheet: assets=%s liabilities=%s equity=%s",
            sheet.total_assets,
            sheet.total_liabilities,
            sheet.total_equity,
        )
        return sheet

    def cash_flow(self) -> CashFlow:
        return cash_flow(self._transactions())

    def capital_change(self) -> CapitalChange:
        return capital_change(self.ledger())

    def sales(self) -> SalesReport:
        return sales(self.ledger())

    def dashboard(self, today: Optional[date] = None) -> DashboardSummary:
        """Dashboard figures as of today."""
        return dashboard_summary(self._transactions(), today or date.today())
