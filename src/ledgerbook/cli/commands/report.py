"""Financial report commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.reports import ReportService
from ledgerbook.utils.amount_parser import format_amount

WIDTH = 60


def _line(label: str, amount, indent: int = 0) -> None:
    label = " " * indent + label
    click.echo(f"{label:<{WIDTH - 22}} {format_amount(amount):>21}")


@click.group()
def report_group():
    """Financial reports derived from the transaction log."""
    pass


@report_group.command("profit-loss")
@click.option("--year", type=int, help="Calendar year (defaults to current year)")
@click.pass_context
def profit_loss(ctx, year: int | None):
    """Monthly profit and loss for a year."""
    report = ReportService(ctx.obj["db"]).profit_and_loss(year)

    click.echo(f"Profit & Loss {report.year}")
    click.echo("-" * 72)
    click.echo(f"{'Month':<8} {'Income':>20} {'Expense':>20} {'Profit':>20}")
    click.echo("-" * 72)
    for row in report.rows:
        click.echo(
            f"{row.label:<8} {format_amount(row.income):>20} {format_amount(row.expense):>20} "
            f"{format_amount(row.profit):>20}"
        )
    click.echo("-" * 72)
    click.echo(
        f"{'Total':<8} {format_amount(report.total_income):>20} "
        f"{format_amount(report.total_expense):>20} {format_amount(report.total_profit):>20}"
    )


@report_group.command("balance-sheet")
@click.pass_context
def balance_sheet(ctx):
    """Balance sheet as of now."""
    try:
        sheet = ReportService(ctx.obj["db"]).balance_sheet()
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Balance Sheet")
    click.echo("-" * WIDTH)
    click.echo("Assets")
    _line("Cash & Bank", sheet.cash, indent=2)
    _line("Accounts Receivable", sheet.accounts_receivable, indent=2)
    _line("Total Assets", sheet.total_assets)
    click.echo("Liabilities")
    _line("Accounts Payable", sheet.accounts_payable, indent=2)
    _line("Total Liabilities", sheet.total_liabilities)
    click.echo("Equity")
    _line("Owner's Capital", sheet.owner_capital, indent=2)
    _line("Net Income", sheet.net_income, indent=2)
    _line("Total Equity", sheet.total_equity)
    click.echo("-" * WIDTH)
    _line("Liabilities + Equity", sheet.total_liabilities + sheet.total_equity)
    click.echo("Balanced: yes" if sheet.is_balanced else "Balanced: NO")


@report_group.command("cash-flow")
@click.pass_context
def cash_flow(ctx):
    """Cash flow from paid transactions."""
    flow = ReportService(ctx.obj["db"]).cash_flow()

    click.echo("Cash Flow")
    click.echo("-" * WIDTH)
    _line("Cash In (paid income)", flow.cash_in)
    _line("Cash Out (paid expenses)", flow.cash_out)
    click.echo("-" * WIDTH)
    _line("Net Cash Flow", flow.net)


@report_group.command("capital")
@click.pass_context
def capital(ctx):
    """Statement of changes in owner's capital."""
    try:
        change = ReportService(ctx.obj["db"]).capital_change()
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Capital Change")
    click.echo("-" * WIDTH)
    _line("Beginning Capital", change.beginning_capital)
    _line("Net Income", change.net_income)
    _line("Drawings", change.drawings)
    click.echo("-" * WIDTH)
    _line("Ending Capital", change.ending_capital)


@report_group.command("sales")
@click.pass_context
def sales(ctx):
    """Total sales recognized as revenue."""
    try:
        report = ReportService(ctx.obj["db"]).sales()
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Sales")
    click.echo("-" * WIDTH)
    _line("Total Sales", report.total_sales)
    click.echo(f"Sales recorded: {report.sale_count}")


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Headline figures: cash position, this month and outstanding balances."""
    try:
        summary = ReportService(ctx.obj["db"]).dashboard()
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Dashboard")
    click.echo("-" * WIDTH)
    _line("Paid Income", summary.paid_income)
    _line("Paid Expenses", summary.paid_expenses)
    _line("Profit", summary.profit)
    _line("Outstanding Receivables", summary.outstanding_receivables)
    _line("Outstanding Payables", summary.outstanding_payables)
    click.echo("This month")
    _line("Income", summary.month_income, indent=2)
    _line("Expenses", summary.month_expenses, indent=2)
    _line("Profit", summary.month_profit, indent=2)
    margin = summary.month_margin
    click.echo(f"  Margin: {margin:.1f}%" if margin is not None else "  Margin: n/a")
    click.echo("Trend (paid)")
    for month in summary.trend:
        if month.income or month.expense:
            click.echo(
                f"  {month.label:<5} income {format_amount(month.income):>18}  "
                f"expense {format_amount(month.expense):>18}"
            )


def register_commands(cli: click.Group) -> None:
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
    cli.add_command(dashboard)
