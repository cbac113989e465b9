"""Transaction management commands."""

import click
from ledgerbook.cli.date_filters import period_options, resolve_cli_date_range
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import PaymentStatus, TransactionType
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import format_amount
from ledgerbook.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@period_options
@click.option("--type", "txn_type", type=click.Choice([t.value for t in TransactionType]), help="Only income or expense")
@click.option("--status", type=click.Choice([s.value for s in PaymentStatus]), help="Only paid or unpaid")
@click.option("--month", type=click.IntRange(1, 12), help="Calendar month (1-12), any year")
@click.option("--client", help="Client name")
@click.option("--search", help="Case-insensitive text to find in descriptions")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
    txn_type: str | None,
    status: str | None,
    month: int | None,
    client: str | None,
    search: str | None,
):
    """View transactions with optional filters."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "this-year": this_year,
            "last-year": last_year,
        },
    )

    try:
        transactions = service.list_transactions(
            start_date=start,
            end_date=end,
            type=txn_type,
            payment_status=status,
            month=month,
            client=client,
            search=search,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<8} {'Status':<7} {'Amount':>20}  {'Description':<30} {'Client':<15}"
    )
    click.echo("-" * 100)

    for txn in transactions:
        description = txn.description[:30]
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.type.value:<8} {txn.payment_status.value:<7} "
            f"{format_amount(txn.amount):>20}  {description:<30} {(txn.client or ''):<15}"
        )

    total_income = sum(txn.amount for txn in transactions if txn.type == TransactionType.INCOME)
    total_expense = sum(txn.amount for txn in transactions if txn.type == TransactionType.EXPENSE)
    click.echo("-" * 100)
    click.echo(
        f"{'TOTAL':<6} Income: {format_amount(total_income)} | "
        f"Expense: {format_amount(total_expense)} | Count: {len(transactions)}"
    )


@transaction_group.command("pay")
@click.argument("transaction_id", type=int)
@click.pass_context
def pay_transaction(ctx, transaction_id: int) -> None:
    """Mark an unpaid transaction as paid.

    Examples:
        ledgerbook transaction pay 12
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.mark_as_paid(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Marked transaction {transaction_id} as paid")


@transaction_group.command("from-service")
@click.argument("service_id", type=int)
@click.option("--date", default="today", show_default=True, help="Transaction date")
@click.option(
    "--status",
    type=click.Choice([s.value for s in PaymentStatus]),
    default=PaymentStatus.PAID.value,
    show_default=True,
    help="Payment status",
)
@click.option("--client", help="Client name")
@click.pass_context
def transaction_from_service(ctx, service_id: int, date: str, status: str, client: str | None) -> None:
    """Record income using a catalog service's name and price.

    Examples:
        ledgerbook transaction from-service 3 --client "Budi" --status unpaid
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_from_service(
            service_id=service_id, date=txn_date, payment_status=status, client=client
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    txn = service.require_transaction(transaction_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Amount: {format_amount(txn.amount)}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        ledgerbook transaction delete 1
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    # Get transaction info for display
    txn = transaction_service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    # Confirm deletion
    if not yes and not click.confirm(
        f"Delete transaction {transaction_id} ({txn.description}, {format_amount(txn.amount)})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        transaction_service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
