"""Add transaction command."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import PaymentStatus, TransactionType
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import format_amount, parse_amount
from ledgerbook.utils.date_parser import parse_date


@click.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="What the transaction was for")
@click.option("--amount", required=True, help="Transaction amount (e.g., 150000 or 'Rp 150,000')")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice([t.value for t in TransactionType]),
    required=True,
    help="Income or expense",
)
@click.option(
    "--status",
    type=click.Choice([s.value for s in PaymentStatus]),
    default=PaymentStatus.PAID.value,
    show_default=True,
    help="Payment status",
)
@click.option("--client", help="Client name")
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    description: str,
    amount: str,
    txn_type: str,
    status: str,
    client: str | None,
):
    """Add a transaction manually.

    Examples:
        ledgerbook add --type income --amount 75000 --description "AC cleaning"
        ledgerbook add --type expense --amount 850000 --description "Refrigerant" --status unpaid
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    # Parse date
    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    # Parse amount
    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = transaction_service.create_transaction(
            date=txn_date,
            description=description,
            amount=txn_amount,
            type=txn_type,
            payment_status=status,
            client=client,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Type: {txn_type} ({status})")
    click.echo(f"  Amount: {format_amount(txn_amount)}")
    click.echo(f"  Description: {description}")
    if client:
        click.echo(f"  Client: {client}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
