"""Chart of accounts, journal and ledger views."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.chart_of_accounts import list_accounts
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.journal import journal_totals
from ledgerbook.domain.reports import ReportService
from ledgerbook.utils.amount_parser import format_amount


def _amount_or_blank(amount) -> str:
    return format_amount(amount) if amount else ""


@click.command("accounts")
def show_accounts():
    """Show the chart of accounts."""
    click.echo(f"{'Code':<6} {'Name':<24} {'Category':<10} {'Normal':<6}")
    click.echo("-" * 50)
    for account in list_accounts():
        click.echo(
            f"{account.code:<6} {account.name:<24} {account.category.value:<10} "
            f"{account.normal_balance.value:<6}"
        )


@click.command("journal")
@click.pass_context
def show_journal(ctx):
    """Show the general journal derived from all transactions."""
    db = ctx.obj["db"]
    try:
        journal = ReportService(db).journal()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not journal:
        click.echo("No journal entries.")
        return

    click.echo(f"{'Date':<12} {'Account':<30} {'Debit':>20} {'Credit':>20}")
    click.echo("-" * 85)
    for entry in journal:
        click.echo(f"{str(entry.date):<12} {entry.description}")
        for line in entry.lines:
            # Credit lines are indented, as in a handwritten journal
            account = f"{line.account_code} {line.account_name}"
            if line.credit:
                account = "    " + account
            click.echo(
                f"{'':<12} {account:<30} {_amount_or_blank(line.debit):>20} "
                f"{_amount_or_blank(line.credit):>20}"
            )

    total_debit, total_credit = journal_totals(journal)
    click.echo("-" * 85)
    click.echo(f"{'TOTAL':<43} {format_amount(total_debit):>20} {format_amount(total_credit):>20}")


@click.command("ledger")
@click.option("--account", "account_code", help="Show postings for one account code (e.g., 101)")
@click.pass_context
def show_ledger(ctx, account_code: str | None):
    """Show ledger balances, or the postings of one account."""
    db = ctx.obj["db"]
    service = ReportService(db)

    if account_code is None:
        try:
            ledger = service.ledger()
        except DomainError as e:
            handle_domain_error(ctx, e)

        click.echo(f"{'Code':<6} {'Account':<24} {'Postings':>8} {'Balance':>20}")
        click.echo("-" * 61)
        for account in ledger:
            click.echo(
                f"{account.code:<6} {account.name:<24} {len(account.entries):>8} "
                f"{format_amount(account.balance):>20}"
            )
        return

    try:
        account = service.ledger_account(account_code)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{account.code} {account.name} ({account.category.value}, normal {account.normal_balance.value})")
    if not account.entries:
        click.echo("No postings.")
    else:
        click.echo(f"{'Date':<12} {'Description':<30} {'Debit':>20} {'Credit':>20}")
        click.echo("-" * 85)
        for posting in account.entries:
            click.echo(
                f"{str(posting.date):<12} {posting.description[:30]:<30} "
                f"{_amount_or_blank(posting.debit):>20} {_amount_or_blank(posting.credit):>20}"
            )
    click.echo(f"Balance: {format_amount(account.balance)}")


def register_commands(cli: click.Group) -> None:
    """Register bookkeeping view commands with main CLI."""
    cli.add_command(show_accounts)
    cli.add_command(show_journal)
    cli.add_command(show_ledger)
