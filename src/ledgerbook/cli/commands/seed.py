"""Sample data command."""

import click
from ledgerbook.domain.sample_data import SampleDataService


@click.command("seed")
@click.option("--seed", "random_seed", type=int, help="Random seed for reproducible data")
@click.option("--count", type=click.IntRange(min=0), default=50, show_default=True, help="Transactions to generate")
@click.pass_context
def seed(ctx, random_seed: int | None, count: int):
    """Fill the book with a sample service catalog and transactions.

    Existing data is kept; catalog services already present are skipped.
    """
    db = ctx.obj["db"]
    services_created, transactions_created = SampleDataService(db).seed(
        random_seed=random_seed, count=count
    )
    click.echo(f"Created {services_created} service(s) and {transactions_created} transaction(s)")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
