"""Main CLI entry point."""

import click
from ledgerbook.database.factories import DB_PATH_ENVVAR, create_sqlite_database
from ledgerbook.utils.logging_setup import LOG_LEVELS, configure_logging

# Import and register all commands at module level
from ledgerbook.cli.commands import (
    add,
    books,
    client,
    report,
    seed,
    service,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENVVAR} environment variable)",
    envvar=DB_PATH_ENVVAR,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LEDGERBOOK_LOG_LEVEL",
    help="Logging verbosity (logs go to stderr)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Ledgerbook - Double-entry bookkeeping for a small service business.

    Record income and expenses, keep a priced service catalog, and derive the
    journal, ledger and financial reports from the transaction log.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
service.register_commands(cli)
client.register_commands(cli)
books.register_commands(cli)
report.register_commands(cli)
seed.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
