"""Client commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.client import ClientService
from ledgerbook.domain.errors import DomainError


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("add")
@click.argument("name")
@click.option("--phone", help="Phone number")
@click.option("--email", help="Email address")
@click.option("--notes", help="Notes about the client")
@click.pass_context
def add_client(ctx, name: str, phone: str | None, email: str | None, notes: str | None):
    """Add a client."""
    db = ctx.obj["db"]
    service = ClientService(db)

    try:
        client_id = service.create_client(name=name, phone=phone, email=email, notes=notes)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created client '{name.strip()}' (ID: {client_id})")


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List clients."""
    db = ctx.obj["db"]
    clients = ClientService(db).list_clients()
    if not clients:
        click.echo("No clients found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Phone':<16} {'Email':<30}")
    click.echo("-" * 84)
    for client in clients:
        click.echo(
            f"{client.id:<6} {client.name:<30} {(client.phone or ''):<16} {(client.email or ''):<30}"
        )


@client_group.command("delete")
@click.argument("client_id", type=int)
@click.pass_context
def delete_client(ctx, client_id: int):
    """Delete a client."""
    db = ctx.obj["db"]
    try:
        ClientService(db).delete_client(client_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted client {client_id}")


def register_commands(cli: click.Group) -> None:
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
