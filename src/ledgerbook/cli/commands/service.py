"""Service catalog commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.catalog import CatalogService
from ledgerbook.domain.errors import DomainError
from ledgerbook.utils.amount_parser import format_amount, parse_amount


@click.group()
def service_group():
    """Manage the service price catalog."""
    pass


@service_group.command("add")
@click.argument("name")
@click.argument("price")
@click.pass_context
def add_service(ctx, name: str, price: str):
    """Add a service with its price.

    Examples:
        ledgerbook service add "AC Cleaning Split 1 PK" 75000
    """
    db = ctx.obj["db"]
    catalog = CatalogService(db)

    try:
        service_price = parse_amount(price)
    except ValueError as e:
        click.echo(f"Error: Invalid price format: {e}", err=True)
        ctx.exit(1)

    try:
        service_id = catalog.create_service(name=name, price=service_price)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created service '{name.strip()}' (ID: {service_id}) at {format_amount(service_price)}")


@service_group.command("list")
@click.option("--search", help="Only services whose name contains this text")
@click.pass_context
def list_services(ctx, search: str | None):
    """List catalog services."""
    db = ctx.obj["db"]
    catalog = CatalogService(db)

    services = catalog.list_services(search=search)
    if not services:
        click.echo("No services found.")
        return

    click.echo(f"{'ID':<6} {'Name':<40} {'Price':>20}")
    click.echo("-" * 68)
    for service in services:
        click.echo(f"{service.id:<6} {service.name:<40} {format_amount(service.price):>20}")


@service_group.command("delete")
@click.argument("service_id", type=int)
@click.pass_context
def delete_service(ctx, service_id: int):
    """Delete a catalog service."""
    db = ctx.obj["db"]
    catalog = CatalogService(db)

    try:
        catalog.delete_service(service_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted service {service_id}")


def register_commands(cli: click.Group) -> None:
    """Register service commands with main CLI."""
    cli.add_command(service_group, name="service")
