"""Service catalog commands."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.error_handling import handle_domain_error
from salonledger.domain.catalog import CatalogService
from salonledger.domain.errors import DomainError
from salonledger.domain.navigation import AdminTab


@click.group()
def service_group():
    """Manage the service catalog."""
    pass


@service_group.command("list")
@click.pass_context
def list_services(ctx):
    """List catalog services."""
    catalog = CatalogService(ctx.obj["db"])

    services = catalog.list_services()
    if not services:
        click.echo("No services found.")
        return

    for svc in services:
        click.echo(f"{svc.name} (ID: {svc.id})")


@service_group.command("add")
@click.argument("name")
@click.pass_context
def add_service(ctx, name: str):
    """Add a service to the catalog."""
    require_admin(ctx, AdminTab.HOME)
    catalog = CatalogService(ctx.obj["db"])

    try:
        service_id = catalog.create_service(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created service '{name.strip()}' (ID: {service_id})")


@service_group.command("delete")
@click.argument("service_id")
@click.pass_context
def delete_service(ctx, service_id: str):
    """Remove a service from the catalog."""
    require_admin(ctx, AdminTab.HOME)
    catalog = CatalogService(ctx.obj["db"])

    try:
        catalog.delete_service(service_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted service {service_id}")


def register_commands(cli):
    """Register service commands with main CLI."""
    cli.add_command(service_group, name="service")
