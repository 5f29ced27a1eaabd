"""Sample data command."""

import click

from salonledger.cli.access import require_admin
from salonledger.domain.catalog import CatalogService
from salonledger.domain.employee import EmployeeService
from salonledger.domain.navigation import AdminTab

SAMPLE_EMPLOYEES = [
    # (name, role, commission)
    ("Diana", "Estilista Senior", 40),
    ("Yolita", "Maquilladora", 40),
]

SAMPLE_SERVICES = [
    "Cortes",
    "Maquillaje",
    "Manicure",
    "Pedicure",
    "Laceados",
    "Tintes",
]


def seed_sample_data(employee_service: EmployeeService, catalog: CatalogService) -> tuple[int, int]:
    """Create the sample roster and catalog. Returns (employees, services) created."""
    for name, role, commission in SAMPLE_EMPLOYEES:
        employee_service.create_employee(name=name, role=role, commission=commission)
    for name in SAMPLE_SERVICES:
        catalog.create_service(name)
    return len(SAMPLE_EMPLOYEES), len(SAMPLE_SERVICES)


@click.command("seed")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def seed(ctx, yes: bool):
    """Load sample employees and services."""
    require_admin(ctx, AdminTab.HOME)
    db = ctx.obj["db"]

    if not yes and not click.confirm("Load sample employees and services?"):
        click.echo("Cancelled.")
        return

    employees, services = seed_sample_data(EmployeeService(db), CatalogService(db))
    click.echo(f"Created {employees} employees and {services} services")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
