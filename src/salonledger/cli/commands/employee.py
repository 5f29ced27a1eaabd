"""Employee management commands."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.employee_resolution import resolve_employee_or_exit
from salonledger.domain.employee import EmployeeService
from salonledger.domain.entities import DEFAULT_COMMISSION
from salonledger.domain.navigation import AdminTab
from salonledger.utils.commission import coerce_commission


@click.group()
def employee_group():
    """Manage staff."""
    pass


@employee_group.command("list")
@click.pass_context
def list_employees(ctx):
    """List all employees."""
    require_admin(ctx, AdminTab.HOME)
    service = EmployeeService(ctx.obj["db"])

    employees = service.list_employees()
    if not employees:
        click.echo("No employees found. Run 'seed' to load sample data.")
        return

    click.echo(f"\n{'ID':<34} {'Name':<20} {'Role':<20} {'Comm.':>6}")
    click.echo("-" * 83)
    for emp in employees:
        click.echo(
            f"{emp.id:<34} {emp.name:<20} {emp.role:<20} "
            f"{coerce_commission(emp.commission):>5g}%"
        )


@employee_group.command("add")
@click.argument("name")
@click.option("--role", help="Job title (default: Profesional)")
@click.option(
    "--commission",
    default=str(DEFAULT_COMMISSION),
    show_default=True,
    help="Commission percentage",
)
@click.option("--photo", help="Photo URL or path")
@click.pass_context
def add_employee(ctx, name: str, role: str | None, commission: str, photo: str | None):
    """Add an employee."""
    require_admin(ctx, AdminTab.HOME)
    service = EmployeeService(ctx.obj["db"])

    try:
        employee_id = service.create_employee(
            name=name, role=role, commission=commission, photo=photo
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Created employee '{name}' (ID: {employee_id})")


@employee_group.command("commission")
@click.argument("employee")
@click.argument("value")
@click.pass_context
def set_commission(ctx, employee: str, value: str):
    """Set an employee's commission percentage.

    The value is stored as typed; non-numeric text counts as 0%.
    """
    require_admin(ctx, AdminTab.REPORTS)
    service = EmployeeService(ctx.obj["db"])
    emp = resolve_employee_or_exit(ctx, service, employee)

    try:
        service.update_commission(emp.id, value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Commission for {emp.name} set to {coerce_commission(value):g}%")


@employee_group.command("delete")
@click.argument("employee")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_employee(ctx, employee: str, yes: bool):
    """Delete an employee. Their past charges stay in the ledger."""
    require_admin(ctx, AdminTab.HOME)
    service = EmployeeService(ctx.obj["db"])
    emp = resolve_employee_or_exit(ctx, service, employee)

    if not yes and not click.confirm(f"Delete {emp.name}?"):
        click.echo("Cancelled.")
        return

    try:
        service.delete_employee(emp.id)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Deleted employee {emp.name}")


def register_commands(cli):
    """Register employee commands with main CLI."""
    cli.add_command(employee_group, name="employee")
