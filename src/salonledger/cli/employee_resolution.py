"""CLI helper for resolving employees."""

import click

from salonledger.domain.employee import EmployeeService
from salonledger.domain.entities import Employee
from salonledger.domain.errors import DomainError


def resolve_employee_or_exit(
    ctx: click.Context, employee_service: EmployeeService, identifier: str
) -> Employee:
    """Resolve employee ID or name, exiting on failure."""
    try:
        return employee_service.find_employee(identifier)
    except DomainError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
