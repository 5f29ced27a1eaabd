"""Register charge command."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.employee_resolution import resolve_employee_or_exit
from salonledger.cli.error_handling import handle_domain_error
from salonledger.domain.employee import EmployeeService
from salonledger.domain.entities import PaymentMethod
from salonledger.domain.errors import DomainError, SplitMismatchError
from salonledger.domain.ledger import LedgerService
from salonledger.domain.navigation import AdminTab
from salonledger.domain.report_format import format_money
from salonledger.domain.split_payment import ChargeDraft

METHOD_CHOICES = [m.value for m in PaymentMethod]


def _parse_split(value: str) -> tuple[str, str]:
    """Split "YAPE:40" / "YAPE=40" into method and amount text."""
    for sep in (":", "="):
        if sep in value:
            method, amount = value.split(sep, 1)
            return method.strip(), amount.strip()
    raise click.BadParameter(f"'{value}' is not METHOD:AMOUNT", param_hint="--split")


@click.command("charge")
@click.argument("employee")
@click.argument("service")
@click.argument("price")
@click.option(
    "--method",
    type=click.Choice(METHOD_CHOICES, case_sensitive=False),
    default=PaymentMethod.EFECTIVO.value,
    show_default=True,
    help="Payment method for a single payment",
)
@click.option(
    "--split",
    "splits",
    multiple=True,
    help="Partial payment as METHOD:AMOUNT (repeat to split the charge)",
)
@click.pass_context
def register_charge(
    ctx,
    employee: str,
    service: str,
    price: str,
    method: str,
    splits: tuple[str, ...],
):
    """Register a charge for a service.

    Examples:
        salonledger charge Diana Cortes 50
        salonledger charge Diana Tintes 100 --split EFECTIVO:60 --split YAPE:40
    """
    require_admin(ctx, AdminTab.HOME)
    db = ctx.obj["db"]
    currency = ctx.obj["currency"]
    emp = resolve_employee_or_exit(ctx, EmployeeService(db), employee)

    draft = ChargeDraft(method)
    try:
        for split in splits:
            split_method, amount = _parse_split(split)
            draft.add_partial(split_method, amount)
        transaction_ids = LedgerService(db).register_charge(
            employee_id=emp.id,
            service_name=service,
            price=price,
            draft=draft,
        )
    except SplitMismatchError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(f"Difference: {format_money(e.difference, currency)}", err=True)
        ctx.exit(1)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Registered {len(transaction_ids)} charge(s) for {emp.name}")
    for transaction_id in transaction_ids:
        txn = db.get_transaction(transaction_id)
        click.echo(
            f"  {txn.service_name}: {format_money(txn.price, currency)} "
            f"({txn.payment_method})"
        )


def register_commands(cli):
    """Register charge command with main CLI."""
    cli.add_command(register_charge)
