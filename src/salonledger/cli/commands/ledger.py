"""Ledger commands."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.error_handling import handle_domain_error
from salonledger.cli.period_options import period_options, resolve_cli_period
from salonledger.domain.employee import EmployeeService
from salonledger.domain.errors import DomainError
from salonledger.domain.ledger import LedgerService
from salonledger.domain.navigation import AdminTab
from salonledger.domain.period import get_period_range, period_label
from salonledger.domain.report_format import format_money


@click.group()
def ledger_group():
    """Inspect and maintain the charge ledger."""
    pass


@ledger_group.command("list")
@period_options(default_unit="day")
@click.pass_context
def list_ledger(ctx, unit: str, offset: int, at: str | None):
    """List charges of a period, newest first."""
    require_admin(ctx, AdminTab.HOME)
    db = ctx.obj["db"]
    currency = ctx.obj["currency"]
    period_unit, offset, now = resolve_cli_period(ctx, unit=unit, offset=offset, at=at)
    period = get_period_range(period_unit, offset, now)

    transactions = LedgerService(db).list_transactions(start=period.start, end=period.end)
    click.echo(f"\n{period_label(period_unit, period)}")
    if not transactions:
        click.echo("No charges found.")
        return

    names = {emp.id: emp.name for emp in EmployeeService(db).list_employees()}
    for txn in transactions:
        who = names.get(txn.employee_id, "(deleted)")
        click.echo(
            f"{txn.date:%Y-%m-%d %H:%M}  {who:<16} {txn.service_name:<30} "
            f"{format_money(txn.price, currency):>12}  {txn.payment_method or '-':<13} {txn.id}"
        )
    total = sum(txn.price for txn in transactions)
    click.echo(f"\nTotal: {format_money(total, currency)}")


@ledger_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_charge(ctx, transaction_id: str, yes: bool):
    """Delete a single charge."""
    require_admin(ctx, AdminTab.HOME)
    service = LedgerService(ctx.obj["db"])

    if not yes and not click.confirm(f"Delete charge {transaction_id}?"):
        click.echo("Cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted charge {transaction_id}")


@ledger_group.command("reset")
@click.option("--yes", is_flag=True, help="Skip both confirmations")
@click.pass_context
def reset_ledger(ctx, yes: bool):
    """Delete every charge and expense."""
    require_admin(ctx, AdminTab.FINANCE)
    service = LedgerService(ctx.obj["db"])

    if not yes:
        if not click.confirm("Delete ALL charges and expenses?"):
            click.echo("Cancelled.")
            return
        if not click.confirm("This cannot be undone. Are you absolutely sure?"):
            click.echo("Cancelled.")
            return

    deleted, failed = service.reset_ledger()
    click.echo(f"Deleted {deleted} entries")
    if failed:
        click.echo(f"Error: {failed} entries could not be deleted", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
