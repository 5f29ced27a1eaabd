"""Expense and finance commands."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.error_handling import handle_domain_error
from salonledger.domain.aggregation import ReportService
from salonledger.domain.entities import EXPENSE_CATEGORIES
from salonledger.domain.errors import DomainError
from salonledger.domain.expense import ExpenseService
from salonledger.domain.navigation import AdminTab
from salonledger.domain.report_format import format_money


@click.group()
def expense_group():
    """Record salon expenses."""
    pass


@expense_group.command("add")
@click.argument("category", type=click.Choice(EXPENSE_CATEGORIES))
@click.argument("amount")
@click.option("--note", default="", help="Optional description")
@click.pass_context
def add_expense(ctx, category: str, amount: str, note: str):
    """Record an expense."""
    require_admin(ctx, AdminTab.FINANCE)
    service = ExpenseService(ctx.obj["db"])

    try:
        expense_id = service.register_expense(category, amount, note)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded expense {expense_id}")


@expense_group.command("list")
@click.pass_context
def list_expenses(ctx):
    """List this month's expenses, newest first."""
    require_admin(ctx, AdminTab.FINANCE)
    currency = ctx.obj["currency"]

    expenses = ExpenseService(ctx.obj["db"]).month_history()
    if not expenses:
        click.echo("No expenses this month.")
        return

    for exp in expenses:
        note = exp.description or f"{exp.date:%Y-%m-%d}"
        click.echo(
            f"{exp.category:<15} {note:<30} "
            f"{'- ' + format_money(exp.amount, currency):>14}  {exp.id}"
        )


@expense_group.command("delete")
@click.argument("expense_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_expense(ctx, expense_id: str, yes: bool):
    """Delete an expense."""
    require_admin(ctx, AdminTab.FINANCE)
    service = ExpenseService(ctx.obj["db"])

    if not yes and not click.confirm(f"Delete expense {expense_id}?"):
        click.echo("Cancelled.")
        return

    try:
        service.delete_expense(expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted expense {expense_id}")


@click.command("finance")
@click.pass_context
def finance_overview(ctx):
    """Show this month's income, expenses and net cash."""
    require_admin(ctx, AdminTab.FINANCE)
    currency = ctx.obj["currency"]

    totals = ReportService(ctx.obj["db"]).monthly_overview()
    click.echo(f"{'Ingresos':<12} {format_money(totals.income, currency):>14}")
    click.echo(f"{'Gastos':<12} {format_money(totals.expenses, currency):>14}")
    click.echo(f"{'Caja Neta':<12} {format_money(totals.profit, currency):>14}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
    cli.add_command(finance_overview)
