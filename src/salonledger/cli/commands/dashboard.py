"""Dashboard home command."""

import click

from salonledger.cli.access import require_admin
from salonledger.domain.entities import PeriodUnit
from salonledger.domain.navigation import AdminTab
from salonledger.domain.replica import LiveReplica
from salonledger.domain.report_format import format_money


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show today's sales per employee and this month's cash."""
    require_admin(ctx, AdminTab.HOME)
    currency = ctx.obj["currency"]

    replica = LiveReplica(ctx.obj["db"])
    replica.start()
    try:
        if not replica.employees:
            click.echo("No employees yet. Run 'seed' to load sample data.")
            return

        today = replica.report(PeriodUnit.DAY)
        click.echo(f"\nHoy: {today.label}")
        for row in today.rows:
            click.echo(
                f"  {row.employee.name:<20} {row.employee.role:<20} "
                f"{format_money(row.generated, currency):>14}"
            )

        month = replica.report(PeriodUnit.MONTH).ledger
        click.echo(f"\nMes: ingresos {format_money(month.income, currency)}, "
                   f"gastos {format_money(month.expenses, currency)}, "
                   f"caja neta {format_money(month.profit, currency)}")
        click.echo(f"Citas registradas: {len(replica.bookings)}")
    finally:
        replica.stop()


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
