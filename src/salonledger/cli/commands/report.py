"""Commission report commands."""

from pathlib import Path

import click

from salonledger.cli.access import require_admin
from salonledger.cli.employee_resolution import resolve_employee_or_exit
from salonledger.cli.error_handling import handle_domain_error
from salonledger.cli.period_options import period_options, resolve_cli_period
from salonledger.domain.aggregation import ReportService
from salonledger.domain.employee import EmployeeService
from salonledger.domain.entities import PeriodUnit
from salonledger.domain.errors import EmptyReportError
from salonledger.domain.ledger import LedgerService
from salonledger.domain.navigation import AdminTab
from salonledger.domain.period import get_period_range, period_label
from salonledger.domain.report_format import (
    build_messaging_link,
    build_messaging_report,
    build_printable_report,
    build_table_rows,
)

REPORT_TITLES = {
    PeriodUnit.DAY: "Reporte Diario",
    PeriodUnit.WEEK: "Reporte Semanal",
    PeriodUnit.MONTH: "Reporte Mensual",
}


@click.group()
def report_group():
    """Commission reports."""
    pass


@report_group.command("show")
@period_options(default_unit="week")
@click.pass_context
def show_report(ctx, unit: str, offset: int, at: str | None):
    """Show generated sales, commission and local profit per employee."""
    require_admin(ctx, AdminTab.REPORTS)
    period_unit, offset, now = resolve_cli_period(ctx, unit=unit, offset=offset, at=at)

    report = ReportService(ctx.obj["db"]).build_period_report(period_unit, offset, now)
    rows = build_table_rows(report)

    click.echo(f"\n{report.label.capitalize()}")
    if not rows:
        click.echo("No employees found.")
        return

    header = f"{'Colaborador':<24} {'Serv.':>5} {'Comm.':>6} {'Ventas':>12} {'Pago (Com)':>12} {'Ganancia':>12}"
    click.echo(header)
    click.echo("-" * len(header))
    for row in rows:
        if row.is_total:
            click.echo("-" * len(header))
            comm = ""
        else:
            comm = f"{row.commission_percent:g}%"
        click.echo(
            f"{row.label:<24} {row.service_count:>5} {comm:>6} "
            f"{row.generated:>12.2f} {row.payout:>12.2f} {row.local_profit:>12.2f}"
        )


@report_group.command("send")
@click.argument("employee")
@period_options(default_unit="week")
@click.option("--open", "open_link", is_flag=True, help="Open the link in the browser")
@click.pass_context
def send_report(ctx, employee: str, unit: str, offset: int, at: str | None, open_link: bool):
    """Build the WhatsApp report link for one employee."""
    require_admin(ctx, AdminTab.REPORTS)
    db = ctx.obj["db"]
    period_unit, offset, now = resolve_cli_period(ctx, unit=unit, offset=offset, at=at)
    emp = resolve_employee_or_exit(ctx, EmployeeService(db), employee)

    totals = ReportService(db).employee_totals(emp, period_unit, offset, now)
    period = get_period_range(period_unit, offset, now)
    title = f"{REPORT_TITLES[period_unit]} {ctx.obj['business_name']}"
    try:
        text = build_messaging_report(
            totals,
            period_label(period_unit, period),
            title=title,
            currency=ctx.obj["currency"],
        )
    except EmptyReportError as e:
        handle_domain_error(ctx, e)

    link = build_messaging_link(text)
    click.echo(text)
    click.echo()
    click.echo(link)
    if open_link:
        click.launch(link)


@report_group.command("print")
@click.option("--offset", type=int, default=0, show_default=True, help="Months from the current one")
@click.option("--at", help="Reference date instead of today")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the HTML to this file instead of stdout",
)
@click.pass_context
def print_report(ctx, offset: int, at: str | None, output: Path | None):
    """Render the monthly commission report as printable HTML."""
    require_admin(ctx, AdminTab.REPORTS)
    db = ctx.obj["db"]
    _, offset, now = resolve_cli_period(ctx, unit="month", offset=offset, at=at)
    period = get_period_range(PeriodUnit.MONTH, offset, now)

    document = build_printable_report(
        employees=EmployeeService(db).list_employees(),
        transactions=LedgerService(db).list_transactions(start=period.start, end=period.end),
        period=period,
        title=ctx.obj["business_name"],
        currency=ctx.obj["currency"],
    )
    if output is None:
        click.echo(document)
        return
    output.write_text(document, encoding="utf-8")
    click.echo(f"Wrote {output}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
