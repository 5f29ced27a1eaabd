"""Booking commands."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.employee_resolution import resolve_employee_or_exit
from salonledger.cli.error_handling import handle_domain_error
from salonledger.domain.booking import BookingService
from salonledger.domain.employee import EmployeeService
from salonledger.domain.errors import DomainError
from salonledger.domain.navigation import AdminTab, Event, Navigator
from salonledger.domain.report_format import (
    build_booking_confirmation,
    build_messaging_link,
)
from salonledger.utils.date_parser import combine_date_time


@click.command("book")
@click.option("--name", "client_name", prompt="Your name", help="Client name")
@click.option("--phone", default="", help="Client phone (for the confirmation link)")
@click.option("--service", prompt="Service", help="Service name")
@click.option("--with", "professional", prompt="Professional", help="Employee name or ID")
@click.option("--date", "day", prompt="Date (YYYY-MM-DD)", help="Appointment date")
@click.option("--time", "hour", prompt="Time (HH:MM)", help="Appointment time")
@click.pass_context
def book(
    ctx,
    client_name: str,
    phone: str,
    service: str,
    professional: str,
    day: str,
    hour: str,
):
    """Book an appointment (no PIN required)."""
    db = ctx.obj["db"]
    navigator = Navigator()
    navigator.dispatch(Event.OPEN_BOOKING)

    emp = resolve_employee_or_exit(ctx, EmployeeService(db), professional)
    try:
        when = combine_date_time(day, hour)
    except ValueError as e:
        click.echo(f"Error: Invalid date or time: {e}", err=True)
        ctx.exit(1)

    bookings = BookingService(db)
    try:
        booking_id = bookings.create_booking(
            client_name=client_name,
            service=service,
            professional_id=emp.id,
            date=when,
            client_phone=phone,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    navigator.dispatch(Event.BOOKING_SUBMITTED)

    click.echo(f"Booking confirmed for {when:%Y-%m-%d %H:%M} with {emp.name} (ID: {booking_id})")
    if phone:
        text = build_booking_confirmation(
            bookings.get_booking(booking_id), emp, ctx.obj["business_name"]
        )
        click.echo(build_messaging_link(text, phone, ctx.obj["country_code"]))


@click.group()
def booking_group():
    """Manage appointments."""
    pass


@booking_group.command("list")
@click.pass_context
def list_bookings(ctx):
    """List appointments, earliest first."""
    require_admin(ctx, AdminTab.BOOKINGS)
    db = ctx.obj["db"]

    bookings = BookingService(db).list_bookings()
    if not bookings:
        click.echo("No bookings.")
        return

    names = {emp.id: emp.name for emp in EmployeeService(db).list_employees()}
    for b in bookings:
        who = names.get(b.professional_id, "(deleted)")
        click.echo(
            f"{b.date:%Y-%m-%d %H:%M}  {b.client_name:<20} {b.client_phone:<12} "
            f"{b.service:<20} {who:<16} {b.status.value:<10} {b.id}"
        )


@booking_group.command("cancel")
@click.argument("booking_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def cancel_booking(ctx, booking_id: str, yes: bool):
    """Cancel an appointment."""
    require_admin(ctx, AdminTab.BOOKINGS)
    service = BookingService(ctx.obj["db"])

    if not yes and not click.confirm(f"Cancel booking {booking_id}?"):
        click.echo("Kept.")
        return

    try:
        service.cancel_booking(booking_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Cancelled booking {booking_id}")


def register_commands(cli):
    """Register booking commands with main CLI."""
    cli.add_command(book)
    cli.add_command(booking_group, name="booking")
