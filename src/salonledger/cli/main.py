"""Main CLI entry point."""

import click

from salonledger.database.factories import create_sqlite_database
from salonledger.domain.report_format import (
    DEFAULT_BUSINESS_NAME,
    DEFAULT_COUNTRY_CODE,
    DEFAULT_CURRENCY,
)
from salonledger.utils.log_setup import configure_logging

# Import and register all commands at module level
from salonledger.cli.commands import (
    booking,
    charge,
    dashboard,
    employee,
    expense,
    ledger,
    pin,
    report,
    seed,
    service,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SALONLEDGER_DB_PATH environment variable)",
    envvar="SALONLEDGER_DB_PATH",
)
@click.option(
    "--pin",
    help="Admin PIN for admin commands (prompted when missing)",
    envvar="SALONLEDGER_PIN",
)
@click.option(
    "--business-name",
    default=DEFAULT_BUSINESS_NAME,
    show_default=True,
    envvar="SALONLEDGER_BUSINESS_NAME",
    help="Business name used in reports and messages",
)
@click.option(
    "--currency",
    default=DEFAULT_CURRENCY,
    show_default=True,
    envvar="SALONLEDGER_CURRENCY",
    help="Currency prefix for amounts",
)
@click.option(
    "--country-code",
    default=DEFAULT_COUNTRY_CODE,
    show_default=True,
    envvar="SALONLEDGER_COUNTRY_CODE",
    help="Phone country code for WhatsApp links",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    envvar="SALONLEDGER_LOG_LEVEL",
    type=click.Choice(
        ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        case_sensitive=False,
    ),
    help="Log level",
)
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    pin: str | None,
    business_name: str,
    currency: str,
    country_code: str,
    log_level: str,
):
    """Salonledger - Salon bookings, charges, expenses and commissions.

    Clients can book appointments; everything else requires the admin PIN.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj.update(
        pin=pin,
        business_name=business_name,
        currency=currency,
        country_code=country_code,
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
employee.register_commands(cli)
service.register_commands(cli)
charge.register_commands(cli)
ledger.register_commands(cli)
expense.register_commands(cli)
report.register_commands(cli)
booking.register_commands(cli)
pin.register_commands(cli)
dashboard.register_commands(cli)
seed.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
