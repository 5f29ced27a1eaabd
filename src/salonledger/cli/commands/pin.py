"""Admin PIN commands."""

import click

from salonledger.cli.access import require_admin
from salonledger.cli.error_handling import handle_domain_error
from salonledger.domain.errors import DomainError
from salonledger.domain.navigation import AdminTab


@click.group()
def pin_group():
    """Manage the admin PIN."""
    pass


@pin_group.command("change")
@click.option(
    "--new-pin",
    prompt="New PIN",
    hide_input=True,
    confirmation_prompt=True,
    help="New PIN (at least 4 digits)",
)
@click.pass_context
def change_pin(ctx, new_pin: str):
    """Change the admin PIN."""
    session = require_admin(ctx, AdminTab.HOME)

    try:
        session.gate.change_secret(new_pin)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("PIN updated.")


def register_commands(cli):
    """Register PIN commands with main CLI."""
    cli.add_command(pin_group, name="pin")
