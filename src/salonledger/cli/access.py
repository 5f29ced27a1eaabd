"""CLI helpers for the admin PIN."""

import click

from salonledger.domain.access import PlaintextPinGate
from salonledger.domain.errors import AccessDeniedError
from salonledger.domain.navigation import AdminSession, AdminTab


def require_admin(ctx: click.Context, tab: AdminTab = AdminTab.HOME) -> AdminSession:
    """Open the admin dashboard on ``tab`` or exit.

    The PIN comes from --pin / SALONLEDGER_PIN, or is prompted for.
    """
    obj = ctx.find_root().obj
    session = obj.get("session")
    if session is not None and session.is_admin:
        if session.state.tab != tab:
            session.select_tab(tab)
        return session

    session = AdminSession(PlaintextPinGate(obj["db"]))
    pin = obj.get("pin")
    if pin is None:
        pin = click.prompt("PIN", hide_input=True)
    try:
        session.login(pin, tab)
    except AccessDeniedError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    obj["session"] = session
    return session
