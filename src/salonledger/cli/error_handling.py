"""CLI error handling helpers."""

import click
from loguru import logger

from salonledger.domain.errors import DomainError, PersistenceError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Storage failures were already logged where they happened; the operator
    only gets a short notice that nothing was saved.
    """
    if isinstance(error, PersistenceError):
        click.echo(f"Error: changes were not saved ({error})", err=True)
    else:
        logger.debug("Command {} rejected: {}", ctx.info_name, error)
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
