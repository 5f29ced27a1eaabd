"""CLI helpers for report period resolution."""

from datetime import datetime
from typing import Callable

import click

from salonledger.domain.entities import PeriodUnit
from salonledger.utils.date_parser import parse_date


def period_options(default_unit: str = "week") -> Callable:
    """Attach --unit/--offset/--at options to a command."""

    def decorator(func: Callable) -> Callable:
        func = click.option(
            "--at",
            "at",
            help="Reference date instead of today (YYYY-MM-DD or 'yesterday', ...)",
        )(func)
        func = click.option(
            "--offset",
            type=int,
            default=0,
            show_default=True,
            help="Periods to move from the current one (-1 = previous)",
        )(func)
        func = click.option(
            "--unit",
            type=click.Choice([u.value for u in PeriodUnit], case_sensitive=False),
            default=default_unit,
            show_default=True,
            help="Period unit",
        )(func)
        return func

    return decorator


def resolve_cli_period(
    ctx: click.Context, *, unit: str, offset: int, at: str | None
) -> tuple[PeriodUnit, int, datetime]:
    """Resolve CLI period options into (unit, offset, reference instant)."""
    now = datetime.now()
    if at:
        try:
            day = parse_date(at)
        except ValueError as e:
            click.echo(f"Error: Invalid --at date: {e}", err=True)
            ctx.exit(1)
        now = now.replace(year=day.year, month=day.month, day=day.day)

    return PeriodUnit(unit.lower()), offset, now
