"""Reporting period calculation."""

from datetime import datetime, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from salonledger.domain.entities import PeriodRange, PeriodUnit

MONTH_NAMES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

WEEKDAY_NAMES = (
    "lunes",
    "martes",
    "miércoles",
    "jueves",
    "viernes",
    "sábado",
    "domingo",
)


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def get_period_range(
    unit: Union[PeriodUnit, str],
    offset: int = 0,
    now: Optional[datetime] = None,
) -> PeriodRange:
    """Get the range of the period ``offset`` units away from the one containing ``now``.

    Weeks start on Monday. Every range ends at 23:59:59.999 of its last day,
    so the next period starts exactly one millisecond later.

    Args:
        unit: Period unit (day, week, month)
        offset: Number of periods to move; negative goes back in time
        now: Reference instant (defaults to the current local time)

    Returns:
        PeriodRange for the requested period

    Raises:
        ValueError: If unit is not recognized
    """
    unit = PeriodUnit(unit)
    if now is None:
        now = datetime.now()
    today = _start_of_day(now)

    if unit == PeriodUnit.DAY:
        start = today + timedelta(days=offset)
        end = _end_of_day(start)
    elif unit == PeriodUnit.WEEK:
        # isoweekday(): Monday=1 .. Sunday=7
        monday = today - timedelta(days=today.isoweekday() - 1)
        start = monday + timedelta(weeks=offset)
        end = _end_of_day(start + timedelta(days=6))
    else:
        start = today.replace(day=1) + relativedelta(months=offset)
        # Day 0 of the following month
        end = _end_of_day(start + relativedelta(months=1) - timedelta(days=1))

    return PeriodRange(start=start, end=end)


def period_label(unit: Union[PeriodUnit, str], period: PeriodRange) -> str:
    """Render the navigation label for a period.

    - day: "lunes 19 octubre"
    - week: "19 - 25 oct"
    - month: "octubre 2026"
    """
    unit = PeriodUnit(unit)
    start, end = period.start, period.end
    if unit == PeriodUnit.DAY:
        return f"{WEEKDAY_NAMES[start.weekday()]} {start.day} {MONTH_NAMES[start.month - 1]}"
    if unit == PeriodUnit.WEEK:
        return f"{start.day} - {end.day} {MONTH_NAMES[end.month - 1][:3]}"
    return f"{MONTH_NAMES[start.month - 1]} {start.year}"
